"""Plain-text rendering of lookup results for chat replies."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from moviemood.services.models import Actor, Movie


def format_rating(value: float) -> str:
    """Shortest decimal form of a rating: 7.0 -> "7", 8.25 -> "8.25"."""

    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_movies(movies: Sequence[Movie], is_suggestion: bool = False) -> str:
    kind = "suggestions" if is_suggestion else "results"
    lines = [
        f"Movie #{index}: {{Title: {movie.title}, Overview: {movie.overview}, "
        f"Rating: {format_rating(movie.vote_average)}, Release Date: {movie.release_date}}}"
        for index, movie in enumerate(movies, start=1)
    ]
    return f"Found {len(movies)} matching {kind}.\n" + "\n".join(lines)


def format_titles(movies: Sequence[Movie]) -> str:
    return "{" + ", ".join(movie.title for movie in movies) + "}"


def format_actors(actors: Sequence[Actor]) -> str:
    lines = []
    for index, actor in enumerate(actors, start=1):
        optional = ""
        if actor.is_deceased:
            optional += f", Deathday: {actor.deathday}"
        if actor.biography:
            optional += f", Biography: {actor.biography}"
        lines.append(
            f"Actor #{index}: {{Name: {actor.name}, Birthday: {actor.birthday}{optional}, "
            f"Gender: {actor.gender.value}, Place of Birth: {actor.place_of_birth}, "
            f"Known For: {format_titles(actor.known_for)}}}"
        )
    return f"Found {len(actors)} matching results.\n" + "\n".join(lines)
