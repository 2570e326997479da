"""Thin wrapper around the TMDb API to fetch movie and person metadata."""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from moviemood.core.config import get_settings
from moviemood.services.models import ActorCandidate, Movie, PersonDetail


logger = logging.getLogger(__name__)

_Payload = TypeVar("_Payload", bound=BaseModel)


class TMDbError(Exception):
    """Raised when TMDb is unreachable or returns an unusable payload."""


class _Shape(BaseModel):
    model_config = ConfigDict(extra="ignore")


# /search/movie: id and title are mandatory for a usable hit.
class _MovieHit(_Shape):
    id: int
    title: str
    overview: str | None = None
    release_date: str | None = None
    vote_average: float | None = None

    def to_movie(self) -> Movie:
        return Movie(
            id=self.id,
            title=self.title,
            overview=self.overview or "",
            release_date=self.release_date or "",
            vote_average=self.vote_average or 0.0,
        )


class _MovieSearchPage(_Shape):
    results: list[_MovieHit]


# known_for mixes movies and TV shows; TV entries carry "name" instead of "title".
class _KnownForEntry(_Shape):
    id: int
    title: str | None = None
    name: str | None = None
    overview: str | None = None
    release_date: str | None = None
    vote_average: float | None = None

    def to_movie(self) -> Movie:
        return Movie(
            id=self.id,
            title=self.title or self.name or "",
            overview=self.overview or "",
            release_date=self.release_date or "",
            vote_average=self.vote_average or 0.0,
        )


class _PersonHit(_Shape):
    id: int
    name: str
    known_for: list[_KnownForEntry] = []

    def to_candidate(self) -> ActorCandidate:
        return ActorCandidate(
            id=self.id,
            name=self.name,
            known_for=tuple(entry.to_movie() for entry in self.known_for),
        )


class _PersonSearchPage(_Shape):
    results: list[_PersonHit]


class _PersonDetailPayload(_Shape):
    birthday: str | None = None
    deathday: str | None = None
    biography: str | None = None
    place_of_birth: str | None = None
    gender: int | None = None


# Recommendations are lenient: anything missing falls back to an empty value.
class _Recommendation(_Shape):
    id: int | None = None
    title: str | None = None
    overview: str | None = None
    release_date: str | None = None
    vote_average: float | None = None

    def to_movie(self) -> Movie:
        return Movie(
            id=self.id or 0,
            title=self.title or "",
            overview=self.overview or "",
            release_date=self.release_date or "",
            vote_average=self.vote_average or 0.0,
        )


class _RecommendationPage(_Shape):
    results: list[_Recommendation] = []


class TMDbClient:
    """Simple TMDb HTTP client using API key auth.

    ``query`` arguments are appended to the URL as given, so callers are
    expected to hand over an already URL-safe search term.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key or settings.tmdb_api_key
        self.base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        self.language = language or settings.tmdb_language
        self.timeout = timeout if timeout is not None else settings.tmdb_timeout
        self._transport = transport

    def _build_url(self, path: str, query: str | None) -> str:
        url = f"{self.base_url}{path}?" + urlencode(
            {"api_key": self.api_key, "language": self.language}
        )
        if query is not None:
            url = f"{url}&query={query}"
        return url

    def _request(self, path: str, *, query: str | None = None) -> Any:
        if not self.api_key:
            raise TMDbError("TMDB_API_KEY is not configured")
        try:
            url = self._build_url(path, query)
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TMDbError(f"TMDb returned {exc.response.status_code} for {path}") from exc
        # InvalidURL (control characters, oversized query) is not an HTTPError.
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TMDbError(f"TMDb request to {path} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise TMDbError(f"TMDb returned invalid JSON for {path}") from exc

    def _fetch(self, shape: type[_Payload], path: str, *, query: str | None = None) -> _Payload:
        payload = self._request(path, query=query)
        logger.debug("TMDb %s payload: %s", path, payload)
        try:
            return shape.model_validate(payload)
        except ValidationError as exc:
            raise TMDbError(f"TMDb payload for {path} has an unexpected shape") from exc

    def search_movies(self, query: str) -> list[Movie]:
        """Search movies by title and return every hit in catalog order."""

        page = self._fetch(_MovieSearchPage, "/search/movie", query=query)
        return [hit.to_movie() for hit in page.results]

    def search_people(self, query: str) -> list[ActorCandidate]:
        page = self._fetch(_PersonSearchPage, "/search/person", query=query)
        return [hit.to_candidate() for hit in page.results]

    def fetch_person_detail(self, person_id: int) -> PersonDetail:
        detail = self._fetch(_PersonDetailPayload, f"/person/{person_id}")
        return PersonDetail(
            birthday=detail.birthday,
            deathday=detail.deathday,
            biography=detail.biography,
            place_of_birth=detail.place_of_birth,
            gender_code=detail.gender,
        )

    def fetch_recommendations(self, movie_id: int) -> list[Movie]:
        """Return recommendations for a movie; callers decide how many to keep."""

        page = self._fetch(_RecommendationPage, f"/movie/{movie_id}/recommendations")
        return [entry.to_movie() for entry in page.results]
