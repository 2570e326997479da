"""Keyword command parsing and routing for the /chat endpoint.

A chat message is a command keyword followed by its argument, e.g.
``Movie Inception``, ``Actress Meryl Streep`` or ``Favourite Inception``.
The dispatcher validates the argument shape, runs the matching lookup and
folds the result (or the failure) into a :class:`CommandOutcome`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from moviemood.services.actors import ActorResolver
from moviemood.services.formatter import format_actors, format_movies
from moviemood.services.recommendations import RecommendationResolver
from moviemood.services.tmdb import TMDbClient, TMDbError


logger = logging.getLogger(__name__)

INVALID_COMMAND_MESSAGE = (
    "Invalid Command! Please use the following commands: "
    "{Movie [MOVIE_NAME], Actor/Actress [ACTOR_NAME/ACTRESS_NAME], Suggest}"
)
MOVIE_NAME_MESSAGE = "The movie name should consist of at least one word!"
ACTOR_NAME_MESSAGE = "The actor/actress should consist of a First Name and Last Name!"
SUGGEST_MESSAGE = (
    "A movie suggestion will be provided based on a favourite movie of yours. "
    "Use the following format: Favourite [Movie_Name]."
)
NO_RESULTS_MESSAGE = "No Results!"
UPSTREAM_ERROR_MESSAGE = "The server can not process your request right now, try again later!"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    kind: OutcomeKind
    message: str

    @classmethod
    def success(cls, message: str) -> CommandOutcome:
        return cls(OutcomeKind.SUCCESS, message)

    @classmethod
    def validation_error(cls, message: str) -> CommandOutcome:
        return cls(OutcomeKind.VALIDATION_ERROR, message)

    @classmethod
    def upstream_error(cls) -> CommandOutcome:
        return cls(OutcomeKind.UPSTREAM_ERROR, UPSTREAM_ERROR_MESSAGE)

    @property
    def is_error(self) -> bool:
        return self.kind is not OutcomeKind.SUCCESS


def encode_spaces(text: str) -> str:
    """Make a search term URL-safe the way TMDb expects it here: spaces only."""

    return text.replace(" ", "%20")


class CommandDispatcher:
    """Parse a chat message and answer it using TMDb lookups."""

    def __init__(self, client: TMDbClient | None = None) -> None:
        self.client = client or TMDbClient()
        self.actors = ActorResolver(self.client)
        self.recommendations = RecommendationResolver(self.client)

    def resolve(self, message: str) -> CommandOutcome:
        words = message.split(" ")
        command = words[0]
        argument = message.removeprefix(command + " ")

        if len(words) >= 2 and (not argument or not words[1]):
            return CommandOutcome.validation_error(INVALID_COMMAND_MESSAGE)

        keyword = command.lower()
        try:
            if keyword == "movie":
                if len(words) < 2:
                    return CommandOutcome.validation_error(MOVIE_NAME_MESSAGE)
                movies = self.client.search_movies(encode_spaces(argument))
                return self._answer(movies, lambda: format_movies(movies))

            if keyword in {"actor", "actress"}:
                if len(words) != 3:
                    return CommandOutcome.validation_error(ACTOR_NAME_MESSAGE)
                actors = self.actors.resolve(encode_spaces(argument), argument)
                return self._answer(actors, lambda: format_actors(actors))

            if keyword == "suggest":
                return CommandOutcome.success(SUGGEST_MESSAGE)

            if keyword == "favourite":
                if len(words) < 2:
                    return CommandOutcome.validation_error(MOVIE_NAME_MESSAGE)
                movies = self.recommendations.resolve(encode_spaces(argument))
                return self._answer(movies, lambda: format_movies(movies, is_suggestion=True))
        except TMDbError:
            logger.warning("TMDb lookup failed for %r", message, exc_info=True)
            return CommandOutcome.upstream_error()

        return CommandOutcome.validation_error(INVALID_COMMAND_MESSAGE)

    @staticmethod
    def _answer(results, render) -> CommandOutcome:
        if not results:
            return CommandOutcome.success(NO_RESULTS_MESSAGE)
        return CommandOutcome.success(render())
