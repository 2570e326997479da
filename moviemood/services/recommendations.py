"""Movie suggestions based on a user's favourite title."""

from __future__ import annotations

import logging

from moviemood.services.models import Movie
from moviemood.services.tmdb import TMDbClient


logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 10


class RecommendationResolver:
    def __init__(self, client: TMDbClient, *, limit: int = RECOMMENDATION_LIMIT) -> None:
        self.client = client
        self.limit = limit

    def resolve(self, movie_query: str) -> list[Movie]:
        """Take the first search hit as the favourite and return its recommendations."""

        hits = self.client.search_movies(movie_query)
        if not hits:
            return []
        favourite = hits[0]
        logger.debug("Using %r (id=%s) as favourite movie", favourite.title, favourite.id)
        return self.client.fetch_recommendations(favourite.id)[: self.limit]
