"""Actor lookup: person search followed by a biography enrichment step."""

from __future__ import annotations

import logging

from moviemood.services.models import Actor, ActorCandidate
from moviemood.services.tmdb import TMDbClient


logger = logging.getLogger(__name__)


class ActorResolver:
    """Resolve a "First Last" name into at most one fully enriched Actor."""

    def __init__(self, client: TMDbClient) -> None:
        self.client = client

    def resolve(self, search_query: str, exact_full_name: str) -> list[Actor]:
        candidate = self.select_candidate(search_query, exact_full_name)
        if candidate is None:
            return []
        return [self.enrich(candidate)]

    def select_candidate(self, search_query: str, exact_full_name: str) -> ActorCandidate | None:
        """Return the first search hit whose name equals the requested one, ignoring case."""

        wanted = exact_full_name.lower()
        for candidate in self.client.search_people(search_query):
            if candidate.name.lower() == wanted:
                return candidate
        logger.info("No exact person match for %r", exact_full_name)
        return None

    def enrich(self, candidate: ActorCandidate) -> Actor:
        # TMDbError from the detail call propagates; the candidate is dropped.
        detail = self.client.fetch_person_detail(candidate.id)
        return Actor.from_candidate(candidate, detail)
