from typing import Any, Callable

import httpx
import pytest

from moviemood.core.config import get_settings
from moviemood.services.tmdb import TMDbClient

BASE_URL = "https://tmdb.test/3"


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    # Keep a developer's .env/TMDB key out of the tests
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _movie_payload(movie_id: int, title: str, **extra: Any) -> dict[str, Any]:
    payload = {
        "id": movie_id,
        "title": title,
        "overview": f"{title} overview",
        "release_date": "2010-07-15",
        "vote_average": 8.4,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def tmdb_factory(requests_seen) -> Callable[[dict[str, Any]], TMDbClient]:
    """Build a TMDbClient whose HTTP calls are answered from a path -> payload map.

    A route value may be a JSON-able payload or a callable taking the request
    and returning an ``httpx.Response`` (or raising a transport error).
    """

    def _build(routes: dict[str, Any]) -> TMDbClient:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            path = request.url.path.removeprefix("/3")
            route = routes.get(path)
            if route is None:
                return httpx.Response(404, json={"status_message": "The resource could not be found."})
            if callable(route):
                return route(request)
            return httpx.Response(200, json=route)

        return TMDbClient(
            api_key="test-key",
            base_url=BASE_URL,
            language="en-US",
            transport=httpx.MockTransport(handler),
        )

    return _build


@pytest.fixture
def movie_payload() -> Callable[..., dict[str, Any]]:
    """Factory for TMDb movie JSON objects."""

    return _movie_payload
