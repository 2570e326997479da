import httpx
import pytest

from moviemood.services.models import Movie, PersonDetail
from moviemood.services.tmdb import TMDbClient, TMDbError


def test_search_movies_maps_results_in_order(tmdb_factory, requests_seen, movie_payload):
    client = tmdb_factory(
        {
            "/search/movie": {
                "results": [
                    movie_payload(27205, "Inception"),
                    {"id": 64956, "title": "Inception: The Cobol Job", "vote_average": 7},
                ]
            }
        }
    )
    movies = client.search_movies("Inception%20Cobol")
    assert movies == [
        Movie(27205, "Inception", "Inception overview", "2010-07-15", 8.4),
        Movie(64956, "Inception: The Cobol Job", "", "", 7.0),
    ]
    query = requests_seen[0].url.query
    assert b"api_key=test-key" in query
    assert b"language=en-US" in query
    assert b"query=Inception%20Cobol" in query


def test_search_movies_missing_title_is_upstream_error(tmdb_factory):
    client = tmdb_factory({"/search/movie": {"results": [{"id": 1, "overview": "no title"}]}})
    with pytest.raises(TMDbError):
        client.search_movies("x")


def test_search_movies_without_results_key_is_upstream_error(tmdb_factory):
    client = tmdb_factory({"/search/movie": {"status_message": "Invalid API key"}})
    with pytest.raises(TMDbError):
        client.search_movies("x")


def test_search_people_maps_known_for(tmdb_factory, movie_payload):
    client = tmdb_factory(
        {
            "/search/person": {
                "results": [
                    {
                        "id": 31,
                        "name": "Tom Hanks",
                        "known_for": [
                            movie_payload(13, "Forrest Gump"),
                            {"id": 1400, "name": "Band of Brothers", "media_type": "tv"},
                        ],
                    },
                    {"id": 99, "name": "Tom Hanks Jr."},
                ]
            }
        }
    )
    first, second = client.search_people("Tom%20Hanks")
    assert first.id == 31
    assert [movie.title for movie in first.known_for] == ["Forrest Gump", "Band of Brothers"]
    assert second.known_for == ()


def test_fetch_person_detail_tolerates_nulls(tmdb_factory, requests_seen):
    client = tmdb_factory(
        {"/person/31": {"birthday": "1956-07-09", "deathday": None, "gender": 2, "biography": ""}}
    )
    detail = client.fetch_person_detail(31)
    assert detail == PersonDetail(birthday="1956-07-09", biography="", gender_code=2)
    assert b"query=" not in requests_seen[0].url.query


def test_fetch_recommendations_defaults_missing_fields(tmdb_factory):
    client = tmdb_factory(
        {"/movie/27205/recommendations": {"results": [{"title": "Interstellar"}, {"id": 5, "title": None}]}}
    )
    assert client.fetch_recommendations(27205) == [
        Movie(0, "Interstellar", "", "", 0.0),
        Movie(5, "", "", "", 0.0),
    ]


def test_http_error_status_is_upstream_error(tmdb_factory):
    client = tmdb_factory({"/search/movie": lambda request: httpx.Response(503, text="busy")})
    with pytest.raises(TMDbError):
        client.search_movies("x")


def test_invalid_json_is_upstream_error(tmdb_factory):
    client = tmdb_factory({"/search/movie": lambda request: httpx.Response(200, content=b"<html>")})
    with pytest.raises(TMDbError):
        client.search_movies("x")


def test_timeout_is_upstream_error(tmdb_factory):
    def _hang(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = tmdb_factory({"/search/person": _hang})
    with pytest.raises(TMDbError):
        client.search_people("x")


def test_missing_api_key_fails_before_request(requests_seen):
    client = TMDbClient(
        api_key=None,
        base_url="https://tmdb.test/3",
        transport=httpx.MockTransport(lambda request: requests_seen.append(request)),
    )
    with pytest.raises(TMDbError, match="TMDB_API_KEY"):
        client.search_movies("x")
    assert requests_seen == []


def test_settings_supply_defaults(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env-key")
    client = TMDbClient()
    assert client.api_key == "env-key"
    assert client.base_url == "https://api.themoviedb.org/3"
    assert client.language == "en-US"
    assert client.timeout == 10.0


@pytest.mark.parametrize("query", ["a\nb", "a\x00b", "x" * 70_000])
def test_unusable_query_is_upstream_error(tmdb_factory, requests_seen, query):
    client = tmdb_factory({"/search/movie": {"results": []}})
    with pytest.raises(TMDbError):
        client.search_movies(query)
    assert requests_seen == []
