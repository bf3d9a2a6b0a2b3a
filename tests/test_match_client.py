"""
Tests for the championship service HTTP client.
"""

import httpx
import pytest
from bson import ObjectId

from matchbet.clients.match_client import (
    MatchClient,
    MatchFound,
    MatchLookupFailed,
    MatchMissing,
)
from matchbet.models.match import MatchStatus

BASE_URL = "http://championship.test"


def _client(handler) -> MatchClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return MatchClient(BASE_URL, http_client=http_client)


def _payload(match_id: str, **overrides) -> dict:
    payload = {
        "id": match_id,
        "home_team_name": "Palmeiras",
        "away_team_name": "Flamengo",
        "home_team_code": "PAL",
        "away_team_code": "FLA",
        "home_score": None,
        "away_score": None,
        "status": "scheduled",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def match_id() -> str:
    return str(ObjectId())


class TestGetMatch:
    """Tests for MatchClient.get_match()."""

    async def test_found(self, match_id):
        """A 200 response parses into MatchFound."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json=_payload(match_id, home_score=2, away_score=1, status="played")
            )

        result = await _client(handler).get_match(match_id)

        assert isinstance(result, MatchFound)
        assert result.match.id == match_id
        assert result.match.status == MatchStatus.PLAYED
        assert (result.match.home_score, result.match.away_score) == (2, 1)
        assert requests[0].method == "GET"
        assert requests[0].url == httpx.URL(f"{BASE_URL}/matches/{match_id}")

    async def test_accepts_objectid(self, match_id):
        """ObjectIds are rendered into the path as hex strings."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"/matches/{match_id}"
            return httpx.Response(200, json=_payload(match_id))

        result = await _client(handler).get_match(ObjectId(match_id))
        assert isinstance(result, MatchFound)

    async def test_not_found(self, match_id):
        """A 404 response gives MatchMissing."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "MatchNotFoundError"})

        result = await _client(handler).get_match(match_id)

        assert result == MatchMissing(match_id=match_id)

    @pytest.mark.parametrize("status_code", [400, 500, 503])
    async def test_error_status(self, match_id, status_code):
        """Any other non-success status gives MatchLookupFailed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text="nope")

        result = await _client(handler).get_match(match_id)

        assert isinstance(result, MatchLookupFailed)
        assert result.status_code == status_code
        assert result.detail == "nope"

    async def test_transport_error(self, match_id):
        """Connection failures give MatchLookupFailed without a status code."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _client(handler).get_match(match_id)

        assert isinstance(result, MatchLookupFailed)
        assert result.status_code is None
        assert "connection refused" in result.detail

    async def test_non_json_body(self, match_id):
        """A success response that is not JSON gives MatchLookupFailed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        result = await _client(handler).get_match(match_id)

        assert isinstance(result, MatchLookupFailed)
        assert result.status_code == 200

    async def test_payload_missing_fields(self, match_id):
        """A JSON body that is not a match view gives MatchLookupFailed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": match_id})

        result = await _client(handler).get_match(match_id)

        assert isinstance(result, MatchLookupFailed)


class TestClientLifecycle:
    """Tests for ownership of the underlying httpx client."""

    async def test_injected_client_left_open(self):
        """An injected client is not closed by the MatchClient."""
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(204))
        )

        async with MatchClient(BASE_URL, http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    async def test_owned_client_closed(self):
        """A client created by the MatchClient is closed with it."""
        client = MatchClient(BASE_URL + "/")

        await client.close()

        assert client._client.is_closed
        assert client.base_url == BASE_URL
