"""
HTTP client for the championship service.

The betting service reads match state through this client. Lookups
return a typed result instead of raising, so callers decide how each
outcome maps onto their own errors:

- MatchFound: the match view was returned
- MatchMissing: the championship service answered 404
- MatchLookupFailed: any other status, a transport error, or a payload
  that does not parse as a match view
"""

from dataclasses import dataclass

import httpx
import structlog
from bson import ObjectId
from pydantic import ValidationError

from matchbet.models.match import MatchResponse

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MatchFound:
    """Successful lookup."""

    match: MatchResponse


@dataclass(frozen=True)
class MatchMissing:
    """The championship service does not know the match."""

    match_id: str


@dataclass(frozen=True)
class MatchLookupFailed:
    """The lookup could not be completed."""

    match_id: str
    status_code: int | None
    detail: str


MatchLookup = MatchFound | MatchMissing | MatchLookupFailed


class MatchClient:
    """
    Async client for the championship service match endpoint.

    Usage:
        async with MatchClient("http://localhost:8080") as client:
            result = await client.get_match(match_id)

    An existing httpx.AsyncClient can be passed in (for example one
    bound to an ASGI transport); the MatchClient then does not own it
    and will not close it.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
        )

    async def get_match(self, match_id: str | ObjectId) -> MatchLookup:
        """
        Fetch the current state of a match.

        Args:
            match_id: Match document ID

        Returns:
            MatchFound, MatchMissing or MatchLookupFailed
        """
        match_id = str(match_id)
        url = f"{self.base_url}/matches/{match_id}"

        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Championship service unreachable", match_id=match_id, error=str(e))
            return MatchLookupFailed(match_id=match_id, status_code=None, detail=str(e))

        if response.status_code == httpx.codes.NOT_FOUND:
            return MatchMissing(match_id=match_id)

        if not response.is_success:
            logger.warning(
                "Championship service returned an error",
                match_id=match_id,
                status_code=response.status_code,
            )
            return MatchLookupFailed(
                match_id=match_id,
                status_code=response.status_code,
                detail=response.text,
            )

        try:
            match = MatchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Malformed match payload", match_id=match_id, error=str(e))
            return MatchLookupFailed(
                match_id=match_id,
                status_code=response.status_code,
                detail=f"Malformed match payload: {e}",
            )

        return MatchFound(match=match)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "MatchClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
