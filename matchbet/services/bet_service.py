"""
Bet service for business logic.

Handles bet placement and lazy settlement. A bet is settled the first
time it is read after its match has been played; once WON or LOST it is
returned as stored without contacting the championship service again.
"""

import structlog
from bson import ObjectId

from matchbet.clients.match_client import (
    MatchClient,
    MatchFound,
    MatchLookup,
    MatchMissing,
)
from matchbet.models.base import utc_now
from matchbet.models.bet import Bet
from matchbet.models.match import MatchOutcome, MatchResponse, MatchStatus
from matchbet.repositories.bet_repository import BetRepository
from matchbet.services.settlement import settle
from matchbet.validators.custom_types import parse_object_id

logger = structlog.get_logger(__name__)


class BetServiceError(Exception):
    """Base exception for bet service errors."""

    pass


class BetNotFoundError(BetServiceError):
    """Raised when a bet is not found."""

    pass


class MatchNotFoundError(BetServiceError):
    """Raised when the championship service does not know the match."""

    pass


class MatchNotPlayedError(BetServiceError):
    """Raised when settling a bet whose match has no final score yet."""

    pass


class MatchLookupError(BetServiceError):
    """Raised when the championship service could not be queried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BetService:
    """
    Service layer for bet operations.

    Coordinates the bet repository with the championship service,
    reached through a MatchClient.
    """

    def __init__(self, repository: BetRepository, match_client: MatchClient) -> None:
        """
        Initialize bet service.

        Args:
            repository: Bet record store
            match_client: Client for the championship service
        """
        self.bet_repo = repository
        self.match_client = match_client

    async def _fetch_match(self, match_id: str | ObjectId) -> MatchResponse:
        result: MatchLookup = await self.match_client.get_match(match_id)

        if isinstance(result, MatchFound):
            return result.match

        if isinstance(result, MatchMissing):
            raise MatchNotFoundError(f"Match {match_id} not found")

        raise MatchLookupError(
            f"Could not fetch match {match_id}: {result.detail}",
            status_code=result.status_code,
        )

    async def place_bet(
        self,
        match_id: str | ObjectId,
        predicted_outcome: MatchOutcome,
    ) -> Bet:
        """
        Place a bet on a match.

        The match status seen at this moment is stored on the bet. Bets
        can be placed on played matches too; they settle on first read.

        Args:
            match_id: Match to bet on
            predicted_outcome: Predicted result

        Returns:
            The persisted bet, PENDING

        Raises:
            MatchNotFoundError: If the match does not exist
            MatchLookupError: If the championship service failed
        """
        object_id = parse_object_id(match_id)
        if object_id is None:
            raise MatchNotFoundError(f"Match {match_id} not found")

        match = await self._fetch_match(match_id)

        bet = Bet.place(
            match_id=object_id,
            predicted_outcome=predicted_outcome,
            match_status=match.status,
        )
        saved = await self.bet_repo.save(bet)

        logger.info(
            "Bet placed",
            bet_id=str(saved.id),
            match_id=match.id,
            predicted_outcome=saved.predicted_outcome,
        )
        return saved

    async def get_bet(self, bet_id: str | ObjectId) -> Bet:
        """
        Get a bet, settling it if its match has been played.

        Args:
            bet_id: Bet document ID

        Returns:
            The bet, settled when possible

        Raises:
            BetNotFoundError: If the bet does not exist
            MatchNotFoundError: If the match no longer exists
            MatchNotPlayedError: If the match has no final score yet
            MatchLookupError: If the championship service failed
        """
        bet = await self.bet_repo.get_by_id(bet_id)
        if bet is None:
            raise BetNotFoundError(f"Bet {bet_id} not found")

        if bet.is_settled:
            return bet

        match = await self._fetch_match(bet.match_id)

        if match.status != MatchStatus.PLAYED:
            raise MatchNotPlayedError(f"Match {match.id} has not been played yet")

        if match.home_score is None or match.away_score is None:
            raise MatchLookupError(f"Match {match.id} is played but has no final score")

        bet.status = settle(bet.predicted_outcome, match.home_score, match.away_score)
        bet.match_status = MatchStatus.PLAYED
        bet.settled_at = utc_now()
        bet.touch()

        saved = await self.bet_repo.save(bet)

        logger.info(
            "Bet settled",
            bet_id=str(saved.id),
            match_id=match.id,
            status=saved.status,
            score=f"{match.home_score}-{match.away_score}",
        )
        return saved

    async def list_bets(self) -> list[Bet]:
        """List every stored bet as is, without settling."""
        return await self.bet_repo.find_all()
