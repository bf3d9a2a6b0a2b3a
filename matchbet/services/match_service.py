"""
Match service with business logic for match operations.

Provides high-level operations for registering matches, listing them
and recording final scores.
"""

import structlog
from bson import ObjectId
from pydantic import ValidationError

from matchbet.models.base import utc_now
from matchbet.models.match import Match, MatchResponse, MatchStatus, TeamRef
from matchbet.repositories.match_repository import MatchRepository
from matchbet.services.team_service import TeamService

logger = structlog.get_logger(__name__)


class MatchServiceError(Exception):
    """Base exception for match service errors."""

    pass


class MatchNotFoundError(MatchServiceError):
    """Raised when a match is not found."""

    pass


class MatchValidationError(MatchServiceError):
    """Raised when a recorded score is out of range."""

    pass


class MatchService:
    """
    Service layer for match operations.

    Resolves teams through the TeamService and returns MatchResponse
    views rather than raw documents.
    """

    def __init__(self, repository: MatchRepository, team_service: TeamService) -> None:
        """
        Initialize match service.

        Args:
            repository: Match record store
            team_service: Used to resolve team ids on registration
        """
        self._match_repo = repository
        self._team_service = team_service

    # =========================================================================
    # Create Operations
    # =========================================================================

    async def register_match(
        self,
        home_team_id: str | ObjectId,
        away_team_id: str | ObjectId,
    ) -> MatchResponse:
        """
        Register a new scheduled match.

        Args:
            home_team_id: Home team document ID
            away_team_id: Away team document ID

        Returns:
            View of the created match

        Raises:
            TeamNotFoundError: If either team doesn't exist
        """
        home_team = await self._team_service.get_team(home_team_id)
        away_team = await self._team_service.get_team(away_team_id)

        match = Match(
            home_team=TeamRef.from_team(home_team),
            away_team=TeamRef.from_team(away_team),
            status=MatchStatus.SCHEDULED,
        )
        saved = await self._match_repo.save(match)

        logger.info(
            "Match registered",
            match_id=str(saved.id),
            home=home_team.code,
            away=away_team.code,
        )
        return MatchResponse.from_match(saved)

    # =========================================================================
    # Read Operations
    # =========================================================================

    async def _load(self, match_id: str | ObjectId) -> Match:
        match = await self._match_repo.get_by_id(match_id)

        if match is None:
            raise MatchNotFoundError(f"Match {match_id} not found")

        return match

    async def get_match(self, match_id: str | ObjectId) -> MatchResponse:
        """
        Get a match by ID.

        Raises:
            MatchNotFoundError: If match doesn't exist
        """
        return MatchResponse.from_match(await self._load(match_id))

    async def list_matches(self, team_code: str | None = None) -> list[MatchResponse]:
        """
        List matches, optionally filtered by home team code.

        The filter only looks at the home team; a match where the team
        plays away is not returned.
        """
        if team_code is None:
            matches = await self._match_repo.find_all()
        else:
            matches = await self._match_repo.find_by_home_team_code(team_code)

        return [MatchResponse.from_match(m) for m in matches]

    # =========================================================================
    # Update Operations
    # =========================================================================

    async def edit_match(
        self,
        match_id: str | ObjectId,
        home_score: int,
        away_score: int,
    ) -> MatchResponse:
        """
        Record the score of a match and mark it played.

        Editing an already played match overwrites its score.

        Raises:
            MatchNotFoundError: If match doesn't exist
            MatchValidationError: If a score is outside 0..99
        """
        match = await self._load(match_id)

        try:
            match.home_score = home_score
            match.away_score = away_score
        except ValidationError as e:
            raise MatchValidationError(
                f"Invalid score {home_score}-{away_score} for match {match_id}"
            ) from e

        match.status = MatchStatus.PLAYED
        match.played_at = utc_now()
        match.touch()

        saved = await self._match_repo.save(match)

        logger.info(
            "Match score recorded",
            match_id=str(saved.id),
            score=saved.display_score,
        )
        return MatchResponse.from_match(saved)
