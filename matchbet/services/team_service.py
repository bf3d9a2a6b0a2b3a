"""
Team service with business logic for team registration and lookup.
"""

import structlog
from bson import ObjectId

from matchbet.models.team import Team
from matchbet.repositories.team_repository import TeamRepository

logger = structlog.get_logger(__name__)


class TeamServiceError(Exception):
    """Base exception for team service errors."""

    pass


class TeamNotFoundError(TeamServiceError):
    """Raised when a team is not found."""

    pass


class TeamValidationError(TeamServiceError):
    """Raised when a team fails registration checks."""

    pass


class TeamService:
    """
    Service layer for team operations.

    Usage:
        service = TeamService(TeamRepository(db))
        team = await service.register_team("Palmeiras", "PAL", "SP")
    """

    def __init__(self, repository: TeamRepository) -> None:
        """
        Initialize team service.

        Args:
            repository: Team record store
        """
        self.repository = repository

    async def register_team(
        self,
        name: str,
        code: str,
        region: str | None = None,
    ) -> Team:
        """
        Register a new team.

        Args:
            name: Team name, must not be empty
            code: Short team code, must not be empty
            region: Optional region tag

        Returns:
            The persisted team

        Raises:
            TeamValidationError: If name or code is empty
        """
        if not name:
            raise TeamValidationError("Team name cannot be empty")
        if not code:
            raise TeamValidationError("Team code cannot be empty")

        team = Team(name=name, code=code, region=region)
        saved = await self.repository.save(team)

        logger.info("Team registered", team_id=str(saved.id), code=saved.code)
        return saved

    async def get_team(self, team_id: str | ObjectId) -> Team:
        """
        Get a team by ID.

        Raises:
            TeamNotFoundError: If team doesn't exist
        """
        team = await self.repository.get_by_id(team_id)

        if team is None:
            raise TeamNotFoundError(f"Team {team_id} not found")

        return team

    async def list_teams(self, region: str | None = None) -> list[Team]:
        """
        List teams, optionally filtered by region.

        None returns every team. Any other value, the empty string
        included, is an exact case-sensitive filter.
        """
        if region is None:
            return await self.repository.find_all()

        return await self.repository.find_by_region(region)
