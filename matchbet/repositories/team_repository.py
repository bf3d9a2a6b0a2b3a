"""
Team repository for database operations.
"""

from matchbet.models.team import Team
from matchbet.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for Team documents."""

    collection_name = "teams"
    model_class = Team

    async def find_by_region(self, region: str) -> list[Team]:
        """
        Find teams whose region equals the given value exactly.

        Args:
            region: Region tag; case-sensitive, and "" only matches teams
                stored with an empty region

        Returns:
            List of matching teams
        """
        return await self.find_many({"region": region})
