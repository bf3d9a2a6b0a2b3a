"""
Match repository for MongoDB operations.
"""

from matchbet.models.match import Match
from matchbet.repositories.base import BaseRepository


class MatchRepository(BaseRepository[Match]):
    """
    Repository for Match document operations.

    Matches embed their team snapshots, so team filters run against
    the embedded fields without a join.
    """

    collection_name = "matches"
    model_class = Match

    async def find_by_home_team_code(self, code: str) -> list[Match]:
        """
        Find matches where the home team has the given code.

        Matches in which the team plays away are not included.

        Args:
            code: Team code to filter by

        Returns:
            List of matching matches
        """
        return await self.find_many({"home_team.code": code})
