"""
Service layer for business logic.

Services orchestrate operations between repositories and the
championship client, and implement the business rules. Collaborators
are passed in explicitly.
"""

from matchbet.services.bet_service import BetService
from matchbet.services.match_service import MatchService
from matchbet.services.settlement import settle
from matchbet.services.team_service import TeamService

__all__ = [
    "TeamService",
    "MatchService",
    "BetService",
    "settle",
]
