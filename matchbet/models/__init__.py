"""
Pydantic models for the betting services.

This module exports the domain models used throughout the application:
- Team: Championship team
- Match: Match between two teams, plus its public view
- Bet: Bet placed against a match
"""

from matchbet.models.base import EmbeddedModel, MongoBaseModel, TimestampedModel
from matchbet.models.bet import Bet, BetCreate, BetStatus
from matchbet.models.match import (
    Match,
    MatchCreate,
    MatchOutcome,
    MatchResponse,
    MatchResult,
    MatchStatus,
    TeamRef,
    match_outcome,
)
from matchbet.models.team import Team, TeamCreate

__all__ = [
    # Base
    "MongoBaseModel",
    "TimestampedModel",
    "EmbeddedModel",
    # Team
    "Team",
    "TeamCreate",
    # Match
    "Match",
    "MatchCreate",
    "MatchOutcome",
    "MatchResponse",
    "MatchResult",
    "MatchStatus",
    "TeamRef",
    "match_outcome",
    # Bet
    "Bet",
    "BetCreate",
    "BetStatus",
]
