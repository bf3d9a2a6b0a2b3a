"""
Repository layer for data access.

Provides abstraction over MongoDB collections with async operations
using Motor driver. Each repository is the record store for its
domain model.
"""

from matchbet.repositories.base import BaseRepository
from matchbet.repositories.bet_repository import BetRepository
from matchbet.repositories.match_repository import MatchRepository
from matchbet.repositories.team_repository import TeamRepository

__all__ = [
    "BaseRepository",
    "TeamRepository",
    "MatchRepository",
    "BetRepository",
]
