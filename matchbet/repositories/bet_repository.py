"""
Bet repository for the betting service.
"""

from matchbet.models.bet import Bet
from matchbet.repositories.base import BaseRepository


class BetRepository(BaseRepository[Bet]):
    """Repository for Bet documents. Uses the base record store operations."""

    collection_name = "bets"
    model_class = Bet
