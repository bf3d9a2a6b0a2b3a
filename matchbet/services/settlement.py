"""
Bet settlement.

Maps a predicted outcome and a final score onto the bet status. Every
combination resolves to WON or LOST; there is no void outcome.
"""

from matchbet.models.bet import BetStatus
from matchbet.models.match import MatchOutcome, match_outcome


def settle(predicted: MatchOutcome, home_score: int, away_score: int) -> BetStatus:
    """
    Settle a prediction against a final score.

    Args:
        predicted: Predicted outcome of the match
        home_score: Final home team score
        away_score: Final away team score

    Returns:
        BetStatus.WON if the prediction matches the result, else BetStatus.LOST
    """
    actual = match_outcome(home_score, away_score)
    return BetStatus.WON if MatchOutcome(predicted) == actual else BetStatus.LOST
