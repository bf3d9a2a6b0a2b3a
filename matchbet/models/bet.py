"""
Bet model for the betting service.

A bet keeps two separate statuses: the match lifecycle status as seen
when the bet was placed, and the bet's own settlement status.
"""

from datetime import datetime
from enum import Enum

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from matchbet.models.base import TimestampedModel
from matchbet.models.match import MatchOutcome, MatchStatus
from matchbet.validators.custom_types import PyObjectId


class BetStatus(str, Enum):
    """Bet lifecycle. PENDING moves once to WON or LOST."""

    PENDING = "pending"
    WON = "won"
    LOST = "lost"


SETTLED_STATUSES = (BetStatus.WON, BetStatus.LOST)


class BetCreate(BaseModel):
    """Schema for placing a bet."""

    match_id: PyObjectId = Field(..., description="Match being bet on")
    predicted_outcome: MatchOutcome = Field(
        ...,
        description="Predicted result of the match",
        examples=["home_win", "away_win", "draw"],
    )


class Bet(TimestampedModel):
    """
    Bet document stored in the betting database.

    match_status is a cache of the remote match status at placement
    time (refreshed to PLAYED on settlement). status is the outcome of
    the bet itself.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "_id": "507f1f77bcf86cd799439011",
                "match_id": "507f1f77bcf86cd799439013",
                "predicted_outcome": "draw",
                "match_status": "scheduled",
                "status": "pending",
                "settled_at": None,
            }
        },
    )

    match_id: PyObjectId = Field(..., description="Reference to the match document")
    predicted_outcome: MatchOutcome = Field(..., description="Predicted result")
    match_status: MatchStatus = Field(
        ...,
        description="Match status observed when the bet was placed",
    )
    status: BetStatus = Field(
        default=BetStatus.PENDING,
        description="Settlement status of the bet",
    )
    settled_at: datetime | None = Field(
        default=None,
        description="Time when the bet was settled",
    )

    @property
    def is_settled(self) -> bool:
        return self.status in SETTLED_STATUSES

    @classmethod
    def place(
        cls,
        match_id: ObjectId,
        predicted_outcome: MatchOutcome,
        match_status: MatchStatus,
    ) -> "Bet":
        return cls(
            match_id=match_id,
            predicted_outcome=predicted_outcome,
            match_status=match_status,
            status=BetStatus.PENDING,
        )
