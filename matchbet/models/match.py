"""
Match model for championship matches.

Represents a match between two registered teams with score and
lifecycle status tracking.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from matchbet.models.base import EmbeddedModel, TimestampedModel
from matchbet.models.team import Team
from matchbet.validators.custom_types import PyObjectId


class MatchStatus(str, Enum):
    """Possible states of a match."""

    SCHEDULED = "scheduled"  # Registered, no final score yet
    PLAYED = "played"  # Final score available


class MatchOutcome(str, Enum):
    """Possible outcomes of a played match."""

    HOME_WIN = "home_win"
    AWAY_WIN = "away_win"
    DRAW = "draw"


Score = Annotated[int, Field(ge=0, le=99)]


def match_outcome(home_score: int, away_score: int) -> MatchOutcome:
    """Derive the three-way outcome of a final score."""
    if home_score > away_score:
        return MatchOutcome.HOME_WIN
    elif away_score > home_score:
        return MatchOutcome.AWAY_WIN
    else:
        return MatchOutcome.DRAW


class TeamRef(EmbeddedModel):
    """Snapshot of a team embedded in a match document."""

    id: PyObjectId = Field(..., description="Reference to the team document")
    name: str
    code: str

    @classmethod
    def from_team(cls, team: Team) -> "TeamRef":
        return cls(id=team.id, name=team.name, code=team.code)


class Match(TimestampedModel):
    """
    Complete match model with status and results.

    Includes all fields stored in MongoDB and computed properties.
    """

    home_team: TeamRef = Field(..., description="Home team snapshot")
    away_team: TeamRef = Field(..., description="Away team snapshot")

    status: MatchStatus = Field(
        default=MatchStatus.SCHEDULED,
        description="Current status of the match",
    )

    # Results (only set once the match is played)
    home_score: Score | None = Field(
        default=None,
        description="Final score for home team",
    )
    away_score: Score | None = Field(
        default=None,
        description="Final score for away team",
    )
    played_at: datetime | None = Field(
        default=None,
        description="Time when the final score was recorded",
    )

    @property
    def is_played(self) -> bool:
        return self.status == MatchStatus.PLAYED

    @property
    def display_score(self) -> str:
        """Get formatted score string."""
        if self.home_score is None or self.away_score is None:
            return "- : -"
        return f"{self.home_score} : {self.away_score}"

    @model_validator(mode="after")
    def validate_status_consistency(self) -> Self:
        """A played match must carry both scores."""
        if self.is_played and (self.home_score is None or self.away_score is None):
            raise ValueError("Played match must have scores")
        return self


class MatchCreate(BaseModel):
    """Schema for registering a new match."""

    home_team_id: PyObjectId = Field(..., description="Home team document ID")
    away_team_id: PyObjectId = Field(..., description="Away team document ID")


class MatchResult(BaseModel):
    """Schema for editing a match score."""

    home_score: Score = Field(..., description="Final home team score")
    away_score: Score = Field(..., description="Final away team score")


class MatchResponse(BaseModel):
    """
    Public view of a match.

    This is what the championship service returns and what the betting
    service parses on the other side of the HTTP call.
    """

    model_config = ConfigDict(use_enum_values=True)

    id: str
    home_team_name: str
    away_team_name: str
    home_team_code: str | None = None
    away_team_code: str | None = None
    home_score: int | None = None
    away_score: int | None = None
    status: MatchStatus

    @classmethod
    def from_match(cls, match: Match) -> "MatchResponse":
        return cls(
            id=str(match.id),
            home_team_name=match.home_team.name,
            away_team_name=match.away_team.name,
            home_team_code=match.home_team.code,
            away_team_code=match.away_team.code,
            home_score=match.home_score,
            away_score=match.away_score,
            status=match.status,
        )
