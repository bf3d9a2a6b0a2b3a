"""
Team model.

Teams are registered once and never modified afterwards, which lets
matches embed a snapshot of their home and away teams.
"""

from pydantic import BaseModel, Field

from matchbet.models.base import TimestampedModel


class TeamBase(BaseModel):
    """Fields shared by team creation and storage."""

    name: str = Field(
        ...,
        description="Team name",
        examples=["Palmeiras", "Flamengo"],
    )
    code: str = Field(
        ...,
        description="Short unique-ish identifier used to filter matches",
        examples=["PAL", "FLA"],
    )
    region: str | None = Field(
        default=None,
        description="Region or state tag, matched exactly when filtering",
        examples=["SP", "RJ"],
    )


class TeamCreate(TeamBase):
    """Schema for registering a new team."""

    pass


class Team(TimestampedModel, TeamBase):
    """Team document stored in the championship database."""

    pass
