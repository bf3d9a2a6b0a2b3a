"""
Pytest configuration and fixtures for testing.

Provides mock repositories, mock data factories, and wired services
for testing the championship and betting services without MongoDB.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from matchbet.clients.match_client import MatchClient, MatchFound
from matchbet.models.base import utc_now
from matchbet.models.bet import Bet, BetStatus
from matchbet.models.match import Match, MatchOutcome, MatchResponse, MatchStatus, TeamRef
from matchbet.models.team import Team
from matchbet.repositories.bet_repository import BetRepository
from matchbet.repositories.match_repository import MatchRepository
from matchbet.repositories.team_repository import TeamRepository
from matchbet.services.bet_service import BetService
from matchbet.services.match_service import MatchService
from matchbet.services.team_service import TeamService

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def mock_collection() -> MagicMock:
    """
    Mock Motor collection.

    find() returns a cursor whose to_list is awaitable; tests set
    cursor.to_list.return_value to control the documents returned.
    """
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()

    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def mock_db(mock_collection: MagicMock) -> MagicMock:
    """Mock database handing out the same mock collection for every name."""
    db = MagicMock(spec=AsyncIOMotorDatabase)
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


# =============================================================================
# Repository Fixtures
# =============================================================================


def _mock_repository(spec: type) -> AsyncMock:
    repository = AsyncMock(spec=spec)
    repository.save.side_effect = lambda model: model
    repository.get_by_id.return_value = None
    repository.find_all.return_value = []
    return repository


@pytest.fixture
def team_repository() -> AsyncMock:
    """TeamRepository double whose save() returns its argument."""
    repository = _mock_repository(TeamRepository)
    repository.find_by_region.return_value = []
    return repository


@pytest.fixture
def match_repository() -> AsyncMock:
    """MatchRepository double whose save() returns its argument."""
    repository = _mock_repository(MatchRepository)
    repository.find_by_home_team_code.return_value = []
    return repository


@pytest.fixture
def bet_repository() -> AsyncMock:
    """BetRepository double whose save() returns its argument."""
    return _mock_repository(BetRepository)


@pytest.fixture
def match_client() -> AsyncMock:
    """MatchClient double. Tests set get_match.return_value."""
    return AsyncMock(spec=MatchClient)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def team_service(team_repository: AsyncMock) -> TeamService:
    return TeamService(team_repository)


@pytest.fixture
def match_service(match_repository: AsyncMock, team_service: TeamService) -> MatchService:
    return MatchService(match_repository, team_service)


@pytest.fixture
def bet_service(bet_repository: AsyncMock, match_client: AsyncMock) -> BetService:
    return BetService(bet_repository, match_client)


# =============================================================================
# Factory Fixtures
# =============================================================================


class TeamFactory:
    """Factory for creating test Team objects."""

    _counter = 0

    @classmethod
    def create(
        cls,
        name: str | None = None,
        code: str | None = None,
        region: str | None = "SP",
    ) -> Team:
        """Create a Team instance with default or provided values."""
        cls._counter += 1

        return Team(
            id=ObjectId(),
            name=name or f"Team {cls._counter}",
            code=code or f"T{cls._counter:02d}",
            region=region,
        )


class MatchFactory:
    """Factory for creating test Match objects and their public views."""

    @classmethod
    def create(
        cls,
        home_team: Team | None = None,
        away_team: Team | None = None,
        home_score: int | None = None,
        away_score: int | None = None,
    ) -> Match:
        """Create a Match; it is PLAYED when both scores are given."""
        home_team = home_team or TeamFactory.create()
        away_team = away_team or TeamFactory.create()
        played = home_score is not None and away_score is not None

        return Match(
            id=ObjectId(),
            home_team=TeamRef.from_team(home_team),
            away_team=TeamRef.from_team(away_team),
            status=MatchStatus.PLAYED if played else MatchStatus.SCHEDULED,
            home_score=home_score,
            away_score=away_score,
            played_at=utc_now() if played else None,
        )

    @classmethod
    def response(
        cls,
        match_id: ObjectId | None = None,
        home_score: int | None = None,
        away_score: int | None = None,
        status: MatchStatus | None = None,
    ) -> MatchResponse:
        """Create the view the championship service would return."""
        if status is None:
            played = home_score is not None and away_score is not None
            status = MatchStatus.PLAYED if played else MatchStatus.SCHEDULED

        return MatchResponse(
            id=str(match_id or ObjectId()),
            home_team_name="Palmeiras",
            away_team_name="Flamengo",
            home_team_code="PAL",
            away_team_code="FLA",
            home_score=home_score,
            away_score=away_score,
            status=status,
        )

    @classmethod
    def found(cls, *args, **kwargs) -> MatchFound:
        """Wrap response() in a successful lookup result."""
        return MatchFound(match=cls.response(*args, **kwargs))


class BetFactory:
    """Factory for creating test Bet objects."""

    @classmethod
    def create(
        cls,
        match_id: ObjectId | None = None,
        predicted_outcome: MatchOutcome = MatchOutcome.HOME_WIN,
        status: BetStatus = BetStatus.PENDING,
        match_status: MatchStatus = MatchStatus.SCHEDULED,
    ) -> Bet:
        """Create a Bet instance with default or provided values."""
        return Bet(
            id=ObjectId(),
            match_id=match_id or ObjectId(),
            predicted_outcome=predicted_outcome,
            match_status=match_status,
            status=status,
            settled_at=utc_now() if status != BetStatus.PENDING else None,
        )


@pytest.fixture
def team_factory() -> type[TeamFactory]:
    """Provide TeamFactory class."""
    TeamFactory._counter = 0
    return TeamFactory


@pytest.fixture
def match_factory() -> type[MatchFactory]:
    """Provide MatchFactory class."""
    return MatchFactory


@pytest.fixture
def bet_factory() -> type[BetFactory]:
    """Provide BetFactory class."""
    return BetFactory
