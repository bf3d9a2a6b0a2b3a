"""
Championship service HTTP application.

Owns teams and matches. The betting service reads matches from here
through GET /matches/{match_id}.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from matchbet.api.errors import register_error_handlers
from matchbet.config.logging_config import configure_logging
from matchbet.config.settings import get_settings
from matchbet.db.connection import DatabaseConnection
from matchbet.models.match import MatchCreate, MatchResponse, MatchResult
from matchbet.models.team import TeamCreate
from matchbet.repositories.match_repository import MatchRepository
from matchbet.repositories.team_repository import TeamRepository
from matchbet.services.match_service import (
    MatchNotFoundError,
    MatchService,
    MatchValidationError,
)
from matchbet.services.team_service import (
    TeamNotFoundError,
    TeamService,
    TeamValidationError,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@dataclass
class ChampionshipServices:
    """Service graph of the championship application."""

    team_service: TeamService
    match_service: MatchService


def build_championship_services(database: AsyncIOMotorDatabase) -> ChampionshipServices:
    """Wire repositories and services on top of the championship database."""
    team_service = TeamService(TeamRepository(database))
    match_service = MatchService(MatchRepository(database), team_service)
    return ChampionshipServices(team_service=team_service, match_service=match_service)


def get_team_service(request: Request) -> TeamService:
    return request.app.state.services.team_service


def get_match_service(request: Request) -> MatchService:
    return request.app.state.services.match_service


# ============================================================================
# Teams
# ============================================================================


@router.post("/teams", status_code=status.HTTP_201_CREATED)
async def create_team(
    data: TeamCreate,
    service: TeamService = Depends(get_team_service),
) -> dict:
    """Register a team."""
    team = await service.register_team(data.name, data.code, data.region)
    return team.to_json_dict()


@router.get("/teams")
async def list_teams(
    region: str | None = None,
    service: TeamService = Depends(get_team_service),
) -> list[dict]:
    """List teams, filtered by exact region when given."""
    teams = await service.list_teams(region)
    return [team.to_json_dict() for team in teams]


@router.get("/teams/{team_id}")
async def get_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
) -> dict:
    team = await service.get_team(team_id)
    return team.to_json_dict()


# ============================================================================
# Matches
# ============================================================================


@router.post("/matches", status_code=status.HTTP_201_CREATED, response_model=MatchResponse)
async def create_match(
    data: MatchCreate,
    service: MatchService = Depends(get_match_service),
) -> MatchResponse:
    """Register a scheduled match between two existing teams."""
    return await service.register_match(data.home_team_id, data.away_team_id)


@router.get("/matches", response_model=list[MatchResponse])
async def list_matches(
    team_code: str | None = None,
    service: MatchService = Depends(get_match_service),
) -> list[MatchResponse]:
    """List matches, filtered by home team code when given."""
    return await service.list_matches(team_code)


@router.get("/matches/{match_id}", response_model=MatchResponse)
async def get_match(
    match_id: str,
    service: MatchService = Depends(get_match_service),
) -> MatchResponse:
    return await service.get_match(match_id)


@router.put("/matches/{match_id}", response_model=MatchResponse)
async def edit_match(
    match_id: str,
    result: MatchResult,
    service: MatchService = Depends(get_match_service),
) -> MatchResponse:
    """Record the final score of a match."""
    return await service.edit_match(match_id, result.home_score, result.away_score)


# ============================================================================
# Health
# ============================================================================


@router.get("/health")
async def health(request: Request) -> dict:
    connection: DatabaseConnection | None = getattr(request.app.state, "connection", None)
    database = (
        await connection.health_check(get_settings().mongo.championship_db)
        if connection is not None
        else None
    )
    return {"service": "championship", "status": "ok", "database": database}


# ============================================================================
# Application factory
# ============================================================================


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings.app.log_level, json_output=settings.app.is_production)

    connection = DatabaseConnection()
    await connection.connect()

    app.state.connection = connection
    app.state.services = build_championship_services(
        connection.get_database(settings.mongo.championship_db)
    )
    logger.info("Championship service started", version=settings.app.version)

    try:
        yield
    finally:
        await connection.disconnect()
        logger.info("Championship service stopped")


def create_championship_app(services: ChampionshipServices | None = None) -> FastAPI:
    """
    Build the championship application.

    Args:
        services: Prebuilt service graph. When omitted, the application
            connects to MongoDB on startup and builds its own.
    """
    settings = get_settings()
    app = FastAPI(
        title=f"{settings.app.name} - Championship",
        version=settings.app.version,
        lifespan=None if services is not None else _lifespan,
    )

    if services is not None:
        app.state.services = services

    register_error_handlers(
        app,
        {
            TeamValidationError: status.HTTP_400_BAD_REQUEST,
            TeamNotFoundError: status.HTTP_404_NOT_FOUND,
            MatchNotFoundError: status.HTTP_404_NOT_FOUND,
            MatchValidationError: status.HTTP_400_BAD_REQUEST,
        },
    )
    app.include_router(router)
    return app
