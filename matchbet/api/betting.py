"""
Betting service HTTP application.

Owns bets. Reading a bet may settle it, which calls the championship
service through the MatchClient.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from matchbet.api.errors import register_error_handlers
from matchbet.clients.match_client import MatchClient
from matchbet.config.logging_config import configure_logging
from matchbet.config.settings import get_settings
from matchbet.db.connection import DatabaseConnection
from matchbet.models.bet import BetCreate
from matchbet.repositories.bet_repository import BetRepository
from matchbet.services.bet_service import (
    BetNotFoundError,
    BetService,
    MatchLookupError,
    MatchNotFoundError,
    MatchNotPlayedError,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@dataclass
class BettingServices:
    """Service graph of the betting application."""

    bet_service: BetService


def build_betting_services(
    database: AsyncIOMotorDatabase,
    match_client: MatchClient,
) -> BettingServices:
    """Wire the bet repository and the championship client into the service."""
    return BettingServices(bet_service=BetService(BetRepository(database), match_client))


def get_bet_service(request: Request) -> BetService:
    return request.app.state.services.bet_service


@router.post("/bets", status_code=status.HTTP_201_CREATED)
async def place_bet(
    data: BetCreate,
    service: BetService = Depends(get_bet_service),
) -> dict:
    """Place a bet on an existing match."""
    bet = await service.place_bet(data.match_id, data.predicted_outcome)
    return bet.to_json_dict()


@router.get("/bets")
async def list_bets(service: BetService = Depends(get_bet_service)) -> list[dict]:
    bets = await service.list_bets()
    return [bet.to_json_dict() for bet in bets]


@router.get("/bets/{bet_id}")
async def get_bet(
    bet_id: str,
    service: BetService = Depends(get_bet_service),
) -> dict:
    """Get a bet, settling it when its match has been played."""
    bet = await service.get_bet(bet_id)
    return bet.to_json_dict()


@router.get("/health")
async def health(request: Request) -> dict:
    connection: DatabaseConnection | None = getattr(request.app.state, "connection", None)
    database = (
        await connection.health_check(get_settings().mongo.betting_db)
        if connection is not None
        else None
    )
    return {"service": "betting", "status": "ok", "database": database}


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings.app.log_level, json_output=settings.app.is_production)

    connection = DatabaseConnection()
    await connection.connect()
    match_client = MatchClient(settings.championship.base_url)

    app.state.connection = connection
    app.state.services = build_betting_services(
        connection.get_database(settings.mongo.betting_db),
        match_client,
    )
    logger.info(
        "Betting service started",
        version=settings.app.version,
        championship_url=settings.championship.base_url,
    )

    try:
        yield
    finally:
        await match_client.close()
        await connection.disconnect()
        logger.info("Betting service stopped")


def create_betting_app(services: BettingServices | None = None) -> FastAPI:
    """
    Build the betting application.

    Args:
        services: Prebuilt service graph. When omitted, the application
            connects to MongoDB and the championship service on startup.
    """
    settings = get_settings()
    app = FastAPI(
        title=f"{settings.app.name} - Betting",
        version=settings.app.version,
        lifespan=None if services is not None else _lifespan,
    )

    if services is not None:
        app.state.services = services

    register_error_handlers(
        app,
        {
            BetNotFoundError: status.HTTP_404_NOT_FOUND,
            MatchNotFoundError: status.HTTP_404_NOT_FOUND,
            MatchNotPlayedError: status.HTTP_409_CONFLICT,
            MatchLookupError: status.HTTP_502_BAD_GATEWAY,
        },
    )
    app.include_router(router)
    return app
