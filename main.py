"""
Match Betting Services - Demo Entry Point

Runs both services against a local MongoDB in one process: the
championship application is mounted on an in-memory ASGI transport and
the betting service reaches it through the regular MatchClient.
"""

import asyncio
import sys

import httpx
import structlog
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from matchbet.api.championship import build_championship_services, create_championship_app
from matchbet.clients.match_client import MatchClient
from matchbet.config.logging_config import configure_logging
from matchbet.config.settings import get_settings
from matchbet.db.connection import close_database, get_connection, get_database
from matchbet.db.indexes import BETTING_INDEXES, CHAMPIONSHIP_INDEXES, ensure_indexes
from matchbet.models.bet import Bet
from matchbet.models.match import MatchOutcome, MatchResponse
from matchbet.models.team import Team
from matchbet.repositories.bet_repository import BetRepository
from matchbet.services.bet_service import BetService, MatchNotPlayedError
from matchbet.services.match_service import MatchService
from matchbet.services.team_service import TeamService

logger = structlog.get_logger(__name__)
console = Console()

DEMO_BASE_URL = "http://championship.demo"


async def check_connection() -> bool:
    """Check MongoDB connection health."""
    connection = await get_connection()
    await connection.connect()
    health = await connection.health_check()

    if health["healthy"]:
        console.print(
            f"[green]✓[/green] Connected to MongoDB "
            f"(version: {health.get('server_version', 'unknown')}, "
            f"latency: {health.get('latency_ms', 'N/A')}ms)"
        )
        return True

    console.print(f"[red]✗[/red] MongoDB unhealthy: {health.get('error', 'Unknown error')}")
    return False


async def setup_indexes() -> None:
    """Create database indexes."""
    settings = get_settings()
    console.print("[yellow]Creating indexes...[/yellow]")

    for db_name, definitions in (
        (settings.mongo.championship_db, CHAMPIONSHIP_INDEXES),
        (settings.mongo.betting_db, BETTING_INDEXES),
    ):
        results = await ensure_indexes(await get_database(db_name), definitions)
        for collection, indexes in results.items():
            console.print(f"  [green]✓[/green] {db_name}.{collection}: {len(indexes)} indexes")


async def demo_register_teams(team_service: TeamService) -> list[Team]:
    """Register demo teams."""
    console.print("\n[bold cyan]Registering teams...[/bold cyan]")

    teams_data = [
        ("Palmeiras", "PAL", "SP"),
        ("Corinthians", "COR", "SP"),
        ("Flamengo", "FLA", "RJ"),
        ("Gremio", "GRE", "RS"),
    ]

    teams = []
    for name, code, region in teams_data:
        team = await team_service.register_team(name=name, code=code, region=region)
        teams.append(team)
        console.print(f"  [green]✓[/green] {team.name} ({team.code}, {team.region})")

    return teams


async def demo_register_matches(
    match_service: MatchService,
    teams: list[Team],
) -> list[MatchResponse]:
    """Pair the demo teams into matches."""
    console.print("\n[bold cyan]Registering matches...[/bold cyan]")

    pairs = [(0, 1), (2, 3), (1, 2), (3, 0)]

    matches = []
    for home, away in pairs:
        match = await match_service.register_match(teams[home].id, teams[away].id)
        matches.append(match)
        console.print(f"  [green]✓[/green] {match.home_team_name} vs {match.away_team_name}")

    return matches


async def demo_place_bets(bet_service: BetService, matches: list[MatchResponse]) -> list[Bet]:
    """Place one bet per outcome on every match."""
    console.print("\n[bold cyan]Placing bets...[/bold cyan]")

    bets = []
    for match in matches:
        for outcome in MatchOutcome:
            bets.append(await bet_service.place_bet(match.id, outcome))
        console.print(
            f"  [green]✓[/green] {len(MatchOutcome)} bets on "
            f"{match.home_team_name} vs {match.away_team_name}"
        )

    return bets


async def demo_record_results(match_service: MatchService, matches: list[MatchResponse]) -> None:
    """Record scores for all but the last match."""
    console.print("\n[bold cyan]Recording results...[/bold cyan]")

    scores = [(2, 1), (1, 1), (0, 3)]
    for match, (home_score, away_score) in zip(matches, scores):
        played = await match_service.edit_match(match.id, home_score, away_score)
        console.print(
            f"  [green]✓[/green] {played.home_team_name} "
            f"{played.home_score}-{played.away_score} {played.away_team_name}"
        )


async def demo_settle_bets(bet_service: BetService, bets: list[Bet]) -> None:
    """Read every bet back, which settles those on played matches."""
    console.print("\n[bold cyan]Settling bets...[/bold cyan]")

    table = Table(title="Bets")
    table.add_column("Bet", style="dim")
    table.add_column("Match", style="dim")
    table.add_column("Prediction", style="yellow")
    table.add_column("Status", justify="center")

    for bet in bets:
        try:
            settled = await bet_service.get_bet(bet.id)
            status = settled.status
        except MatchNotPlayedError:
            status = "not played"
        table.add_row(str(bet.id), str(bet.match_id), bet.predicted_outcome, status)

    console.print(table)


async def run_demo() -> None:
    """Run a complete demo of both services."""
    console.print(
        Panel.fit(
            "[bold blue]Match Betting Services Demo[/bold blue]\n"
            "MongoDB + Motor + Pydantic + FastAPI",
            border_style="blue",
        )
    )

    settings = get_settings()
    configure_logging(settings.app.log_level)
    console.print(f"\n[dim]Environment: {settings.app.environment}[/dim]")

    if not await check_connection():
        console.print("\n[red]Cannot proceed without database connection.[/red]")
        return

    await setup_indexes()

    championship = build_championship_services(
        await get_database(settings.mongo.championship_db)
    )
    app = create_championship_app(championship)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=DEMO_BASE_URL) as http_client:
        match_client = MatchClient(DEMO_BASE_URL, http_client=http_client)
        bet_service = BetService(
            BetRepository(await get_database(settings.mongo.betting_db)),
            match_client,
        )

        teams = await demo_register_teams(championship.team_service)
        matches = await demo_register_matches(championship.match_service, teams)
        bets = await demo_place_bets(bet_service, matches)
        await demo_record_results(championship.match_service, matches)
        await demo_settle_bets(bet_service, bets)

    console.print("\n[green]Demo completed![/green]")


async def main() -> None:
    """Main entry point."""
    try:
        await run_demo()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
    except Exception as e:
        logger.exception("Application error")
        console.print(f"\n[red]Error: {e}[/red]")
        sys.exit(1)
    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(main())
