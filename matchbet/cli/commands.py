"""
CLI commands for the betting services.

Provides a command-line interface for running the two HTTP services,
preparing the databases, and managing teams, matches and bets.
"""

import asyncio
from functools import wraps
from typing import Callable

import click
import uvicorn
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from matchbet import __version__
from matchbet.clients.match_client import MatchClient
from matchbet.config.logging_config import configure_logging
from matchbet.config.settings import get_settings
from matchbet.db.connection import close_database, get_connection, get_database
from matchbet.db.indexes import BETTING_INDEXES, CHAMPIONSHIP_INDEXES, ensure_indexes
from matchbet.models.bet import Bet, BetStatus
from matchbet.models.match import MatchOutcome, MatchResponse, MatchStatus
from matchbet.repositories.bet_repository import BetRepository
from matchbet.repositories.match_repository import MatchRepository
from matchbet.repositories.team_repository import TeamRepository
from matchbet.services.bet_service import BetService, BetServiceError
from matchbet.services.match_service import MatchService, MatchServiceError
from matchbet.services.team_service import TeamService, TeamServiceError

console = Console()

STATUS_STYLES = {
    MatchStatus.SCHEDULED.value: "[yellow]Scheduled[/yellow]",
    MatchStatus.PLAYED.value: "[green]Played[/green]",
    BetStatus.PENDING.value: "[yellow]Pending[/yellow]",
    BetStatus.WON.value: "[green]Won[/green]",
    BetStatus.LOST.value: "[red]Lost[/red]",
}


def async_command(f: Callable) -> Callable:
    """Decorator to run async functions in Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def handle_errors(f: Callable) -> Callable:
    """Decorator to report service errors and always release the database."""

    @wraps(f)
    async def wrapper(*args, **kwargs):
        try:
            return await f(*args, **kwargs)
        except (TeamServiceError, MatchServiceError, BetServiceError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1) from e
        finally:
            await close_database()

    return wrapper


async def _championship_services() -> tuple[TeamService, MatchService]:
    db = await get_database(get_settings().mongo.championship_db)
    team_service = TeamService(TeamRepository(db))
    return team_service, MatchService(MatchRepository(db), team_service)


def _match_panel(match: MatchResponse, title: str) -> Panel:
    score = (
        f"{match.home_score} - {match.away_score}"
        if match.home_score is not None and match.away_score is not None
        else "- : -"
    )
    return Panel(
        f"ID: {match.id}\n"
        f"{match.home_team_name} {score} {match.away_team_name}\n"
        f"Status: {STATUS_STYLES.get(match.status, match.status)}",
        title=title,
        border_style="green",
    )


def _bet_panel(bet: Bet, title: str) -> Panel:
    return Panel(
        f"ID: {bet.id}\n"
        f"Match: {bet.match_id}\n"
        f"Prediction: {bet.predicted_outcome}\n"
        f"Match status at placement: {bet.match_status}\n"
        f"Status: {STATUS_STYLES.get(bet.status, bet.status)}",
        title=title,
        border_style="cyan",
    )


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="matchbet")
def cli():
    """Match Betting Services - CLI Interface.

    Run the championship and betting services and manage their records.
    """
    settings = get_settings()
    configure_logging(settings.app.log_level, json_output=settings.app.is_production)


# =============================================================================
# Server Commands
# =============================================================================


@cli.group()
def serve():
    """Run one of the HTTP services."""
    pass


@serve.command("championship")
@click.option("--host", default=None, help="Bind address (defaults to APP_HOST)")
@click.option("--port", "-p", default=None, type=int, help="Port (default: APP_CHAMPIONSHIP_PORT)")
def serve_championship(host: str | None, port: int | None):
    """Run the championship (teams and matches) service."""
    settings = get_settings()
    uvicorn.run(
        "matchbet.api.championship:create_championship_app",
        factory=True,
        host=host or settings.app.host,
        port=port or settings.app.championship_port,
        log_config=None,
    )


@serve.command("betting")
@click.option("--host", default=None, help="Bind address (defaults to APP_HOST)")
@click.option("--port", "-p", default=None, type=int, help="Port (default: APP_BETTING_PORT)")
def serve_betting(host: str | None, port: int | None):
    """Run the betting service."""
    settings = get_settings()
    uvicorn.run(
        "matchbet.api.betting:create_betting_app",
        factory=True,
        host=host or settings.app.host,
        port=port or settings.app.betting_port,
        log_config=None,
    )


# =============================================================================
# Database Commands
# =============================================================================


@cli.group()
def db():
    """Database management commands."""
    pass


@db.command("init")
@async_command
@handle_errors
async def db_init():
    """Create indexes in both service databases."""
    console.print("[yellow]Initializing databases...[/yellow]")

    settings = get_settings()
    table = Table(title="Created Indexes", box=box.ROUNDED)
    table.add_column("Database", style="magenta")
    table.add_column("Collection", style="cyan")
    table.add_column("Indexes", style="green")

    for db_name, definitions in (
        (settings.mongo.championship_db, CHAMPIONSHIP_INDEXES),
        (settings.mongo.betting_db, BETTING_INDEXES),
    ):
        database = await get_database(db_name)
        results = await ensure_indexes(database, definitions)
        for collection, indexes in results.items():
            table.add_row(db_name, collection, ", ".join(indexes))

    console.print(table)
    console.print("[green]Databases initialized successfully![/green]")


@db.command("status")
@async_command
@handle_errors
async def db_status():
    """Check the connection and both service databases."""
    settings = get_settings()
    conn = await get_connection()
    await conn.connect()

    for db_name in (settings.mongo.championship_db, settings.mongo.betting_db):
        health = await conn.health_check(db_name)

        if health["healthy"]:
            console.print(
                Panel(
                    f"[green]Connected[/green]\n"
                    f"Server: MongoDB {health.get('server_version', 'unknown')}\n"
                    f"Latency: {health.get('latency_ms', 'N/A')} ms\n"
                    f"Collections: {', '.join(health['collections']) or '(none)'}",
                    title=db_name,
                    border_style="green",
                )
            )
        else:
            console.print(
                Panel(
                    f"[red]Unavailable[/red]\nError: {health.get('error', 'Unknown')}",
                    title=db_name,
                    border_style="red",
                )
            )


# =============================================================================
# Team Commands
# =============================================================================


@cli.group()
def team():
    """Team management commands."""
    pass


@team.command("create")
@click.option("--name", "-n", required=True, help="Team name")
@click.option("--code", "-c", required=True, help="Short team code")
@click.option("--region", "-r", default=None, help="Region or state tag")
@async_command
@handle_errors
async def team_create(name: str, code: str, region: str | None):
    """Register a new team."""
    team_service, _ = await _championship_services()

    created = await team_service.register_team(name=name, code=code, region=region)

    console.print(
        Panel(
            f"[green]Team registered![/green]\n\n"
            f"ID: {created.id}\n"
            f"Name: {created.name}\n"
            f"Code: {created.code}\n"
            f"Region: {created.region if created.region is not None else 'N/A'}",
            title="New Team",
            border_style="green",
        )
    )


@team.command("list")
@click.option("--region", "-r", default=None, help="Exact region to filter by")
@async_command
@handle_errors
async def team_list(region: str | None):
    """List teams."""
    team_service, _ = await _championship_services()

    teams = await team_service.list_teams(region)

    table = Table(title=f"Teams ({len(teams)})", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Code", style="yellow")
    table.add_column("Region")

    for t in teams:
        table.add_row(str(t.id), t.name, t.code, t.region or "")

    console.print(table)


# =============================================================================
# Match Commands
# =============================================================================


@cli.group()
def match():
    """Match management commands."""
    pass


@match.command("create")
@click.option("--home", required=True, help="Home team ID")
@click.option("--away", required=True, help="Away team ID")
@async_command
@handle_errors
async def match_create(home: str, away: str):
    """Register a new match between two teams."""
    _, match_service = await _championship_services()

    created = await match_service.register_match(home, away)
    console.print(_match_panel(created, "New Match"))


@match.command("list")
@click.option("--team-code", "-t", default=None, help="Only matches with this home team")
@async_command
@handle_errors
async def match_list(team_code: str | None):
    """List matches."""
    _, match_service = await _championship_services()

    matches = await match_service.list_matches(team_code)

    table = Table(title=f"Matches ({len(matches)})", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Home", style="cyan")
    table.add_column("Away", style="yellow")
    table.add_column("Score", justify="center")
    table.add_column("Status")

    for m in matches:
        score = (
            f"{m.home_score} : {m.away_score}"
            if m.home_score is not None and m.away_score is not None
            else "- : -"
        )
        table.add_row(
            m.id,
            m.home_team_name,
            m.away_team_name,
            score,
            STATUS_STYLES.get(m.status, m.status),
        )

    console.print(table)


@match.command("show")
@click.argument("match_id")
@async_command
@handle_errors
async def match_show(match_id: str):
    """Show a single match."""
    _, match_service = await _championship_services()
    console.print(_match_panel(await match_service.get_match(match_id), "Match"))


@match.command("result")
@click.argument("match_id")
@click.option("--home-score", required=True, type=click.IntRange(0, 99), help="Home team score")
@click.option("--away-score", required=True, type=click.IntRange(0, 99), help="Away team score")
@async_command
@handle_errors
async def match_result(match_id: str, home_score: int, away_score: int):
    """Record the final score of a match."""
    _, match_service = await _championship_services()

    updated = await match_service.edit_match(match_id, home_score, away_score)
    console.print(_match_panel(updated, "Match Result"))


# =============================================================================
# Bet Commands
# =============================================================================


@cli.group()
def bet():
    """Bet commands. Match lookups go through the championship service."""
    pass


async def _with_bet_service(action: Callable) -> object:
    settings = get_settings()
    db = await get_database(settings.mongo.betting_db)
    async with MatchClient(settings.championship.base_url) as match_client:
        return await action(BetService(BetRepository(db), match_client))


@bet.command("place")
@click.argument("match_id")
@click.option(
    "--outcome",
    "-o",
    required=True,
    type=click.Choice([o.value for o in MatchOutcome]),
    help="Predicted result",
)
@async_command
@handle_errors
async def bet_place(match_id: str, outcome: str):
    """Place a bet on a match."""
    placed = await _with_bet_service(
        lambda service: service.place_bet(match_id, MatchOutcome(outcome))
    )
    console.print(_bet_panel(placed, "New Bet"))


@bet.command("show")
@click.argument("bet_id")
@async_command
@handle_errors
async def bet_show(bet_id: str):
    """Show a bet, settling it if its match was played."""
    found = await _with_bet_service(lambda service: service.get_bet(bet_id))
    console.print(_bet_panel(found, "Bet"))


@bet.command("list")
@async_command
@handle_errors
async def bet_list():
    """List all bets as stored."""
    bets = await _with_bet_service(lambda service: service.list_bets())

    table = Table(title=f"Bets ({len(bets)})", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Match", style="cyan")
    table.add_column("Prediction", style="yellow")
    table.add_column("Status")

    for b in bets:
        table.add_row(
            str(b.id),
            str(b.match_id),
            b.predicted_outcome,
            STATUS_STYLES.get(b.status, b.status),
        )

    console.print(table)
