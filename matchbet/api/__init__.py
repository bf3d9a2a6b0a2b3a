"""
HTTP applications for the two services.
"""

from matchbet.api.betting import BettingServices, build_betting_services, create_betting_app
from matchbet.api.championship import (
    ChampionshipServices,
    build_championship_services,
    create_championship_app,
)

__all__ = [
    "BettingServices",
    "ChampionshipServices",
    "build_betting_services",
    "build_championship_services",
    "create_betting_app",
    "create_championship_app",
]
