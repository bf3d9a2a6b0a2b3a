"""
Clients for calls between the services.
"""

from matchbet.clients.match_client import (
    MatchClient,
    MatchFound,
    MatchLookup,
    MatchLookupFailed,
    MatchMissing,
)

__all__ = [
    "MatchClient",
    "MatchFound",
    "MatchLookup",
    "MatchLookupFailed",
    "MatchMissing",
]
