"""
MongoDB index definitions for all collections.

Indexes back the equality filters the services run: teams by region,
matches by home team code, bets by match.
"""

from dataclasses import dataclass
from typing import Any

from pymongo import ASCENDING, IndexModel


@dataclass(frozen=True)
class IndexDefinition:
    """Index definition for a collection."""

    collection: str
    indexes: tuple[IndexModel, ...]


# =============================================================================
# Championship database
# =============================================================================

TEAMS_INDEXES = IndexDefinition(
    collection="teams",
    indexes=(
        IndexModel(
            [("region", ASCENDING)],
            name="idx_teams_region",
        ),
        IndexModel(
            [("code", ASCENDING)],
            name="idx_teams_code",
        ),
    ),
)

MATCHES_INDEXES = IndexDefinition(
    collection="matches",
    indexes=(
        # Home-team filter used by match listing
        IndexModel(
            [("home_team.code", ASCENDING)],
            name="idx_matches_home_team_code",
        ),
        IndexModel(
            [("status", ASCENDING)],
            name="idx_matches_status",
        ),
    ),
)

# =============================================================================
# Betting database
# =============================================================================

BETS_INDEXES = IndexDefinition(
    collection="bets",
    indexes=(
        IndexModel(
            [("match_id", ASCENDING), ("status", ASCENDING)],
            name="idx_bets_match_status",
        ),
    ),
)

CHAMPIONSHIP_INDEXES: tuple[IndexDefinition, ...] = (TEAMS_INDEXES, MATCHES_INDEXES)
BETTING_INDEXES: tuple[IndexDefinition, ...] = (BETS_INDEXES,)


async def ensure_indexes(
    db: Any,
    definitions: tuple[IndexDefinition, ...],
) -> dict[str, list[str]]:
    """
    Create indexes in a database.

    Args:
        db: Motor database instance.
        definitions: Index definitions for the collections of that database.

    Returns:
        Dictionary mapping collection names to created index names.
    """
    results: dict[str, list[str]] = {}

    for definition in definitions:
        collection = db[definition.collection]
        created_indexes = await collection.create_indexes(list(definition.indexes))
        results[definition.collection] = created_indexes

    return results
