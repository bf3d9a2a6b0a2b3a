"""
Database connection and management module.

Provides async MongoDB connectivity through Motor driver.
"""

from matchbet.db.connection import (
    DatabaseConnection,
    close_database,
    get_connection,
    get_database,
)
from matchbet.db.indexes import BETTING_INDEXES, CHAMPIONSHIP_INDEXES, ensure_indexes

__all__ = [
    "DatabaseConnection",
    "get_connection",
    "get_database",
    "close_database",
    "ensure_indexes",
    "CHAMPIONSHIP_INDEXES",
    "BETTING_INDEXES",
]
