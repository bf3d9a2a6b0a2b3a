"""
MongoDB async connection module using Motor.

Provides connection management, health checks, and database access.
Both services share one cluster and keep their records in separate
databases.
"""

import asyncio

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from matchbet.config.settings import get_settings

logger = structlog.get_logger(__name__)


class DatabaseConnection:
    """
    Manages MongoDB connection lifecycle using Motor async driver.

    Usage:
        db_conn = DatabaseConnection()
        await db_conn.connect()
        db = db_conn.get_database("betting_db")
        # ... use db
        await db_conn.disconnect()

    Or as context manager:
        async with DatabaseConnection() as conn:
            db = conn.get_database("championship_db")
    """

    def __init__(self) -> None:
        self.settings = get_settings()
        self._client: AsyncIOMotorClient | None = None
        self._lock = asyncio.Lock()

    @property
    def client(self) -> AsyncIOMotorClient:
        """Get the Motor client instance."""
        if self._client is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._client

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def get_database(self, name: str) -> AsyncIOMotorDatabase:
        """Get a database by name from the connected client."""
        return self.client[name]

    async def connect(self) -> None:
        """
        Establish connection to MongoDB.

        Uses a lock to prevent multiple simultaneous connections.
        """
        async with self._lock:
            if self._client is not None:
                logger.debug("Already connected to MongoDB")
                return

            mongo_settings = self.settings.mongo

            logger.info(
                "Connecting to MongoDB",
                host=mongo_settings.host,
                port=mongo_settings.port,
            )

            try:
                client = AsyncIOMotorClient(
                    mongo_settings.uri,
                    minPoolSize=mongo_settings.min_pool_size,
                    maxPoolSize=mongo_settings.max_pool_size,
                    maxIdleTimeMS=mongo_settings.max_idle_time_ms,
                    connectTimeoutMS=mongo_settings.connect_timeout_ms,
                    serverSelectionTimeoutMS=mongo_settings.server_selection_timeout_ms,
                )

                # Verify connection with ping
                await client.admin.command("ping")
                self._client = client

                logger.info("Successfully connected to MongoDB")

            except Exception as e:
                logger.error("Failed to connect to MongoDB", error=str(e))
                self._client = None
                raise

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        async with self._lock:
            if self._client is None:
                logger.debug("No active MongoDB connection to close")
                return

            logger.info("Disconnecting from MongoDB")
            self._client.close()
            self._client = None
            logger.info("Disconnected from MongoDB")

    async def health_check(self, database: str | None = None) -> dict:
        """
        Ping MongoDB and report latency.

        Args:
            database: Service database to ping and inspect. When omitted
                only the cluster (admin database) is checked.

        Returns:
            dict with status, latency and, for a named database, the
            collections it holds
        """
        if self._client is None:
            return {
                "status": "disconnected",
                "healthy": False,
                "error": "No active connection",
            }

        target = self._client[database] if database else self._client.admin

        try:
            loop = asyncio.get_running_loop()
            start = loop.time()
            await target.command("ping")
            latency_ms = (loop.time() - start) * 1000

            server_info = await self._client.server_info()
            report = {
                "status": "connected",
                "healthy": True,
                "latency_ms": round(latency_ms, 2),
                "server_version": server_info.get("version", "unknown"),
            }

            if database:
                report["database"] = database
                report["collections"] = sorted(await target.list_collection_names())

            return report

        except PyMongoError as e:
            logger.error("Health check failed", database=database, error=str(e))
            return {
                "status": "error",
                "healthy": False,
                "error": str(e),
            }

    async def __aenter__(self) -> "DatabaseConnection":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()


# Global connection instance (singleton pattern)
_db_connection: DatabaseConnection | None = None


async def get_connection() -> DatabaseConnection:
    """
    Get the shared DatabaseConnection instance.

    Useful when you need access to connection management methods
    like health_check() or disconnect().
    """
    global _db_connection

    if _db_connection is None:
        _db_connection = DatabaseConnection()

    return _db_connection


async def get_database(name: str) -> AsyncIOMotorDatabase:
    """
    Get a database by name, connecting if necessary.

    Example:
        db = await get_database(get_settings().mongo.betting_db)
        bets = db.bets
    """
    connection = await get_connection()

    if not connection.is_connected:
        await connection.connect()

    return connection.get_database(name)


async def close_database() -> None:
    """
    Close the global database connection.

    Should be called during application shutdown.
    """
    global _db_connection

    if _db_connection is not None:
        await _db_connection.disconnect()
        _db_connection = None
