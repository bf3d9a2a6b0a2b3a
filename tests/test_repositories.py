"""
Tests for the Motor-backed repositories against a mocked collection.
"""

from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from matchbet.db.connection import DatabaseConnection
from matchbet.db.indexes import BETTING_INDEXES, CHAMPIONSHIP_INDEXES, ensure_indexes
from matchbet.models.team import Team
from matchbet.repositories.bet_repository import BetRepository
from matchbet.repositories.match_repository import MatchRepository
from matchbet.repositories.team_repository import TeamRepository


class TestBaseRepository:
    """Tests for the shared record store operations."""

    async def test_save_upserts_by_id(self, mock_db, mock_collection, team_factory):
        """save() replaces the document under its _id, inserting if new."""
        team = team_factory.create()
        repository = TeamRepository(mock_db)

        result = await repository.save(team)

        assert result is team
        filter_, document = mock_collection.replace_one.await_args.args
        assert filter_ == {"_id": team.id}
        assert document["_id"] == team.id
        assert document["name"] == team.name
        assert mock_collection.replace_one.await_args.kwargs == {"upsert": True}

    async def test_get_by_id_found(self, mock_db, mock_collection, team_factory):
        """get_by_id() validates the stored document."""
        team = team_factory.create()
        mock_collection.find_one.return_value = team.to_mongo()

        result = await TeamRepository(mock_db).get_by_id(str(team.id))

        assert isinstance(result, Team)
        assert result.id == team.id
        mock_collection.find_one.assert_awaited_once_with({"_id": team.id})

    async def test_get_by_id_missing(self, mock_db, mock_collection):
        """Test that a missing document gives None."""
        assert await TeamRepository(mock_db).get_by_id(ObjectId()) is None

    async def test_get_by_id_malformed(self, mock_db, mock_collection):
        """A malformed id gives None without querying."""
        assert await TeamRepository(mock_db).get_by_id("not-an-id") is None
        mock_collection.find_one.assert_not_awaited()

    async def test_find_all(self, mock_db, mock_collection, team_factory):
        """find_all() returns every document in store order."""
        teams = [team_factory.create(), team_factory.create()]
        mock_collection.find.return_value.to_list.return_value = [t.to_mongo() for t in teams]

        result = await TeamRepository(mock_db).find_all()

        assert [t.id for t in result] == [t.id for t in teams]
        mock_collection.find.assert_called_once_with({})

    async def test_find_many_reads_whole_cursor(self, mock_db, mock_collection):
        """The filter is passed through and the cursor is read without a cap."""
        cursor = mock_collection.find.return_value

        assert await TeamRepository(mock_db).find_many({"region": "SP"}) == []

        mock_collection.find.assert_called_once_with({"region": "SP"})
        cursor.to_list.assert_awaited_once_with(length=None)

    def test_repr(self, mock_db):
        """Test repr names the collection."""
        assert repr(BetRepository(mock_db)) == "<BetRepository(collection='bets')>"


class TestQueries:
    """Tests for the equality filters of each repository."""

    async def test_teams_by_region(self, mock_db, mock_collection):
        """Region filtering is an exact match on the field."""
        await TeamRepository(mock_db).find_by_region("SP")
        mock_collection.find.assert_called_once_with({"region": "SP"})

    async def test_matches_by_home_team_code(self, mock_db, mock_collection, match_factory):
        """Match filtering looks at the embedded home team code."""
        match = match_factory.create()
        mock_collection.find.return_value.to_list.return_value = [match.to_mongo()]

        result = await MatchRepository(mock_db).find_by_home_team_code("PAL")

        assert result[0].id == match.id
        mock_collection.find.assert_called_once_with({"home_team.code": "PAL"})

    def test_collection_names(self, mock_db):
        """Each repository reads its own collection."""
        TeamRepository(mock_db)
        MatchRepository(mock_db)
        BetRepository(mock_db)

        names = [call.args[0] for call in mock_db.__getitem__.call_args_list]
        assert names == ["teams", "matches", "bets"]


class TestEnsureIndexes:
    """Tests for index creation."""

    async def test_creates_indexes_per_collection(self, mock_db, mock_collection):
        """Every definition is created on its own collection."""
        mock_collection.create_indexes = AsyncMock(return_value=["idx"])

        championship = await ensure_indexes(mock_db, CHAMPIONSHIP_INDEXES)
        betting = await ensure_indexes(mock_db, BETTING_INDEXES)

        assert set(championship) == {"teams", "matches"}
        assert set(betting) == {"bets"}


class TestDatabaseConnection:
    """Tests for DatabaseConnection health checks."""

    async def test_health_disconnected(self):
        """Without a client the check reports unhealthy."""
        health = await DatabaseConnection().health_check()

        assert health["healthy"] is False
        assert health["status"] == "disconnected"

    async def test_health_for_service_database(self):
        """A named database is pinged and its collections listed."""
        client = MagicMock()
        client.server_info = AsyncMock(return_value={"version": "7.0.4"})
        database = client.__getitem__.return_value
        database.command = AsyncMock(return_value={"ok": 1})
        database.list_collection_names = AsyncMock(return_value=["teams", "matches"])

        connection = DatabaseConnection()
        connection._client = client

        health = await connection.health_check("championship_db")

        assert health["healthy"] is True
        assert health["server_version"] == "7.0.4"
        assert health["database"] == "championship_db"
        assert health["collections"] == ["matches", "teams"]
        client.__getitem__.assert_called_once_with("championship_db")
        database.command.assert_awaited_once_with("ping")

    async def test_health_reports_driver_errors(self):
        """Driver errors are reported instead of raised."""
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

        connection = DatabaseConnection()
        connection._client = client

        health = await connection.health_check()

        assert health["healthy"] is False
        assert "no servers" in health["error"]
