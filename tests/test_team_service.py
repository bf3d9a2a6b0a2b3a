"""
Tests for TeamService.
"""

import pytest
from bson import ObjectId

from matchbet.models.team import Team
from matchbet.services.team_service import TeamNotFoundError, TeamValidationError


class TestRegisterTeam:
    """Tests for team registration."""

    async def test_register_persists_team(self, team_service, team_repository):
        """Test that a valid team is saved and returned."""
        team = await team_service.register_team("Palmeiras", "PAL", "SP")

        assert isinstance(team, Team)
        assert (team.name, team.code, team.region) == ("Palmeiras", "PAL", "SP")
        team_repository.save.assert_awaited_once_with(team)

    async def test_register_without_region(self, team_service):
        """Test that region is optional."""
        team = await team_service.register_team("Flamengo", "FLA")
        assert team.region is None

    async def test_values_stored_as_given(self, team_service):
        """Surrounding whitespace is not stripped."""
        team = await team_service.register_team(" Gremio ", "GRE ")
        assert team.name == " Gremio "
        assert team.code == "GRE "

    async def test_empty_name_rejected(self, team_service, team_repository):
        """Test that an empty name fails and nothing is persisted."""
        with pytest.raises(TeamValidationError):
            await team_service.register_team("", "PAL")

        team_repository.save.assert_not_awaited()

    async def test_empty_code_rejected(self, team_service, team_repository):
        """Test that an empty code fails and nothing is persisted."""
        with pytest.raises(TeamValidationError):
            await team_service.register_team("Palmeiras", "")

        team_repository.save.assert_not_awaited()

    async def test_whitespace_only_values_registered(self, team_service, team_repository):
        """Whitespace-only name and code are not empty and are stored unchanged."""
        team = await team_service.register_team("   ", " ")

        assert team.name == "   "
        assert team.code == " "
        team_repository.save.assert_awaited_once_with(team)

    async def test_each_registration_gets_new_id(self, team_service):
        """Registering the same data twice creates two teams."""
        first = await team_service.register_team("Palmeiras", "PAL")
        second = await team_service.register_team("Palmeiras", "PAL")
        assert first.id != second.id


class TestGetTeam:
    """Tests for team lookup."""

    async def test_get_existing(self, team_service, team_repository, team_factory):
        """Test lookup of a stored team."""
        team = team_factory.create()
        team_repository.get_by_id.return_value = team

        assert await team_service.get_team(team.id) is team
        team_repository.get_by_id.assert_awaited_once_with(team.id)

    async def test_get_missing(self, team_service):
        """Test that an unknown id raises TeamNotFoundError."""
        with pytest.raises(TeamNotFoundError):
            await team_service.get_team(ObjectId())


class TestListTeams:
    """Tests for team listing."""

    async def test_list_all(self, team_service, team_repository, team_factory):
        """Without a region every team is returned."""
        teams = [team_factory.create(), team_factory.create(region=None)]
        team_repository.find_all.return_value = teams

        assert await team_service.list_teams() == teams
        team_repository.find_by_region.assert_not_awaited()

    async def test_list_by_region(self, team_service, team_repository, team_factory):
        """A region is passed through as an exact filter."""
        teams = [team_factory.create(region="RJ")]
        team_repository.find_by_region.return_value = teams

        assert await team_service.list_teams("RJ") == teams
        team_repository.find_by_region.assert_awaited_once_with("RJ")
        team_repository.find_all.assert_not_awaited()

    async def test_empty_region_is_a_filter(self, team_service, team_repository):
        """The empty string filters rather than meaning 'all'."""
        await team_service.list_teams("")

        team_repository.find_by_region.assert_awaited_once_with("")
        team_repository.find_all.assert_not_awaited()
