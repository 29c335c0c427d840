"""
Unit tests for name-based matchup queries.
"""

from datetime import date

import pytest

from mma_math.config import DEFAULT_ELO, PLACEHOLDER_PIC_URL
from mma_math.matchups import MatchupResult, MatchupService, PathStep


@pytest.fixture
def service(fight_data) -> MatchupService:
    return MatchupService(fight_data)


class TestFindPath:
    """Test single path queries by name."""

    def test_two_step_path(self, service):
        """Holm beat Rousey, who beat Tate."""
        result = service.find_path("Holly Holm", "Miesha Tate")
        assert result.found
        assert result.degrees == 2
        assert result.fighter_ids == ["holm", "rousey", "tate"]

    def test_steps_are_hydrated(self, service):
        """Steps should carry names, dates and methods."""
        result = service.find_path("Holly Holm", "Miesha Tate")
        assert result.steps[0] == PathStep(
            step_number=1,
            winner_id="holm",
            winner_name="Holly Holm",
            loser_id="rousey",
            loser_name="Ronda Rousey",
            occurred_on=date(2015, 11, 14),
            method="KO/TKO",
        )
        # First of the two Rousey wins over Tate
        assert result.steps[1].occurred_on == date(2013, 3, 2)

    def test_fighter_details(self, service):
        """Every fighter on the path gets a display record with defaults."""
        fighters = service.find_path("Holly Holm", "Miesha Tate").fighters
        assert [f.name for f in fighters] == ["Holly Holm", "Ronda Rousey", "Miesha Tate"]
        assert fighters[0].elo == 1650.0
        assert fighters[0].pic_url == PLACEHOLDER_PIC_URL
        assert fighters[1].pic_url == "https://example.com/rousey.png"
        assert fighters[2].elo == DEFAULT_ELO

    def test_same_fighter(self, service):
        """A fighter reaches itself with zero wins."""
        result = service.find_path("Jon Jones", "Jon Jones")
        assert result.found
        assert result.degrees == 0
        assert result.fighter_ids == ["jones"]

    def test_no_path(self, service):
        """Unconnected fighters are not found."""
        result = service.find_path("Jon Jones", "Holly Holm")
        assert result == MatchupResult.not_found("jones", "holm")
        assert result.degrees is None
        assert result.fighter_ids == []

    def test_unknown_name(self, service):
        """Unknown names are not found, not an error."""
        result = service.find_path("Nobody", "Holly Holm")
        assert not result.found
        assert result.start_id is None
        assert result.target_id == "holm"

    def test_find_by_id(self, service):
        """Id queries skip name resolution."""
        result = service.find_path_by_id("tate", "rousey")
        assert result.fighter_ids == ["tate", "holm", "rousey"]

    def test_describe_step(self, service):
        """Steps render to a readable line."""
        step = service.find_path("Miesha Tate", "Holly Holm").steps[0]
        assert step.describe() == "Miesha Tate def. Holly Holm (SUB, 2016-03-05)"

    def test_describe_step_without_metadata(self):
        """Missing method and date are left out."""
        step = PathStep(1, "a", "A", "b", "B", None, None)
        assert step.describe() == "A def. B"


class TestNotableMatchups:
    """Test GOAT path queries."""

    def test_reachable_goats_in_table_order(self, service):
        """Unreachable GOATs are skipped, order follows the elo table."""
        results = service.notable_matchups("Miesha Tate")
        assert [r.target_id for r in results] == ["rousey", "holm"]
        assert [r.degrees for r in results] == [2, 1]

    def test_limit(self, service):
        """Limit caps the number of GOATs returned."""
        results = service.notable_matchups("Miesha Tate", limit=1)
        assert [r.target_id for r in results] == ["rousey"]

    def test_zero_limit(self, service):
        """A zero limit returns nothing."""
        assert service.notable_matchups("Miesha Tate", limit=0) == []

    def test_goat_includes_self(self, service):
        """A GOAT's own entry is a zero-win hit."""
        results = service.notable_matchups("Amanda Nunes")
        assert [r.target_id for r in results] == ["nunes", "rousey", "holm"]
        assert results[0].degrees == 0
        assert results[2].fighter_ids == ["nunes", "tate", "holm"]

    def test_unknown_fighter(self, service):
        """Unknown names give no GOATs."""
        assert service.notable_matchups("Nobody") == []

    def test_opponent_names(self, service):
        """Names of reachable GOATs, for a drop-down."""
        assert service.notable_opponent_names("Miesha Tate") == ["Ronda Rousey", "Holly Holm"]


class TestFighterNames:
    """Test the autocomplete source."""

    def test_lists_every_named_fighter(self, service):
        """Autocomplete source should list every named fighter."""
        assert service.fighter_names() == [
            "Amanda Nunes",
            "Holly Holm",
            "Jon Jones",
            "Miesha Tate",
            "Ronda Rousey",
        ]
