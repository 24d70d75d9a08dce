"""Tests for collapsing box score rows into per-game averages."""

import pytest

from analytics.player_aggregates import (
    aggregate_player_games,
    game_overall_rating,
    group_rows_by_player,
    shooting_fraction,
)
from analytics.records import FREE_AGENT


PLAYER = {
    "id": "p1",
    "gamertag": "JohnDoe",
    "position": "Point Guard",
    "is_rookie": True,
    "teams": [{"id": "t1", "name": "Ballers", "logo_url": "ballers.png"}],
}


class TestShootingFraction:

    @pytest.mark.parametrize(
        "made,attempted,expected",
        [(5, 10, 0.5), (0, 0, 0.0), (3, None, 0.0), (None, 4, 0.0), ("2", "8", 0.25)],
    )
    def test_fraction(self, made, attempted, expected):
        assert shooting_fraction(made, attempted) == pytest.approx(expected)


class TestAggregatePlayerGames:

    def test_no_games(self):
        assert aggregate_player_games(PLAYER, []) is None

    def test_averages(self):
        rows = [
            {"points": 20, "assists": 4, "rebounds": 6, "steals": 2, "blocks": 0, "fouls": 3,
             "fgm": 8, "fga": 16, "three_points_made": 2, "three_points_attempted": 5, "ftm": 2, "fta": 2},
            {"points": 10, "assists": 6, "rebounds": 2, "steals": 0, "blocks": 2, "fouls": 1,
             "fgm": 3, "fga": 4, "three_points_made": 0, "three_points_attempted": 0, "ftm": 0, "fta": 0},
        ]
        line = aggregate_player_games(PLAYER, rows)

        assert line.player_id == "p1"
        assert line.games_played == 2
        assert line.points_per_game == pytest.approx(15.0)
        assert line.assists_per_game == pytest.approx(5.0)
        assert line.rebounds_per_game == pytest.approx(4.0)
        assert line.steals_per_game == pytest.approx(1.0)
        assert line.blocks_per_game == pytest.approx(1.0)
        assert line.fouls_per_game == pytest.approx(2.0)
        assert line.field_goal_percentage == pytest.approx((0.5 + 0.75) / 2)
        assert line.three_point_percentage == pytest.approx(0.2)
        assert line.free_throw_percentage == pytest.approx(0.5)

    def test_player_fields_carried(self):
        line = aggregate_player_games(PLAYER, [{"points": 1}])
        assert line.gamertag == "JohnDoe"
        assert line.position == "Point Guard"
        assert line.is_rookie is True
        assert line.team_id == "t1"
        assert line.team_name == "Ballers"
        assert line.team_logo_url == "ballers.png"

    def test_free_agent(self):
        line = aggregate_player_games({"id": "p2", "gamertag": "Solo"}, [{"points": 1}])
        assert line.team_name == FREE_AGENT

    def test_missing_columns_count_as_zero(self):
        line = aggregate_player_games(PLAYER, [{"points": None}, {}])
        assert line.points_per_game == 0.0
        assert line.field_goal_percentage == 0.0

    def test_overall_rating(self):
        row = {"points": 10, "assists": 2, "rebounds": 5, "steals": 1, "blocks": 1, "turnovers": 2}
        assert game_overall_rating(row) == pytest.approx(10 + 3 + 6 + 2 + 2 - 3)
        line = aggregate_player_games(PLAYER, [row, {}])
        assert line.overall_rating == pytest.approx(10.0)


class TestGroupRows:

    def test_groups_in_first_seen_order(self):
        rows = [{"player_id": "b"}, {"player_id": "a"}, {"player_id": "b"}, {"match_id": "orphan"}]
        grouped = group_rows_by_player(rows)
        assert list(grouped) == ["b", "a"]
        assert len(grouped["b"]) == 2
