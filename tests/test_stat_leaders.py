"""Tests for stat leaders."""

from analytics.awards import MIN_GAMES_FOR_AWARDS
from analytics.records import PlayerStatLine
from analytics.stat_leaders import STAT_LEADER_CATEGORIES, compute_stat_leaders


def _player(player_id, games_played=MIN_GAMES_FOR_AWARDS, **stats):
    return PlayerStatLine(player_id=player_id, gamertag=player_id.upper(), games_played=games_played, **stats)


class TestComputeStatLeaders:

    def test_every_category_present(self):
        assert set(compute_stat_leaders([])) == set(STAT_LEADER_CATEGORIES)

    def test_ordering_and_limit(self):
        players = [_player(f"p{i}", points_per_game=float(i)) for i in range(7)]
        leaders = compute_stat_leaders(players, limit=3)
        assert [leader.player_id for leader in leaders["points"]] == ["p6", "p5", "p4"]
        assert leaders["points"][0].value == 6.0
        assert leaders["points"][0].gamertag == "P6"

    def test_minimum_games(self):
        players = [
            _player("regular", points_per_game=10),
            _player("cameo", games_played=1, points_per_game=40),
        ]
        assert [leader.player_id for leader in compute_stat_leaders(players)["points"]] == ["regular"]

    def test_percentages_flagged_and_unscaled(self):
        leaders = compute_stat_leaders([_player("p1", field_goal_percentage=0.55)])
        fg = leaders["field_goal_percentage"][0]
        assert fg.is_percentage is True
        assert fg.value == 0.55
        assert leaders["points"][0].is_percentage is False
