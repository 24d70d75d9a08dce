"""Tests for the row normalizer: every input degrades to defaults, nothing raises."""

from datetime import datetime

import pytest
import pytz

from analytics.normalizer import (
    first_or_default,
    normalize_leaderboard_player,
    normalize_match,
    normalize_stat_line,
    normalize_team,
    team_identity,
    team_names,
    to_bool,
    to_datetime,
    to_float,
    to_int,
)
from analytics.records import FREE_AGENT, UNKNOWN_POSITION, UNKNOWN_TEAM


class TestFirstOrDefault:
    """Relations may come back as a list, an object, or not at all."""

    def test_list_takes_first(self):
        assert first_or_default([{"name": "A"}, {"name": "B"}]) == {"name": "A"}

    def test_empty_list_gives_default(self):
        assert first_or_default([], "n/a") == "n/a"

    def test_list_of_none_gives_default(self):
        assert first_or_default([None]) is None

    def test_mapping_passes_through(self):
        assert first_or_default({"name": "A"}) == {"name": "A"}

    @pytest.mark.parametrize("value", [None, 3, "team"])
    def test_other_values_give_default(self, value):
        assert first_or_default(value, "d") == "d"


class TestCoercion:

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, 0.0),
            ("", 0.0),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            (3, 3.0),
            ("abc", 0.0),
            (float("nan"), 0.0),
            (float("inf"), 0.0),
            ("NaN", 0.0),
            (10 ** 400, 0.0),
            (-(10 ** 400), 0.0),
            ("1e400", 0.0),
        ],
    )
    def test_to_float(self, value, expected):
        assert to_float(value) == expected

    def test_to_int_truncates(self):
        assert to_int("4.9") == 4
        assert to_int(None) == 0

    @pytest.mark.parametrize(
        "value,expected",
        [(None, False), (True, True), (0, False), (1, True), ("true", True), ("no", False), ("", False)],
    )
    def test_to_bool(self, value, expected):
        assert to_bool(value) is expected

    def test_to_datetime_parses_zulu(self):
        parsed = to_datetime("2026-06-01T19:00:00Z")
        assert parsed == datetime(2026, 6, 1, 19, 0, tzinfo=pytz.utc)

    def test_to_datetime_localizes_naive_as_utc(self):
        parsed = to_datetime(datetime(2026, 6, 1, 19, 0))
        assert parsed.tzinfo is not None
        assert parsed.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("value", [None, "", "not a date"])
    def test_to_datetime_unparseable(self, value):
        assert to_datetime(value) is None


class TestTeamIdentity:

    def test_flat_columns(self):
        row = {"team_id": "t1", "team_name": "Ballers", "team_logo_url": "logo.png"}
        assert team_identity(row) == ("t1", "Ballers", "logo.png")

    def test_roster_relation_first_entry_wins(self):
        row = {"team_rosters": [{"teams": {"id": "t1", "name": "Ballers"}}, {"teams": {"id": "t2", "name": "Other"}}]}
        assert team_identity(row) == ("t1", "Ballers", None)

    def test_roster_relation_as_list_of_lists(self):
        row = {"team_rosters": [{"teams": [{"id": "t1", "name": "Ballers", "logo_url": "x.png"}]}]}
        assert team_identity(row) == ("t1", "Ballers", "x.png")

    def test_teams_relation(self):
        assert team_identity({"teams": [{"id": "t9", "name": "Niners"}]})[1] == "Niners"

    @pytest.mark.parametrize("row", [{}, {"team_rosters": []}, {"teams": []}, None, "junk"])
    def test_free_agent(self, row):
        assert team_identity(row) == ("", FREE_AGENT, None)

    def test_team_names_keeps_order(self):
        row = {"teams": [{"name": "Ballers"}, {"name": "Dunkers"}, {"name": None}]}
        assert team_names(row) == ("Ballers", "Dunkers")

    def test_team_names_empty(self):
        assert team_names({}) == ()


class TestNormalizeTeam:

    def test_defaults(self):
        team = normalize_team({})
        assert team.id == ""
        assert team.name == UNKNOWN_TEAM
        assert team.roster_size == 0
        assert team.current_rp is None

    def test_roster_list_counts(self):
        team = normalize_team({"id": "t1", "name": "Ballers", "players": [{}, {}, {}]})
        assert team.roster_size == 3

    def test_roster_size_column(self):
        assert normalize_team({"id": "t1", "roster_size": "4"}).roster_size == 4

    def test_out_of_range_numbers(self):
        team = normalize_team({"id": "t1", "current_rp": 10 ** 400, "global_rank": 10 ** 400})
        assert team.current_rp is None
        assert team.global_rank is None

    def test_numeric_columns(self):
        team = normalize_team({"id": "t1", "current_rp": "1200", "global_rank": 3.0})
        assert team.current_rp == 1200.0
        assert team.global_rank == 3


class TestNormalizeMatch:

    def test_flat_row(self):
        match = normalize_match({
            "id": "m1", "team_a_id": "t1", "team_b_id": "t2",
            "team_a_name": "Ballers", "score_a": 80, "score_b": "70",
            "played_at": "2026-06-01T19:00:00Z",
        })
        assert match.team_a_id == "t1"
        assert match.team_a_name == "Ballers"
        assert (match.score_a, match.score_b) == (80, 70)
        assert match.is_completed

    def test_nested_team_relations(self):
        match = normalize_match({"id": "m1", "team_a": [{"id": "t1", "name": "Ballers"}], "team_b": {"id": "t2"}})
        assert match.team_a_id == "t1"
        assert match.team_a_name == "Ballers"
        assert match.team_b_id == "t2"

    def test_half_entered_score_is_unplayed(self):
        match = normalize_match({"id": "m1", "team_a_id": "t1", "team_b_id": "t2", "score_a": 50})
        assert match.score_a is None
        assert match.score_b is None
        assert not match.is_completed

    def test_score_beyond_float_range_is_unplayed(self):
        match = normalize_match({"id": "m1", "score_a": 10 ** 400, "score_b": 1})
        assert match.score_a is None
        assert match.score_b is None

    def test_tbd_sides(self):
        match = normalize_match({"id": "m1"})
        assert match.team_a_id is None
        assert match.team_b_id is None
        assert match.played_at is None


class TestNormalizeStatLine:

    def test_missing_everything(self):
        line = normalize_stat_line({})
        assert line.points_per_game == 0.0
        assert line.games_played == 0
        assert line.is_rookie is False
        assert line.position == UNKNOWN_POSITION
        assert line.team_name == FREE_AGENT
        assert line.team_logo_url is None

    def test_non_mapping_input(self):
        assert normalize_stat_line(None).player_id == ""

    def test_out_of_range_stat(self):
        line = normalize_stat_line({"player_id": "p1", "points_per_game": 10 ** 400, "games_played": 10 ** 400})
        assert line.points_per_game == 0.0
        assert line.games_played == 0

    def test_nulls_become_zero(self):
        line = normalize_stat_line({
            "player_id": "p1", "gamertag": "JohnDoe", "points_per_game": None,
            "assists_per_game": "4.5", "is_rookie": None, "games_played": -2,
        })
        assert line.points_per_game == 0.0
        assert line.assists_per_game == 4.5
        assert line.is_rookie is False
        assert line.games_played == 0


class TestNormalizeLeaderboardPlayer:

    def test_nested_stats(self):
        player = normalize_leaderboard_player({
            "id": "p1", "gamertag": "JohnDoe", "position": "Point Guard",
            "teams": [{"name": "Ballers"}], "player_rank_score": "88.5",
            "stats": {"games_played": 4, "points_per_game": 21.0},
        })
        assert player.team_names == ("Ballers",)
        assert player.primary_team_name == "Ballers"
        assert player.player_rank_score == 88.5
        assert player.games_played == 4
        assert player.points_per_game == 21.0

    def test_flat_stats_and_no_team(self):
        player = normalize_leaderboard_player({"id": "p1", "points_per_game": 9})
        assert player.team_names == ()
        assert player.primary_team_name == ""
        assert player.points_per_game == 9.0
        assert player.position is None
