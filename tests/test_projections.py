"""Tests for games back, pythagorean and projected wins."""

from types import SimpleNamespace

import pytest

from spreadsontoast.services.mlb.projections import (
    assign_games_back,
    calculate_games_back,
    calculate_projected_wins,
    calculate_pythagorean_win_pct,
    calculate_pythagorean_wins,
)


class TestGamesBack:
    def test_leader_is_dash(self):
        assert calculate_games_back(40, 20, 40, 20) == "-"

    def test_team_ahead_of_reference_is_dash(self):
        assert calculate_games_back(40, 20, 41, 19) == "-"

    def test_whole_games(self):
        assert calculate_games_back(40, 20, 37, 23) == "3"

    def test_half_game(self):
        assert calculate_games_back(40, 20, 37, 22) == "2.5"
        assert calculate_games_back(40, 20, 36, 23) == "3.5"

    def test_assign_groups_by_division(self):
        records = [
            SimpleNamespace(wins=40, losses=20, division=1),
            SimpleNamespace(wins=35, losses=25, division=1),
            SimpleNamespace(wins=30, losses=30, division=2),
            SimpleNamespace(wins=31, losses=28, division=2),
        ]

        games_back = assign_games_back(records, lambda r: r.division)

        assert games_back == ["-", "5", "1.5", "-"]

    def test_assign_tied_leaders_both_dash(self):
        records = [
            SimpleNamespace(wins=30, losses=20),
            SimpleNamespace(wins=30, losses=20),
            SimpleNamespace(wins=29, losses=21),
        ]

        assert assign_games_back(records, lambda r: "div") == ["-", "-", "1"]


class TestPythagorean:
    def test_no_runs_falls_back_to_half(self):
        assert calculate_pythagorean_win_pct(0, 0) == 0.5

    def test_no_games_is_zero(self):
        assert calculate_pythagorean_wins(0, 0, 0) == 0.0
        assert calculate_pythagorean_wins(50, 20, 0) == 0.0

    def test_equal_runs_is_half_of_games(self):
        assert calculate_pythagorean_wins(100, 100, 10) == 5.0

    def test_exponent(self):
        pct = calculate_pythagorean_win_pct(300, 250)
        expected = 300**1.83 / (300**1.83 + 250**1.83)
        assert pct == pytest.approx(expected)

    @pytest.mark.parametrize(
        "runs_scored,runs_allowed,games_played",
        [(0, 50, 12), (50, 0, 12), (400, 390, 81), (1, 1000, 162)],
    )
    def test_estimate_within_games_played(self, runs_scored, runs_allowed, games_played):
        wins = calculate_pythagorean_wins(runs_scored, runs_allowed, games_played)
        assert 0 <= wins <= games_played


class TestProjectedWins:
    def test_pace_over_full_season(self):
        assert calculate_projected_wins(30, 60) == 81.0
        assert calculate_projected_wins(40, 60) == 108.0

    def test_no_games_uses_line(self):
        assert calculate_projected_wins(0, 0, fallback=91.5) == 91.5

    def test_no_games_without_line_is_zero(self):
        assert calculate_projected_wins(0, 0) == 0.0

    def test_unrounded(self):
        assert calculate_projected_wins(1, 3, for_display=False) == pytest.approx(54.0)
        assert calculate_projected_wins(2, 7) == 46.3
