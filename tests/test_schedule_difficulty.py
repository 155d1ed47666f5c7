"""Tests for the strength-of-schedule calculator."""

from datetime import date

import pytest

from spreadsontoast.models import Game
from spreadsontoast.services.mlb.schedule_difficulty import (
    calculate_percentile,
    calculate_rank,
    compute_schedule_difficulty,
    difficulty_label,
    get_schedule_difficulty,
    split_played_remaining,
)
from tests.conftest import game_row

AS_OF = date(2025, 6, 1)


def sos_game(
    game_pk: int,
    home: int,
    away: int,
    official_date: date,
    state: str = "Final",
    home_pct: str | None = None,
    away_pct: str | None = None,
) -> Game:
    return Game(
        game_pk=game_pk,
        season="2025",
        official_date=official_date,
        game_type="RegularSeason",
        home_team_mlb_id=home,
        away_team_mlb_id=away,
        home_win_pct=home_pct,
        away_win_pct=away_pct,
        abstract_game_state=state,
    )


def five_games_against(team: int, opponent_pct: str, first_pk: int) -> list[Game]:
    return [
        sos_game(first_pk + i, 900, team, date(2025, 5, 1 + i), home_pct=opponent_pct)
        for i in range(5)
    ]


class TestRanking:
    def test_three_team_percentiles(self):
        values = [0.55, 0.50, 0.45]

        assert calculate_percentile(0.55, values) == pytest.approx(83.33, abs=0.01)
        assert calculate_percentile(0.50, values) == pytest.approx(50.0)
        assert calculate_percentile(0.45, values) == pytest.approx(16.67, abs=0.01)

    def test_labels_by_thirds(self):
        assert difficulty_label(83.3) == "Hard"
        assert difficulty_label(50.0) == "Average"
        assert difficulty_label(16.7) == "Easy"
        assert difficulty_label(67) == "Hard"
        assert difficulty_label(33) == "Easy"

    def test_rank_one_is_hardest_and_ties_share(self):
        values = [0.55, 0.50, 0.50, 0.45]

        assert calculate_rank(0.55, values) == 1
        assert calculate_rank(0.50, values) == 2
        assert calculate_rank(0.45, values) == 4

    def test_empty_percentile_is_middle(self):
        assert calculate_percentile(0.5, []) == 50.0


class TestSplit:
    def test_played_requires_final_on_or_before(self):
        games = [
            sos_game(1, 1, 2, date(2025, 5, 30)),
            sos_game(2, 1, 2, AS_OF),
            sos_game(3, 1, 2, date(2025, 6, 2), state="Preview"),
            sos_game(4, 1, 2, date(2025, 5, 31), state="Preview"),  # postponed, not final
            sos_game(5, 3, 4, date(2025, 5, 30)),  # other teams
        ]

        played, remaining = split_played_remaining(games, 1, AS_OF)

        assert [g.game_pk for g in played] == [1, 2]
        assert [g.game_pk for g in remaining] == [3, 4]


class TestCompute:
    def test_league_ranking(self):
        games = (
            five_games_against(1, ".600", 100)
            + five_games_against(2, ".500", 200)
            + five_games_against(3, ".400", 300)
        )

        hardest = compute_schedule_difficulty(1, games, [1, 2, 3], AS_OF)
        easiest = compute_schedule_difficulty(3, games, [1, 2, 3], AS_OF)

        assert hardest.team_count == 3
        assert hardest.played.avg_opponent_win_pct == 0.6
        assert hardest.played.games == 5
        assert hardest.played.rank == 1
        assert hardest.played.percentile == 83.3
        assert hardest.played.label == "Hard"
        assert hardest.remaining is None

        assert easiest.played.rank == 3
        assert easiest.played.percentile == 16.7
        assert easiest.played.label == "Easy"

    def test_small_samples_excluded_from_peers(self):
        games = five_games_against(1, ".600", 100) + [
            sos_game(200, 900, 2, date(2025, 5, 1), home_pct=".700"),
        ]

        result = compute_schedule_difficulty(1, games, [1, 2], AS_OF)

        # team 2 has one game, below the confidence threshold
        assert result.played.rank == 1
        assert result.played.percentile == 50.0

    def test_played_and_remaining(self):
        games = [
            sos_game(1, 1, 2, date(2025, 5, 20), away_pct=".600"),
            sos_game(2, 2, 1, date(2025, 5, 21), home_pct=".400"),
            sos_game(3, 1, 3, date(2025, 6, 10), state="Preview", away_pct=".700"),
        ]

        result = compute_schedule_difficulty(1, games, [1, 2, 3], AS_OF)

        assert result.played.avg_opponent_win_pct == 0.5
        assert result.played.games == 2
        assert result.remaining.avg_opponent_win_pct == 0.7
        assert result.remaining.games == 1

    def test_no_games_gives_none_both_ways(self):
        result = compute_schedule_difficulty(1, [], [1, 2, 3], AS_OF)

        assert result.played is None
        assert result.remaining is None
        assert result.team_count == 3

    def test_unparseable_pct_is_skipped(self):
        games = [
            sos_game(1, 1, 2, date(2025, 5, 20), away_pct=".600"),
            sos_game(2, 1, 2, date(2025, 5, 21), away_pct="-.--"),
        ]

        result = compute_schedule_difficulty(1, games, [1, 2], AS_OF)

        assert result.played.games == 1


class TestFromDatabase:
    async def test_filters_non_regular_season(self, seeded, teams):
        nyy, bos, tor = teams["NYY"], teams["BOS"], teams["TOR"]
        seeded.add_all(
            [
                game_row(1, nyy, bos, date(2025, 5, 1), state="Final", away_win_pct=".550"),
                game_row(2, tor, nyy, date(2025, 5, 2), state="Final", home_win_pct=".450"),
                game_row(3, nyy, tor, date(2025, 3, 1), state="Final", game_type="SpringTraining", away_win_pct=".900"),
                game_row(4, nyy, tor, date(2025, 5, 3), state="Final", tiebreaker=True, away_win_pct=".900"),
            ]
        )
        await seeded.commit()

        result = await get_schedule_difficulty(seeded, nyy.id, "2025", AS_OF)

        assert result.team_count == 30
        assert result.played.games == 2
        assert result.played.avg_opponent_win_pct == 0.5

    async def test_unknown_team_is_none(self, seeded):
        assert await get_schedule_difficulty(seeded, 99999, "2025", AS_OF) is None
