"""Tests for the standings read path."""

from datetime import date

import pytest

from spreadsontoast.models import TeamStanding
from spreadsontoast.services.standings import (
    calculate_pick_result,
    calculate_win_profile,
    full_season_pythagorean_wins,
    get_division_standings,
    get_standings_board_data,
    get_started_seasons_with_dates,
    get_team_detail_data,
)

TODAY = date(2025, 6, 1)


def snapshot(team, day: date, wins: int, losses: int, rank: int | None, games_back: str | None, **fields) -> TeamStanding:
    return TeamStanding(
        date=day,
        season=str(day.year),
        sport="MLB",
        team_id=team.id,
        games_played=wins + losses,
        wins=wins,
        losses=losses,
        projected_wins=round(wins / max(wins + losses, 1) * 162, 1),
        division_rank=rank,
        division_games_back=games_back,
        **fields,
    )


@pytest.fixture
async def snapshots(seeded, teams):
    """AL East on two days plus one NL West team on the second day."""
    may_31, jun_1 = date(2025, 5, 31), date(2025, 6, 1)
    seeded.add_all(
        [
            snapshot(teams["NYY"], may_31, 34, 22, 1, "-"),
            snapshot(teams["BOS"], may_31, 30, 27, 2, "4.5"),
            snapshot(teams["NYY"], jun_1, 35, 22, 1, "-", runs_scored=300, runs_allowed=200,
                     pythagorean_win_pct=0.68, pythagorean_wins=38.8, streak_code="W3", streak_count=3,
                     streak_type="wins",
                     splits={"oneRun": {"wins": 8, "losses": 4, "pct": ".667"},
                             "home": {"wins": 20, "losses": 9, "pct": ".690"}}),
            snapshot(teams["BOS"], jun_1, 30, 28, 2, "5.5"),
            snapshot(teams["TOR"], jun_1, 28, 29, None, None),
            snapshot(teams["LAD"], jun_1, 36, 21, 1, "-"),
        ]
    )
    await seeded.commit()
    seeded.expunge_all()
    return seeded


class TestDivisionStandings:
    async def test_latest_snapshot_grouped_in_division_order(self, snapshots):
        standings = await get_division_standings(snapshots, None, TODAY)

        assert standings.season == "2025"
        assert standings.as_of_date == "2025-06-01"
        assert [d.name for d in standings.divisions] == ["NL West", "AL East"]
        assert standings.divisions[0].league == "National League"

        al_east = standings.divisions[1]
        assert al_east.league == "American League"
        assert [t.abbreviation for t in al_east.teams] == ["NYY", "BOS", "TOR"]
        nyy, bos, tor = al_east.teams
        assert (nyy.wins, nyy.losses, nyy.games_back) == (35, 22, "-")
        assert bos.games_back == "5.5"
        # missing rank sorts last with rank 0 and a "-" fallback
        assert (tor.rank, tor.games_back) == (0, "-")
        assert nyy.colors.primary == "#0C2340"

    async def test_historical_date(self, snapshots):
        standings = await get_division_standings(snapshots, date(2025, 5, 31), TODAY)

        assert standings.as_of_date == "2025-05-31"
        assert [d.name for d in standings.divisions] == ["AL East"]
        assert standings.divisions[0].teams[0].wins == 34

    async def test_no_data_is_none(self, snapshots):
        assert await get_division_standings(snapshots, date(2025, 3, 1), TODAY) is None
        assert await get_division_standings(snapshots, None, date(2026, 4, 1)) is None

    async def test_serializes_camel_case(self, snapshots):
        standings = await get_division_standings(snapshots, None, TODAY)

        payload = standings.model_dump(by_alias=True)

        assert "asOfDate" in payload
        assert "gamesBack" in payload["divisions"][1]["teams"][0]


class TestBoard:
    async def test_rows_join_lines(self, snapshots, teams):
        board = await get_standings_board_data(snapshots, "2025", date(2025, 6, 1))

        rows = {row.abbreviation: row for row in board.standings}
        assert set(rows) == {"NYY", "BOS", "TOR", "LAD"}
        assert rows["NYY"].line == 91.5
        assert rows["NYY"].pythagorean_wins == round(0.68 * 162, 1)
        # no pythagorean pct stored: fall back to projected wins
        assert rows["BOS"].pythagorean_wins == 83.8
        assert board.as_of_date == "2025-06-01"

    async def test_full_season_fallback(self, teams):
        standing = snapshot(teams["BOS"], TODAY, 30, 28, 2, "5.5")

        assert full_season_pythagorean_wins(standing) == standing.projected_wins

    async def test_empty_season(self, seeded):
        board = await get_standings_board_data(seeded, "2024")

        assert board.standings == []
        assert board.as_of_date is None


class TestTeamDetail:
    async def test_latest_with_history(self, snapshots, teams):
        detail = await get_team_detail_data(snapshots, teams["NYY"].id, "2025")

        assert detail.current.wins == 35
        assert detail.current.line == 91.5
        assert detail.current.games_back == "-"
        assert detail.current.streak.code == "W3"
        assert [p.date for p in detail.history] == ["2025-05-31", "2025-06-01"]

        profile = detail.current.win_profile
        assert profile.offense_contribution == pytest.approx(0.6)
        assert profile.pitching_contribution == pytest.approx(0.4)
        assert [s.label for s in profile.situational] == ["One-Run Games", "Home"]

    async def test_selected_date(self, snapshots, teams):
        detail = await get_team_detail_data(snapshots, teams["NYY"].id, "2025", date(2025, 5, 31))

        assert detail.current.wins == 34
        assert detail.current.win_profile is None

    async def test_unknown_team(self, snapshots):
        assert await get_team_detail_data(snapshots, 99999, "2025") is None

    async def test_team_without_snapshots(self, snapshots, teams):
        assert await get_team_detail_data(snapshots, teams["SEA"].id, "2025") is None


class TestSeasons:
    async def test_started_seasons_with_dates(self, snapshots):
        seasons = await get_started_seasons_with_dates(snapshots, TODAY)

        assert [s.season for s in seasons] == ["2025"]
        assert seasons[0].dates == ["2025-06-01", "2025-05-31"]
        assert seasons[0].latest_date == "2025-06-01"

    async def test_not_started(self, snapshots):
        assert await get_started_seasons_with_dates(snapshots, date(2025, 1, 1)) == []


class TestWinProfile:
    async def test_no_runs_or_splits(self, teams):
        assert calculate_win_profile(snapshot(teams["BOS"], TODAY, 0, 0, None, None)) is None


class TestPickResult:
    @pytest.mark.parametrize(
        "pick,line,final_wins,expected",
        [
            ("over", 88.5, 90, "win"),
            ("over", 88.5, 85, "loss"),
            ("under", 88.5, 85, "win"),
            ("under", 88.5, 90, "loss"),
            ("over", 88, 88, "push"),
            ("under", 88, 88, "push"),
        ],
    )
    def test_grading(self, pick, line, final_wins, expected):
        assert calculate_pick_result(pick, line, final_wins) == expected
