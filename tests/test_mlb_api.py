"""Tests for MLB Stats API response parsing."""

from datetime import date, datetime, timezone

import httpx
import pytest

from spreadsontoast.services.mlb.mlb_api import MLBAPIError, MLBStatsAPIClient

STANDINGS_RESPONSE = {
    "records": [
        {
            "league": {"id": 103},
            "division": {"id": 201},
            "teamRecords": [
                {
                    "team": {"id": 147, "name": "New York Yankees"},
                    "wins": 35,
                    "losses": 22,
                    "gamesPlayed": 57,
                    "runsScored": 301,
                    "runsAllowed": 220,
                    "runDifferential": 81,
                    "divisionRank": "1",
                    "leagueRank": "2",
                    "sportRank": "3",
                    "wildCardRank": "-",
                    "gamesBack": "-",
                    "divisionGamesBack": "-",
                    "leagueGamesBack": "1.0",
                    "sportGamesBack": "2.0",
                    "wildCardGamesBack": "-",
                    "streak": {"streakCode": "W3", "streakNumber": 3, "streakType": "wins"},
                    "clinched": False,
                    "divisionLeader": True,
                    "eliminationNumber": "106",
                    "leagueRecord": {"wins": 35, "losses": 22, "pct": ".614"},
                    "records": {
                        "splitRecords": [
                            {"type": "home", "wins": 20, "losses": 9, "pct": ".690"},
                            {"type": "away", "wins": 15, "losses": 13, "pct": ".536"},
                            {"type": "oneRun", "wins": 8, "losses": 4, "pct": ".667"},
                            {"type": "notTracked", "wins": 1, "losses": 1, "pct": ".500"},
                        ],
                        "expectedRecords": [
                            {"type": "xWinLossSeason", "wins": 100, "losses": 62, "pct": ".617"},
                            {"type": "xWinLoss", "wins": 36, "losses": 21, "pct": ".632"},
                        ],
                    },
                },
                {
                    "team": {"id": 110, "name": "Baltimore Orioles"},
                    "wins": 20,
                    "losses": 37,
                    "gamesPlayed": 57,
                    "runsScored": 210,
                    "runsAllowed": 290,
                    "runDifferential": -80,
                    "divisionRank": "5",
                    "eliminationNumber": "0",
                },
            ],
        }
    ]
}

SCHEDULE_RESPONSE = {
    "dates": [
        {
            "date": "2025-06-01",
            "games": [
                {
                    "gamePk": 777001,
                    "season": "2025",
                    "officialDate": "2025-06-01",
                    "gameDate": "2025-06-01T17:35:00Z",
                    "gameType": "R",
                    "status": {"abstractGameState": "Final", "detailedState": "Final", "statusCode": "F"},
                    "teams": {
                        "home": {
                            "team": {"id": 147, "name": "New York Yankees"},
                            "score": 5,
                            "isWinner": True,
                            "leagueRecord": {"wins": 35, "losses": 22, "pct": ".614"},
                        },
                        "away": {
                            "team": {"id": 111, "name": "Boston Red Sox"},
                            "score": 3,
                            "isWinner": False,
                            "leagueRecord": {"wins": 28, "losses": 30, "pct": ".483"},
                        },
                    },
                    "linescore": {
                        "teams": {
                            "home": {"runs": 5, "hits": 9, "errors": 0},
                            "away": {"runs": 3, "hits": 7, "errors": 2},
                        }
                    },
                    "venue": {"id": 3313, "name": "Yankee Stadium"},
                    "dayNight": "day",
                    "doubleHeader": "N",
                    "gameNumber": 1,
                    "seriesDescription": "Regular Season",
                    "seriesGameNumber": 3,
                    "gamesInSeries": 3,
                    "scheduledInnings": 9,
                    "publicFacing": True,
                    "tiebreaker": "N",
                    "ifNecessary": "N",
                },
                {
                    "gamePk": 777002,
                    "gameType": "F",
                    "status": {"abstractGameState": "Preview"},
                },
            ],
        }
    ]
}


@pytest.fixture
def api_client() -> MLBStatsAPIClient:
    return MLBStatsAPIClient(base_url="https://statsapi.test/api/v1", timeout=1.0)


class TestStandings:
    async def test_parses_team_records(self, api_client, monkeypatch):
        calls = []

        async def fake_get(path, params):
            calls.append((path, params))
            return STANDINGS_RESPONSE

        monkeypatch.setattr(api_client, "_get", fake_get)

        records = await api_client.get_standings("2025", "2025-06-01")

        assert calls == [
            ("/standings", {"leagueId": "103,104", "season": "2025", "date": "2025-06-01"})
        ]
        assert len(records) == 2

        yankees = records[0]
        assert yankees.external_id == 147
        assert yankees.division_id == 201
        assert yankees.league_id == 103
        assert (yankees.wins, yankees.losses, yankees.games_played) == (35, 22, 57)
        assert yankees.division_rank == 1
        assert yankees.wild_card_rank is None
        assert yankees.league_games_back == "1.0"
        assert yankees.streak_code == "W3"
        assert yankees.streak_count == 3
        assert yankees.division_leader is True
        assert yankees.eliminated is False
        assert set(yankees.splits) == {"home", "away", "oneRun"}
        assert yankees.splits["home"] == {"wins": 20, "losses": 9, "pct": ".690"}
        assert yankees.expected_record["type"] == "xWinLoss"
        assert yankees.expected_record["wins"] == 36
        assert yankees.league_record == {"wins": 35, "losses": 22, "pct": ".614"}

    async def test_elimination_number_zero_means_eliminated(self, api_client, monkeypatch):
        async def fake_get(path, params):
            return STANDINGS_RESPONSE

        monkeypatch.setattr(api_client, "_get", fake_get)

        orioles = (await api_client.get_standings("2025"))[1]

        assert orioles.eliminated is True
        assert orioles.splits is None
        assert orioles.expected_record is None
        assert orioles.league_record is None

    async def test_current_standings_omit_date(self, api_client, monkeypatch):
        calls = []

        async def fake_get(path, params):
            calls.append(params)
            return {"records": []}

        monkeypatch.setattr(api_client, "_get", fake_get)

        assert await api_client.get_standings("2025") == []
        assert "date" not in calls[0]


class TestSchedule:
    async def test_parses_games_and_reports_malformed(self, api_client, monkeypatch):
        calls = []

        async def fake_get(path, params):
            calls.append((path, params))
            return SCHEDULE_RESPONSE

        monkeypatch.setattr(api_client, "_get", fake_get)

        schedule = await api_client.get_team_schedule(147, "2025")
        games = schedule.games

        path, params = calls[0]
        assert path == "/schedule"
        assert params["teamId"] == 147
        assert params["gameType"] == "R,F,D,L,W"
        assert params["hydrate"] == "linescore"

        assert len(games) == 1
        game = games[0]
        assert game.game_pk == 777001
        assert game.official_date == date(2025, 6, 1)
        assert game.game_date == datetime(2025, 6, 1, 17, 35, tzinfo=timezone.utc)
        assert game.game_type == "RegularSeason"
        assert game.abstract_game_state == "Final"
        assert game.status_code == "F"
        assert (game.home.mlb_id, game.home.score, game.home.hits, game.home.errors) == (147, 5, 9, 0)
        assert (game.away.mlb_id, game.away.score, game.away.hits, game.away.errors) == (111, 3, 7, 2)
        assert game.away.win_pct == ".483"
        assert game.venue_name == "Yankee Stadium"
        assert game.series_game_number == 3
        assert game.tiebreaker is False

        assert schedule.failures == [(777002, "missing field 'officialDate'")]


class TestTransportErrors:
    async def test_http_status_error_is_wrapped(self, api_client, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda *args, **kwargs: real_client(*args, transport=transport, **kwargs),
        )

        with pytest.raises(MLBAPIError, match="503"):
            await api_client.get_standings("2025")


class TestSafeInt:
    @pytest.mark.parametrize("value,expected", [("3", 3), (4, 4), ("-", None), ("", None), (None, None), ("E", None)])
    def test_values(self, value, expected):
        assert MLBStatsAPIClient._safe_int(value) == expected
