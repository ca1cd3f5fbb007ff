from __future__ import annotations

from datetime import UTC, datetime

import httpx
import pytest

from nfl_lookup.providers.base.client import BaseHttpClient
from nfl_lookup.providers.base.errors import (
    ProviderParseError,
    ProviderRateLimited,
    ProviderRequestError,
    UpstreamError,
    UpstreamReason,
)
from nfl_lookup.providers.sportsdata.client import SportsDataClient


def _client(handler) -> SportsDataClient:
    transport = httpx.MockTransport(handler)
    http = BaseHttpClient(base_url="https://api.sportsdata.io/v3/nfl", transport=transport)
    return SportsDataClient(http=http, api_key="test-key")


def test_player_stats_request_and_parse() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v3/nfl/stats/json/PlayerGameStatsByWeek/2025REG/6"
        assert request.url.params["key"] == "test-key"
        return httpx.Response(
            200,
            json=[
                {
                    "PlayerID": 19801.0,
                    "Name": "Josh Allen",
                    "Team": "BUF",
                    "Position": "QB",
                    "Season": 2025.0,
                    "Week": 6.0,
                    "PassingYards": 300.0,
                    "PassingTouchdowns": 3.0,
                    "PassingInterceptions": 1.0,
                    "PassingCompletions": 24.0,
                    "PassingAttempts": 32.0,
                    "RushingYards": 41.0,
                    "ReceivingTargets": None,
                },
            ],
        )

    stats = _client(handler).get_player_game_stats_by_week("2025REG", 6)

    assert len(stats) == 1
    josh = stats[0]
    assert josh.name == "Josh Allen"
    assert josh.player_id == 19801
    assert josh.passing_yards == 300
    assert josh.passing_interceptions == 1
    assert josh.rushing_yards == 41
    assert josh.targets == 0


def test_schedule_parse_handles_bye_rows() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/scores/json/Schedules/2025REG")
        return httpx.Response(
            200,
            json=[
                {
                    "GameKey": "202510601",
                    "Season": 2025,
                    "Week": 6,
                    "AwayTeam": "BUF",
                    "HomeTeam": "ATL",
                    "AwayScore": None,
                    "HomeScore": None,
                    "Status": "Scheduled",
                    "DateTime": "2025-10-13T19:15:00",
                    "StadiumDetails": {"Name": "Mercedes-Benz Stadium"},
                },
                {
                    "GameKey": "202510799",
                    "Season": 2025,
                    "Week": 7,
                    "AwayTeam": "BUF",
                    "HomeTeam": "BYE",
                    "DateTime": None,
                    "Status": "Scheduled",
                },
            ],
        )

    games = _client(handler).get_schedules("2025REG")

    assert games[0].kickoff == datetime(2025, 10, 13, 23, 15, tzinfo=UTC)
    assert games[0].stadium == "Mercedes-Benz Stadium"
    assert games[0].home_score is None
    assert not games[0].is_bye
    assert games[1].is_bye
    assert games[1].kickoff is None


@pytest.mark.parametrize(
    ("status", "reason"),
    [
        (401, UpstreamReason.INVALID_CREDENTIALS),
        (403, UpstreamReason.FORBIDDEN),
        (404, UpstreamReason.NOT_AVAILABLE),
        (500, UpstreamReason.SERVER_ERROR),
        (503, UpstreamReason.UNAVAILABLE),
        (418, UpstreamReason.UNKNOWN),
    ],
)
def test_non_success_status_is_categorized(status: int, reason: UpstreamReason) -> None:
    client = _client(lambda request: httpx.Response(status, text="nope"))

    with pytest.raises(UpstreamError) as exc_info:
        client.get_teams()

    assert exc_info.value.status_code == status
    assert exc_info.value.reason is reason
    assert reason.message in str(exc_info.value)
    assert "test-key" not in str(exc_info.value)


def test_rate_limit_has_its_own_type() -> None:
    client = _client(lambda request: httpx.Response(429))

    with pytest.raises(ProviderRateLimited) as exc_info:
        client.get_teams()

    assert exc_info.value.reason is UpstreamReason.RATE_LIMITED


def test_malformed_body_is_a_parse_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ProviderParseError):
        client.get_teams()

    client = _client(lambda request: httpx.Response(200, json={"Message": "not a list"}))
    with pytest.raises(ProviderParseError):
        client.get_teams()


def test_transport_failure_is_a_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(ProviderRequestError):
        _client(handler).get_scores_by_week("2025REG", 6)


@pytest.mark.parametrize(
    "body",
    [
        ["garbage", 42, None],
        [{"Name": "Josh Allen", "PassingYards": 300}, "not-a-dict"],
    ],
)
def test_non_object_rows_fail_the_whole_body(body: list) -> None:
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(ProviderParseError):
        client.get_player_game_stats_by_week("2025REG", 6)


@pytest.mark.parametrize("yards", ["lots", {"value": 3}, [1], True])
def test_non_numeric_stat_is_a_parse_error(yards: object) -> None:
    body = [{"Name": "Josh Allen", "Season": 2025, "Week": 6, "PassingYards": yards}]
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(ProviderParseError):
        client.get_player_game_stats_by_week("2025REG", 6)


def test_numeric_strings_and_nulls_still_parse() -> None:
    body = [{"Name": "Josh Allen", "Season": "2025", "Week": 6.0, "PassingYards": "287.0"}]
    client = _client(lambda request: httpx.Response(200, json=body))

    (josh,) = client.get_player_game_stats_by_week("2025REG", 6)

    assert josh.season == 2025
    assert josh.passing_yards == 287
    assert josh.rushing_yards == 0
