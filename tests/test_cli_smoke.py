from __future__ import annotations

from typing import Any

import pytest
from typer.testing import CliRunner

from nfl_lookup.cache import TemporalCache
from nfl_lookup.cli.app import app
from nfl_lookup.core.config import settings
from nfl_lookup.providers.sportsdata.parser import PlayerGameStat
from nfl_lookup.service.orchestrator import NflDataService


class EmptySportsDataClient:
    def get_player_game_stats_by_week(self, season: str, week: int) -> list[Any]:
        return []

    def close(self) -> None:
        pass


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    # Basic sanity checks that the sub-apps are registered.
    assert "players" in result.stdout
    assert "teams" in result.stdout
    assert "games" in result.stdout


def test_games_season_needs_no_api_key() -> None:
    result = CliRunner().invoke(app, ["games", "season"])
    assert result.exit_code == 0
    assert "week" in result.stdout


def test_lookup_failure_exits_with_hint(monkeypatch: pytest.MonkeyPatch) -> None:
    cache: TemporalCache[Any] = TemporalCache()
    service = NflDataService(EmptySportsDataClient(), cache)  # type: ignore[arg-type]
    monkeypatch.setattr(NflDataService, "from_settings", lambda cfg=None, **kwargs: service)

    result = CliRunner().invoke(app, ["players", "stats", "Nobody Atall"])

    assert result.exit_code == 1
    assert "not found" in result.output
    assert "spelling" in result.output


def test_invalid_week_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    cache: TemporalCache[Any] = TemporalCache()
    service = NflDataService(EmptySportsDataClient(), cache)  # type: ignore[arg-type]
    monkeypatch.setattr(NflDataService, "from_settings", lambda cfg=None, **kwargs: service)

    result = CliRunner().invoke(
        app, ["players", "week", "Josh Allen", "--season", "2024", "--week", "19"]
    )

    assert result.exit_code == 1
    assert "Invalid request" in result.output


def test_missing_api_key_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "nfl_api_key", None)

    result = CliRunner().invoke(app, ["teams", "info", "bills"])

    assert result.exit_code == 1
    assert "NFL_API_KEY" in result.output


class OneWeekSportsDataClient(EmptySportsDataClient):
    def get_player_game_stats_by_week(self, season: str, week: int) -> list[Any]:
        return [
            PlayerGameStat(0, "Josh Allen", "BUF", "QB", 2025, week, passing_yards=300),
            PlayerGameStat(0, "Joe Burrow", "CIN", "QB", 2025, week, passing_yards=250),
        ]


def test_players_compare_prints_side_by_side(monkeypatch: pytest.MonkeyPatch) -> None:
    cache: TemporalCache[Any] = TemporalCache()
    service = NflDataService(OneWeekSportsDataClient(), cache)  # type: ignore[arg-type]
    monkeypatch.setattr(NflDataService, "from_settings", lambda cfg=None, **kwargs: service)

    result = CliRunner().invoke(app, ["players", "compare", "Josh Allen", "Joe Burrow"])

    assert result.exit_code == 0
    assert "Player Comparison" in result.stdout
    assert "Yards: 300 | 250  (+[1])" in result.stdout
