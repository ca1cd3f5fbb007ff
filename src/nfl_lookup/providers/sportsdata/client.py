from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from nfl_lookup.core.config import Settings
from nfl_lookup.providers.base.client import BaseHttpClient
from nfl_lookup.providers.base.errors import ProviderParseError
from nfl_lookup.providers.sportsdata.parser import (
    ApiItem,
    GameRecord,
    PlayerGameStat,
    TeamRecord,
    parse_game,
    parse_player_game_stat,
    parse_team,
)

RecordT = TypeVar("RecordT")


@dataclass
class SportsDataClient:
    """SportsData.io NFL v3 endpoints used by the lookup service.

    ``season`` arguments are provider season labels such as ``2025REG``.
    """

    http: BaseHttpClient
    api_key: str

    @classmethod
    def from_settings(cls, cfg: Settings, **http_kwargs: Any) -> SportsDataClient:
        api_key = cfg.require_nfl_api_key()
        http = BaseHttpClient(
            base_url=cfg.nfl_api_base_url,
            timeout_s=cfg.http_timeout_s,
            connect_timeout_s=cfg.http_connect_timeout_s,
            **http_kwargs,
        )
        return cls(http=http, api_key=api_key)

    def close(self) -> None:
        self.http.close()

    def get_items(self, path: str) -> list[ApiItem]:
        value = self.http.get_json(path, params={"key": self.api_key})
        if not isinstance(value, list):
            raise ProviderParseError(f"Expected JSON list from {path}, got {type(value).__name__}")
        for index, item in enumerate(value):
            if not isinstance(item, dict):
                raise ProviderParseError(
                    f"Expected JSON object at {path}[{index}], got {type(item).__name__}"
                )
        return value

    def _get_records(self, path: str, parse: Callable[[ApiItem], RecordT]) -> list[RecordT]:
        return [parse(i) for i in self.get_items(path)]

    def get_player_game_stats_by_week(self, season: str, week: int) -> list[PlayerGameStat]:
        return self._get_records(
            f"/stats/json/PlayerGameStatsByWeek/{season}/{week}", parse_player_game_stat
        )

    def get_teams(self) -> list[TeamRecord]:
        return self._get_records("/scores/json/Teams", parse_team)

    def get_schedules(self, season: str) -> list[GameRecord]:
        return self._get_records(f"/scores/json/Schedules/{season}", parse_game)

    def get_scores_by_week(self, season: str, week: int) -> list[GameRecord]:
        return self._get_records(f"/scores/json/ScoresByWeek/{season}/{week}", parse_game)
