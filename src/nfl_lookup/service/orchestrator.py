from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

from nfl_lookup.cache.temporal import TemporalCache
from nfl_lookup.core.config import Settings, settings
from nfl_lookup.core.enums import CompareModeEnum, SeasonTypeEnum
from nfl_lookup.core.errors import InvalidInputError, NotFoundError
from nfl_lookup.core.text import normalize_name
from nfl_lookup.football.season_clock import (
    REGULAR_SEASON_WEEKS,
    SeasonInfo,
    current_season_info,
    last_completed_season,
)
from nfl_lookup.matching.resolver import resolve_best_match
from nfl_lookup.matching.teams import find_team, game_involves_team, team_name_variations
from nfl_lookup.providers.base.errors import ProviderError
from nfl_lookup.providers.sportsdata.client import SportsDataClient
from nfl_lookup.providers.sportsdata.parser import PlayerGameStat
from nfl_lookup.service.aggregation import SeasonAccumulator
from nfl_lookup.service.comparison import PlayerComparison, compare_stats
from nfl_lookup.service.types import LiveScore, PlayerStats, Schedule, ScheduledGame, TeamInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Weeks fetched to approximate season totals; bounds upstream calls per request.
SEASON_SAMPLE_WEEKS: tuple[int, ...] = (1, 2, 5, 10, 15, 18)

TEAMS_CACHE_KEY = "teams"

PLAYER_NOT_FOUND_HINT = "Try a different spelling, or check whether they played that week."
TEAM_NOT_FOUND_HINT = "Try the team's nickname, city or abbreviation (e.g. bills, buffalo, BUF)."


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _player_name(stat: PlayerGameStat) -> str:
    return stat.name


def _require_name(value: str, what: str) -> str:
    name = value.strip()
    if not name:
        raise InvalidInputError(f"{what} name cannot be empty")
    return name


class NflDataService:
    """Answers player/team/schedule/score questions against SportsData.io.

    The only component that talks to the provider. Every response goes through
    the injected `TemporalCache`; the current season/week is recomputed from the
    clock at most once per `season_info_ttl_s`.

    Safe to share between threads: the cache and the season memo are locked,
    everything else is per-call.
    """

    def __init__(
        self,
        client: SportsDataClient,
        cache: TemporalCache[Any],
        *,
        now: Callable[[], datetime] = _utcnow,
        season_info_ttl_s: float = 3600.0,
        min_season: int = 2020,
        max_season: int | None = None,
        sample_weeks: Sequence[int] = SEASON_SAMPLE_WEEKS,
    ) -> None:
        self.client = client
        self.cache = cache
        self.min_season = min_season
        self.max_season = max_season
        self.sample_weeks = tuple(sample_weeks)

        self._now = now
        self._season_info_ttl = timedelta(seconds=season_info_ttl_s)
        self._season_lock = threading.Lock()
        self._season_info: SeasonInfo | None = None
        self._season_checked_at: datetime | None = None

    @classmethod
    def from_settings(cls, cfg: Settings = settings, **kwargs: Any) -> NflDataService:
        """Build a service with its own cache and a running background sweeper."""

        client = SportsDataClient.from_settings(cfg)
        cache: TemporalCache[Any] = TemporalCache(ttl_s=cfg.cache_ttl_s)
        cache.start_sweeper(cfg.cache_sweep_interval_s)
        return cls(
            client,
            cache,
            season_info_ttl_s=cfg.season_info_ttl_s,
            min_season=cfg.min_season,
            max_season=cfg.max_season,
            **kwargs,
        )

    def close(self) -> None:
        self.cache.close()
        self.client.close()

    def __enter__(self) -> NflDataService:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------
    # Season clock
    # -----------------------------

    def current_season(self) -> SeasonInfo:
        now = self._now()
        with self._season_lock:
            if (
                self._season_info is not None
                and self._season_checked_at is not None
                and now - self._season_checked_at < self._season_info_ttl
            ):
                return self._season_info

            info = current_season_info(now)
            logger.info(
                "Season calculated: %s week %d (%s)", info.label, info.week, now.strftime("%A")
            )
            self._season_info = info
            self._season_checked_at = now
            return info

    def _validate_season(self, season: int) -> None:
        max_season = self.max_season
        if max_season is None:
            max_season = self.current_season().season_year
        if not self.min_season <= season <= max_season:
            raise InvalidInputError(
                f"invalid season: {season} (must be {self.min_season}-{max_season})"
            )

    # -----------------------------
    # Cache helpers
    # -----------------------------

    def _cached(self, key: str, fetch: Callable[[], T]) -> T:
        value = self.cache.get(key)
        if value is not None:
            logger.debug("Cache hit for %s", key)
            return value
        value = fetch()
        self.cache.put(key, value)
        return value

    # -----------------------------
    # Players
    # -----------------------------

    def _week_player_stats(self, name: str, season: str, week: int) -> PlayerStats:
        key = f"player_stats:{normalize_name(name)}:{season}:{week}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        batch = self.client.get_player_game_stats_by_week(season, week)
        logger.debug(
            "Searching %d player records for %r (%s week %d)", len(batch), name, season, week
        )

        match = resolve_best_match(batch, name, name_of=_player_name)
        if match is None:
            raise NotFoundError(
                f"Player '{name}' not found in {season} week {week} stats.",
                hint=PLAYER_NOT_FOUND_HINT,
            )

        logger.info("Matched %r to %r (score %d)", name, match.record.name, match.score)
        stats = PlayerStats.from_record(match.record)
        self.cache.put(key, stats)
        return stats

    def get_player_stats(self, name: str) -> PlayerStats:
        """Stats for the week the season clock currently points at."""

        name = _require_name(name, "player")
        info = self.current_season()
        return self._week_player_stats(name, info.label, info.week)

    def get_player_week_stats(self, name: str, season: int, week: int) -> PlayerStats:
        """Regular-season stats for an explicit season and week."""

        name = _require_name(name, "player")
        if not 1 <= week <= REGULAR_SEASON_WEEKS:
            raise InvalidInputError(
                f"invalid week number: {week} (must be 1-{REGULAR_SEASON_WEEKS})"
            )
        self._validate_season(season)
        return self._week_player_stats(name, f"{season}{SeasonTypeEnum.REG.value}", week)

    def get_player_season_stats(self, name: str, season: int | None = None) -> PlayerStats:
        """Approximate regular-season totals built from `sample_weeks`.

        Defaults to the last completed season. The result is a sample, and its
        `sample_note` says so; it is not an authoritative season total.
        """

        name = _require_name(name, "player")
        if season is None:
            season = last_completed_season(self._now())
        else:
            self._validate_season(season)

        label = f"{season}{SeasonTypeEnum.REG.value}"
        key = f"player_season_stats:{normalize_name(name)}:{label}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.info("Aggregating %s stats for %r over weeks %s", label, name, self.sample_weeks)

        acc = SeasonAccumulator(season=season)
        failed_weeks = 0
        last_error: ProviderError | None = None
        for week in self.sample_weeks:
            try:
                batch = self.client.get_player_game_stats_by_week(label, week)
            except ProviderError as e:
                logger.warning("Skipping %s week %d: %s", label, week, e)
                failed_weeks += 1
                last_error = e
                continue

            match = resolve_best_match(batch, name, name_of=_player_name)
            if match is None:
                continue
            logger.debug("Week %d match %r (score %d)", week, match.record.name, match.score)
            acc.add_week(match.record)

        if acc.games_counted == 0:
            if last_error is not None and failed_weeks == len(self.sample_weeks):
                raise last_error
            raise NotFoundError(
                f"Player '{name}' not found in {season} season data.",
                hint=PLAYER_NOT_FOUND_HINT,
            )

        stats = acc.to_player_stats(weeks_sampled=len(self.sample_weeks))
        logger.info("Aggregated %r: %d games sampled", stats.name, stats.games_counted)
        self.cache.put(key, stats)
        return stats

    def compare_players(
        self,
        first: str,
        second: str,
        mode: CompareModeEnum = CompareModeEnum.CURRENT,
        *,
        season: int | None = None,
        week: int | None = None,
    ) -> PlayerComparison:
        """Compare two players over the same slice: current week, one week, or a season sample.

        `week` is required for WEEK mode and rejected otherwise. `season` defaults to the
        clock's season (WEEK) or the last completed season (SEASON).
        """

        first = _require_name(first, "player")
        second = _require_name(second, "player")
        if mode is not CompareModeEnum.WEEK and week is not None:
            raise InvalidInputError(f"week only applies to {CompareModeEnum.WEEK} comparisons")

        if mode is CompareModeEnum.WEEK:
            if week is None:
                raise InvalidInputError("week comparisons need a week number")
            if season is None:
                season = self.current_season().season_year
            stats1 = self.get_player_week_stats(first, season, week)
            stats2 = self.get_player_week_stats(second, season, week)
            title = f"Week {week}, {season} Comparison"
        elif mode is CompareModeEnum.SEASON:
            if season is None:
                season = last_completed_season(self._now())
            stats1 = self.get_player_season_stats(first, season)
            stats2 = self.get_player_season_stats(second, season)
            title = f"Season Comparison ({season} Sample)"
        else:
            if season is not None:
                raise InvalidInputError("season does not apply to current-week comparisons")
            stats1 = self.get_player_stats(first)
            stats2 = self.get_player_stats(second)
            title = "Player Comparison"

        logger.info("Comparing %r and %r (%s)", stats1.name, stats2.name, mode)
        return compare_stats(stats1, stats2, title=title)

    # -----------------------------
    # Teams / games
    # -----------------------------

    def get_team_info(self, name: str) -> TeamInfo:
        name = _require_name(name, "team")
        teams = self._cached(TEAMS_CACHE_KEY, self.client.get_teams)

        team = find_team(teams, name)
        if team is None:
            raise NotFoundError(f"Team '{name}' not found.", hint=TEAM_NOT_FOUND_HINT)
        return TeamInfo.from_record(team)

    def get_team_schedule(self, name: str) -> Schedule:
        name = _require_name(name, "team")
        info = self.current_season()
        games = self._cached(
            f"schedules:{info.label}", lambda: self.client.get_schedules(info.label)
        )

        variations = team_name_variations(name)
        logger.debug("Filtering %d games for %r using %s", len(games), name, variations)
        team_games = tuple(
            ScheduledGame.from_record(g, info.season_type)
            for g in games
            if game_involves_team(g, variations)
        )
        if not team_games:
            raise NotFoundError(
                f"No games found for team '{name}' in {info.label}.", hint=TEAM_NOT_FOUND_HINT
            )

        return Schedule(
            team_name=name,
            season=info.season_year,
            season_type=info.season_type,
            games=team_games,
        )

    def get_live_scores(self) -> list[LiveScore]:
        info = self.current_season()
        return self._cached(
            f"live_scores:{info.label}:{info.week}",
            lambda: [
                LiveScore.from_record(g)
                for g in self.client.get_scores_by_week(info.label, info.week)
            ],
        )
