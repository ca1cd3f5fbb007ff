from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from nfl_lookup.core.enums import SeasonTypeEnum

REGULAR_SEASON_WEEKS = 18
POSTSEASON_WEEKS = 4

# Typical Thursday night kickoff, 20:00 UTC. Only the day matters.
KICKOFF_HOUR_UTC = 20

_WEDNESDAY = 2


@dataclass(frozen=True)
class SeasonInfo:
    season_year: int
    season_type: SeasonTypeEnum
    week: int

    @property
    def label(self) -> str:
        """Provider season label, e.g. ``2025REG``."""
        return f"{self.season_year}{self.season_type.value}"


def nfl_season_start(season_year: int) -> datetime:
    """First Thursday of September at the typical kickoff hour (UTC)."""

    day = datetime(season_year, 9, 1, KICKOFF_HOUR_UTC, tzinfo=UTC)
    while day.weekday() != 3:  # Thursday
        day += timedelta(days=1)
    return day


def current_season_info(now: datetime) -> SeasonInfo:
    """Return the season/week slice a request made at `now` should target.

    The league year starts in September; January and February belong to the
    previous season. Weeks roll every 7 days from the opening Thursday, but on
    Wednesdays the previous week is kept so completed games stay visible.
    Past the playoffs this settles on the season's final regular week.
    """

    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    now = now.astimezone(UTC)

    season_year = now.year
    if now.month < 3:
        season_year -= 1

    season_start = nfl_season_start(season_year)
    if now < season_start:
        return SeasonInfo(season_year - 1, SeasonTypeEnum.REG, REGULAR_SEASON_WEEKS)

    days_since_start = (now - season_start).days
    current_week = days_since_start // 7 + 1

    if now.weekday() == _WEDNESDAY and current_week > 1:
        current_week -= 1

    if current_week <= REGULAR_SEASON_WEEKS:
        return SeasonInfo(season_year, SeasonTypeEnum.REG, current_week)
    if current_week <= REGULAR_SEASON_WEEKS + POSTSEASON_WEEKS:
        return SeasonInfo(season_year, SeasonTypeEnum.POST, current_week - REGULAR_SEASON_WEEKS)
    return SeasonInfo(season_year, SeasonTypeEnum.REG, REGULAR_SEASON_WEEKS)


def last_completed_season(now: datetime) -> int:
    """Most recent season whose playoffs are over at `now`."""

    info = current_season_info(now)
    season_end = nfl_season_start(info.season_year) + timedelta(
        weeks=REGULAR_SEASON_WEEKS + POSTSEASON_WEEKS
    )
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    if now >= season_end:
        return info.season_year
    return info.season_year - 1
