from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from nfl_lookup.providers.base.errors import ProviderParseError

ApiItem = dict[str, Any]

# SportsData.io publishes kickoff times as naive US/Eastern timestamps.
ET = ZoneInfo("America/New_York")

BYE = "BYE"


def _int(value: Any) -> int:
    """Provider numbers arrive as floats (or null); stats are whole numbers."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ProviderParseError(f"Expected a number, got {type(value).__name__}")
    try:
        return int(float(value))
    except (OverflowError, ValueError) as e:
        raise ProviderParseError(f"Expected a number, got {value!r}") from e


def _opt_int(value: Any) -> int | None:
    if value is None:
        return None
    return _int(value)


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_sportsdata_datetime(value: Any) -> datetime | None:
    """
    Best-effort parser for SportsData.io timestamps.

    Supports:
      - naive ISO string "2025-09-07T13:00:00" (interpreted as US/Eastern)
      - "Z" suffixed or offset-aware ISO strings
    Returns None for empty or unparseable input (BYE rows have no kickoff).
    """
    if not isinstance(value, str) or not value.strip():
        return None

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(v)
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ET)
    return dt.astimezone(UTC)


@dataclass(frozen=True)
class PlayerGameStat:
    player_id: int
    name: str
    team: str
    position: str
    season: int
    week: int
    passing_yards: int = 0
    passing_touchdowns: int = 0
    passing_interceptions: int = 0
    passing_completions: int = 0
    passing_attempts: int = 0
    rushing_yards: int = 0
    rushing_touchdowns: int = 0
    rushing_attempts: int = 0
    receiving_yards: int = 0
    receiving_touchdowns: int = 0
    receptions: int = 0
    targets: int = 0


@dataclass(frozen=True)
class TeamRecord:
    key: str
    team_id: int
    city: str
    name: str
    full_name: str
    conference: str
    division: str
    head_coach: str
    stadium: str


@dataclass(frozen=True)
class GameRecord:
    game_key: str
    season: int
    week: int
    away_team: str
    home_team: str
    away_score: int | None
    home_score: int | None
    quarter: str
    time_remaining: str
    status: str
    kickoff: datetime | None
    stadium: str

    @property
    def is_bye(self) -> bool:
        return self.home_team.upper() == BYE or self.away_team.upper() == BYE


def parse_player_game_stat(item: ApiItem) -> PlayerGameStat:
    interceptions = item.get("PassingInterceptions")
    if interceptions is None:
        interceptions = item.get("Interceptions")

    return PlayerGameStat(
        player_id=_int(item.get("PlayerID")),
        name=_str(item.get("Name")),
        team=_str(item.get("Team")),
        position=_str(item.get("Position")),
        season=_int(item.get("Season")),
        week=_int(item.get("Week")),
        passing_yards=_int(item.get("PassingYards")),
        passing_touchdowns=_int(item.get("PassingTouchdowns")),
        passing_interceptions=_int(interceptions),
        passing_completions=_int(item.get("PassingCompletions")),
        passing_attempts=_int(item.get("PassingAttempts")),
        rushing_yards=_int(item.get("RushingYards")),
        rushing_touchdowns=_int(item.get("RushingTouchdowns")),
        rushing_attempts=_int(item.get("RushingAttempts")),
        receiving_yards=_int(item.get("ReceivingYards")),
        receiving_touchdowns=_int(item.get("ReceivingTouchdowns")),
        receptions=_int(item.get("Receptions")),
        targets=_int(item.get("ReceivingTargets", item.get("Targets"))),
    )


def parse_team(item: ApiItem) -> TeamRecord:
    return TeamRecord(
        key=_str(item.get("Key")),
        team_id=_int(item.get("TeamID")),
        city=_str(item.get("City")),
        name=_str(item.get("Name")),
        full_name=_str(item.get("FullName")),
        conference=_str(item.get("Conference")),
        division=_str(item.get("Division")),
        head_coach=_str(item.get("HeadCoach")),
        stadium=_str(item.get("StadiumName")),
    )


def parse_game(item: ApiItem) -> GameRecord:
    stadium = item.get("Stadium")
    if not isinstance(stadium, str):
        details = item.get("StadiumDetails")
        stadium = details.get("Name") if isinstance(details, dict) else None

    return GameRecord(
        game_key=_str(item.get("GameKey")),
        season=_int(item.get("Season")),
        week=_int(item.get("Week")),
        away_team=_str(item.get("AwayTeam")),
        home_team=_str(item.get("HomeTeam")),
        away_score=_opt_int(item.get("AwayScore")),
        home_score=_opt_int(item.get("HomeScore")),
        quarter=_str(item.get("Quarter")),
        time_remaining=_str(item.get("TimeRemaining")),
        status=_str(item.get("Status")),
        kickoff=parse_sportsdata_datetime(item.get("DateTime")),
        stadium=_str(stadium),
    )
