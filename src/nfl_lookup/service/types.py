from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import TypeVar

from nfl_lookup.core.enums import SeasonTypeEnum, StatCategoryEnum
from nfl_lookup.providers.sportsdata.parser import GameRecord, PlayerGameStat, TeamRecord


class _Summable:
    """Field-wise addition for the per-category stat dataclasses."""

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) == 0 for f in fields(self))


@dataclass(frozen=True)
class PassingStats(_Summable):
    yards: int = 0
    touchdowns: int = 0
    interceptions: int = 0
    completions: int = 0
    attempts: int = 0

    @property
    def completion_percent(self) -> float | None:
        if self.attempts <= 0:
            return None
        return round(self.completions / self.attempts * 100, 1)

    @classmethod
    def from_record(cls, stat: PlayerGameStat) -> PassingStats:
        return cls(
            yards=stat.passing_yards,
            touchdowns=stat.passing_touchdowns,
            interceptions=stat.passing_interceptions,
            completions=stat.passing_completions,
            attempts=stat.passing_attempts,
        )


@dataclass(frozen=True)
class RushingStats(_Summable):
    yards: int = 0
    touchdowns: int = 0
    attempts: int = 0

    @property
    def yards_per_carry(self) -> float | None:
        if self.attempts <= 0:
            return None
        return round(self.yards / self.attempts, 1)

    @classmethod
    def from_record(cls, stat: PlayerGameStat) -> RushingStats:
        return cls(
            yards=stat.rushing_yards,
            touchdowns=stat.rushing_touchdowns,
            attempts=stat.rushing_attempts,
        )


@dataclass(frozen=True)
class ReceivingStats(_Summable):
    yards: int = 0
    touchdowns: int = 0
    receptions: int = 0
    targets: int = 0

    @property
    def yards_per_reception(self) -> float | None:
        if self.receptions <= 0:
            return None
        return round(self.yards / self.receptions, 1)

    @classmethod
    def from_record(cls, stat: PlayerGameStat) -> ReceivingStats:
        return cls(
            yards=stat.receiving_yards,
            touchdowns=stat.receiving_touchdowns,
            receptions=stat.receptions,
            targets=stat.targets,
        )


SummableT = TypeVar("SummableT", bound=_Summable)


def _present(stats: SummableT) -> SummableT | None:
    # The provider omits categories a player recorded nothing in; so do we.
    return None if stats.is_empty() else stats


@dataclass(frozen=True)
class PlayerStats:
    name: str
    team: str
    position: str
    season: int
    week: int | None = None
    passing: PassingStats | None = None
    rushing: RushingStats | None = None
    receiving: ReceivingStats | None = None
    games_counted: int = 1
    sample_note: str | None = None

    @property
    def categories(self) -> list[StatCategoryEnum]:
        present = []
        if self.passing is not None:
            present.append(StatCategoryEnum.PASSING)
        if self.rushing is not None:
            present.append(StatCategoryEnum.RUSHING)
        if self.receiving is not None:
            present.append(StatCategoryEnum.RECEIVING)
        return present

    @classmethod
    def from_record(cls, stat: PlayerGameStat) -> PlayerStats:
        return cls(
            name=stat.name,
            team=stat.team,
            position=stat.position,
            season=stat.season,
            week=stat.week,
            passing=_present(PassingStats.from_record(stat)),
            rushing=_present(RushingStats.from_record(stat)),
            receiving=_present(ReceivingStats.from_record(stat)),
        )


@dataclass(frozen=True)
class TeamInfo:
    key: str
    name: str
    city: str
    full_name: str
    conference: str
    division: str
    coach: str
    stadium: str

    @classmethod
    def from_record(cls, team: TeamRecord) -> TeamInfo:
        return cls(
            key=team.key,
            name=team.name,
            city=team.city,
            full_name=team.full_name,
            conference=team.conference,
            division=team.division,
            coach=team.head_coach,
            stadium=team.stadium,
        )


_COMPLETED_STATUSES = frozenset({"Final", "F", "F/OT", "Completed"})
_LIVE_STATUSES = frozenset({"InProgress", "InProgress_Live"})


@dataclass(frozen=True)
class ScheduledGame:
    game_key: str
    season: int
    week: int
    season_type: SeasonTypeEnum
    home_team: str
    away_team: str
    home_score: int | None
    away_score: int | None
    kickoff: datetime | None
    status: str
    stadium: str

    @property
    def is_bye(self) -> bool:
        return "BYE" in (self.home_team.upper(), self.away_team.upper())

    @property
    def is_completed(self) -> bool:
        return self.status in _COMPLETED_STATUSES

    def winner(self) -> str | None:
        """Winning team key, "TIE", or None while the game is not final."""
        if not self.is_completed or self.home_score is None or self.away_score is None:
            return None
        if self.home_score > self.away_score:
            return self.home_team
        if self.away_score > self.home_score:
            return self.away_team
        return "TIE"

    @classmethod
    def from_record(cls, game: GameRecord, season_type: SeasonTypeEnum) -> ScheduledGame:
        return cls(
            game_key=game.game_key,
            season=game.season,
            week=game.week,
            season_type=season_type,
            home_team=game.home_team,
            away_team=game.away_team,
            home_score=game.home_score,
            away_score=game.away_score,
            kickoff=game.kickoff,
            status=game.status,
            stadium=game.stadium,
        )


@dataclass(frozen=True)
class Schedule:
    team_name: str
    season: int
    season_type: SeasonTypeEnum
    games: tuple[ScheduledGame, ...]


@dataclass(frozen=True)
class LiveScore:
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

    @property
    def is_live(self) -> bool:
        return self.status in _LIVE_STATUSES

    @property
    def is_completed(self) -> bool:
        return self.status in _COMPLETED_STATUSES

    def score_line(self) -> str:
        away_score = self.away_score or 0
        home_score = self.home_score or 0
        if self.is_live:
            return (
                f"{self.away_team} {away_score} - {home_score} {self.home_team} "
                f"({self.quarter}, {self.time_remaining})"
            )
        if self.is_completed:
            return f"{self.away_team} {away_score} - {home_score} {self.home_team} (Final)"
        return f"{self.away_team} @ {self.home_team} (Scheduled)"

    @classmethod
    def from_record(cls, game: GameRecord) -> LiveScore:
        return cls(
            game_key=game.game_key,
            season=game.season,
            week=game.week,
            away_team=game.away_team,
            home_team=game.home_team,
            away_score=game.away_score,
            home_score=game.home_score,
            quarter=game.quarter,
            time_remaining=game.time_remaining,
            status=game.status,
            kickoff=game.kickoff,
        )
