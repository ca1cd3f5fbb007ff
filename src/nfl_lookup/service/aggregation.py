from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from nfl_lookup.core.enums import StatCategoryEnum
from nfl_lookup.football.season_clock import REGULAR_SEASON_WEEKS
from nfl_lookup.providers.sportsdata.parser import PlayerGameStat
from nfl_lookup.service.types import PassingStats, PlayerStats, ReceivingStats, RushingStats


@dataclass
class SeasonAccumulator:
    """Running totals for one player across the sampled weeks of a season.

    Every matched week bumps `games_counted`; a category's own counter only
    moves when the player recorded something in it that week.
    """

    season: int
    name: str | None = None
    team: str = ""
    position: str = ""
    passing: PassingStats = field(default_factory=PassingStats)
    rushing: RushingStats = field(default_factory=RushingStats)
    receiving: ReceivingStats = field(default_factory=ReceivingStats)
    games_counted: int = 0
    category_weeks: Counter[StatCategoryEnum] = field(default_factory=Counter)

    def add_week(self, stat: PlayerGameStat) -> None:
        if self.name is None:
            self.name = stat.name
            self.team = stat.team
            self.position = stat.position

        passing = PassingStats.from_record(stat)
        if not passing.is_empty():
            self.passing += passing
            self.category_weeks[StatCategoryEnum.PASSING] += 1

        rushing = RushingStats.from_record(stat)
        if not rushing.is_empty():
            self.rushing += rushing
            self.category_weeks[StatCategoryEnum.RUSHING] += 1

        receiving = ReceivingStats.from_record(stat)
        if not receiving.is_empty():
            self.receiving += receiving
            self.category_weeks[StatCategoryEnum.RECEIVING] += 1

        self.games_counted += 1

    def sample_note(self, weeks_sampled: int) -> str:
        if weeks_sampled >= REGULAR_SEASON_WEEKS:
            return f"Season total from {self.games_counted} of {REGULAR_SEASON_WEEKS} games"
        return (
            f"Sample from {self.games_counted} of {REGULAR_SEASON_WEEKS} games (not full season)"
        )

    def to_player_stats(self, *, weeks_sampled: int) -> PlayerStats:
        if self.name is None:
            raise ValueError("no weeks were accumulated")

        def has(category: StatCategoryEnum) -> bool:
            return self.category_weeks[category] > 0

        return PlayerStats(
            name=self.name,
            team=self.team,
            position=self.position,
            season=self.season,
            week=None,
            passing=self.passing if has(StatCategoryEnum.PASSING) else None,
            rushing=self.rushing if has(StatCategoryEnum.RUSHING) else None,
            receiving=self.receiving if has(StatCategoryEnum.RECEIVING) else None,
            games_counted=self.games_counted,
            sample_note=self.sample_note(weeks_sampled),
        )
