from __future__ import annotations

from dataclasses import dataclass

from nfl_lookup.core.enums import StatCategoryEnum
from nfl_lookup.service.types import PassingStats, PlayerStats, ReceivingStats, RushingStats

# Depth-chart suffixes the provider sometimes appends to a position.
POSITION_GROUPS: dict[str, frozenset[str]] = {
    "QB": frozenset({"QB", "QB1"}),
    "RB": frozenset({"RB", "RB1", "RB2"}),
    "WR": frozenset({"WR", "WR1", "WR2"}),
    "TE": frozenset({"TE", "TE1"}),
}


def position_group(first: str, second: str) -> str | None:
    """Shared position type of two players, or None if they play different spots."""

    a = first.strip().upper()
    b = second.strip().upper()
    if a == b:
        return a or None
    for group, members in POSITION_GROUPS.items():
        if a in members and b in members:
            return group
    return None


@dataclass(frozen=True)
class StatLine:
    """One compared number. `ranked` lines name a leader; the rest are context."""

    label: str
    first: float
    second: float
    ranked: bool = True

    @property
    def leader(self) -> int | None:
        """1 or 2 for the player with the higher value, None on a tie or unranked line."""
        if not self.ranked or self.first == self.second:
            return None
        return 1 if self.first > self.second else 2


@dataclass(frozen=True)
class CategoryComparison:
    category: StatCategoryEnum
    lines: tuple[StatLine, ...]


@dataclass(frozen=True)
class PlayerComparison:
    title: str
    first: PlayerStats
    second: PlayerStats
    position_group: str | None
    categories: tuple[CategoryComparison, ...]

    def category(self, category: StatCategoryEnum) -> CategoryComparison | None:
        for c in self.categories:
            if c.category is category:
                return c
        return None


def _rate(value: float | None) -> float:
    # A rate with no attempts compares as zero.
    return 0.0 if value is None else value


def _passing_lines(a: PassingStats, b: PassingStats) -> tuple[StatLine, ...]:
    return (
        StatLine("Yards", a.yards, b.yards),
        StatLine("TDs", a.touchdowns, b.touchdowns),
        StatLine("Comp%", _rate(a.completion_percent), _rate(b.completion_percent)),
        StatLine("INTs", a.interceptions, b.interceptions, ranked=False),
    )


def _rushing_lines(a: RushingStats, b: RushingStats) -> tuple[StatLine, ...]:
    return (
        StatLine("Yards", a.yards, b.yards),
        StatLine("TDs", a.touchdowns, b.touchdowns),
        StatLine("Attempts", a.attempts, b.attempts, ranked=False),
        StatLine("YPC", _rate(a.yards_per_carry), _rate(b.yards_per_carry)),
    )


def _receiving_lines(a: ReceivingStats, b: ReceivingStats) -> tuple[StatLine, ...]:
    return (
        StatLine("Yards", a.yards, b.yards),
        StatLine("TDs", a.touchdowns, b.touchdowns),
        StatLine("Receptions", a.receptions, b.receptions),
        StatLine("YPR", _rate(a.yards_per_reception), _rate(b.yards_per_reception)),
    )


def compare_stats(first: PlayerStats, second: PlayerStats, *, title: str) -> PlayerComparison:
    """
    Side-by-side comparison of two players' stats.

    Categories included:
      - passing: both are QBs and both threw
      - rushing: both are RBs, or both ran
      - receiving: both are WRs or TEs, or both caught passes
    A category included by position alone compares missing stats as zeros.
    """
    group = position_group(first.position, second.position)
    categories: list[CategoryComparison] = []

    if group == "QB" and first.passing is not None and second.passing is not None:
        categories.append(
            CategoryComparison(
                StatCategoryEnum.PASSING, _passing_lines(first.passing, second.passing)
            )
        )

    if group == "RB" or (first.rushing is not None and second.rushing is not None):
        categories.append(
            CategoryComparison(
                StatCategoryEnum.RUSHING,
                _rushing_lines(first.rushing or RushingStats(), second.rushing or RushingStats()),
            )
        )

    if group in ("WR", "TE") or (first.receiving is not None and second.receiving is not None):
        categories.append(
            CategoryComparison(
                StatCategoryEnum.RECEIVING,
                _receiving_lines(
                    first.receiving or ReceivingStats(), second.receiving or ReceivingStats()
                ),
            )
        )

    return PlayerComparison(
        title=title,
        first=first,
        second=second,
        position_group=group,
        categories=tuple(categories),
    )
