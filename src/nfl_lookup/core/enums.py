from __future__ import annotations

from enum import StrEnum


class SeasonTypeEnum(StrEnum):
    """SportsData.io season type suffixes (e.g. ``2025REG``)."""

    PRE = "PRE"
    REG = "REG"
    POST = "POST"


class StatCategoryEnum(StrEnum):
    PASSING = "passing"
    RUSHING = "rushing"
    RECEIVING = "receiving"


class CompareModeEnum(StrEnum):
    """Which stat slice a player comparison reads."""

    CURRENT = "current"
    WEEK = "week"
    SEASON = "season"
