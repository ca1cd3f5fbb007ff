from __future__ import annotations

from collections.abc import Iterable, Sequence

from nfl_lookup.providers.sportsdata.parser import BYE, GameRecord, TeamRecord

# Nickname/city -> provider abbreviation and alternate spellings.
TEAM_ALIASES: dict[str, tuple[str, ...]] = {
    "bills": ("buf", "buffalo"),
    "buffalo": ("buf", "bills"),
    "dolphins": ("mia", "miami"),
    "miami": ("mia", "dolphins"),
    "patriots": ("ne", "new england"),
    "jets": ("nyj", "new york jets"),
    "ravens": ("bal", "baltimore"),
    "bengals": ("cin", "cincinnati"),
    "browns": ("cle", "cleveland"),
    "steelers": ("pit", "pittsburgh"),
    "texans": ("hou", "houston"),
    "colts": ("ind", "indianapolis"),
    "jaguars": ("jax", "jacksonville"),
    "titans": ("ten", "tennessee"),
    "broncos": ("den", "denver"),
    "chiefs": ("kc", "kansas city"),
    "raiders": ("lv", "las vegas"),
    "chargers": ("lac", "los angeles chargers"),
    "cowboys": ("dal", "dallas"),
    "giants": ("nyg", "new york giants"),
    "eagles": ("phi", "philadelphia"),
    "commanders": ("was", "washington"),
    "bears": ("chi", "chicago"),
    "lions": ("det", "detroit"),
    "packers": ("gb", "green bay"),
    "vikings": ("min", "minnesota"),
    "falcons": ("atl", "atlanta"),
    "panthers": ("car", "carolina"),
    "saints": ("no", "new orleans"),
    "buccaneers": ("tb", "tampa bay"),
    "cardinals": ("ari", "arizona"),
    "rams": ("lar", "los angeles rams"),
    "seahawks": ("sea", "seattle"),
    "49ers": ("sf", "san francisco"),
}


def team_name_variations(query: str) -> list[str]:
    """The lower-cased query followed by its known aliases."""

    name = query.strip().lower()
    return [name, *TEAM_ALIASES.get(name, ())]


def find_team(teams: Iterable[TeamRecord], query: str) -> TeamRecord | None:
    """First team whose name, city, full name or key contains the query."""

    needle = query.strip().lower()
    if not needle:
        return None

    for team in teams:
        fields = (team.name, team.city, team.full_name, team.key)
        if any(needle in f.lower() for f in fields):
            return team
    return None


def game_involves_team(game: GameRecord, variations: Sequence[str]) -> bool:
    """True if either side of `game` matches one of `variations`.

    BYE rows only count for the real team on the row, never for "BYE" itself.
    """

    if game.is_bye:
        sides = [game.away_team if game.home_team.upper() == BYE else game.home_team]
    else:
        sides = [game.home_team, game.away_team]

    lowered = [s.lower() for s in sides]
    return any(v in side for v in variations for side in lowered)
