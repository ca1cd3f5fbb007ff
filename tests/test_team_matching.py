from __future__ import annotations

from nfl_lookup.matching.teams import find_team, game_involves_team, team_name_variations
from nfl_lookup.providers.sportsdata.parser import GameRecord, TeamRecord


def _team(key: str, city: str, name: str) -> TeamRecord:
    return TeamRecord(
        key=key,
        team_id=0,
        city=city,
        name=name,
        full_name=f"{city} {name}",
        conference="AFC",
        division="East",
        head_coach="",
        stadium="",
    )


def _game(away: str, home: str, week: int = 1) -> GameRecord:
    return GameRecord(
        game_key=f"{away}{home}{week}",
        season=2025,
        week=week,
        away_team=away,
        home_team=home,
        away_score=None,
        home_score=None,
        quarter="",
        time_remaining="",
        status="Scheduled",
        kickoff=None,
        stadium="",
    )


TEAMS = [
    _team("BUF", "Buffalo", "Bills"),
    _team("MIA", "Miami", "Dolphins"),
    _team("NE", "New England", "Patriots"),
]


def test_team_name_variations_adds_aliases() -> None:
    assert team_name_variations(" Bills ") == ["bills", "buf", "buffalo"]
    assert team_name_variations("49ers") == ["49ers", "sf", "san francisco"]
    assert team_name_variations("Some Team") == ["some team"]


def test_find_team_matches_any_field() -> None:
    assert find_team(TEAMS, "dolphins").key == "MIA"
    assert find_team(TEAMS, "New England").key == "NE"
    assert find_team(TEAMS, "buf").key == "BUF"
    assert find_team(TEAMS, "Miami Dolphins").key == "MIA"


def test_find_team_returns_first_match_or_none() -> None:
    # "l" appears in several names; batch order decides.
    assert find_team(TEAMS, "l").key == "BUF"
    assert find_team(TEAMS, "packers") is None
    assert find_team(TEAMS, "") is None


def test_game_involves_team_checks_both_sides() -> None:
    variations = team_name_variations("bills")
    assert game_involves_team(_game("BUF", "MIA"), variations)
    assert game_involves_team(_game("NYJ", "BUF"), variations)
    assert not game_involves_team(_game("NYJ", "NE"), variations)


def test_bye_week_is_attributed_to_the_real_team() -> None:
    bye = _game("BUF", "BYE", week=7)
    assert bye.is_bye
    assert game_involves_team(bye, team_name_variations("bills"))
    # "bye" itself never matches as a team.
    assert not game_involves_team(bye, ["bye"])
