from __future__ import annotations

from nfl_lookup.matching.resolver import MIN_CONFIDENCE, MatchResult, resolve_best_match
from nfl_lookup.providers.sportsdata.parser import PlayerGameStat


def _player(name: str, team: str = "BUF") -> PlayerGameStat:
    return PlayerGameStat(player_id=0, name=name, team=team, position="QB", season=2025, week=6)


def _name(p: PlayerGameStat) -> str:
    return p.name


def test_empty_batch_is_not_found() -> None:
    assert resolve_best_match([], "josh allen", name_of=_name) is None


def test_blank_query_is_not_found() -> None:
    assert resolve_best_match([_player("Josh Allen")], "   ", name_of=_name) is None


def test_single_exact_match_returns_record_at_100() -> None:
    josh = _player("Josh Allen")
    result = resolve_best_match([josh], "Josh Allen", name_of=_name)
    assert result == MatchResult(record=josh, score=100)


def test_highest_score_wins() -> None:
    scores = {"a": 55, "b": 60, "c": 10}
    result = resolve_best_match(
        ["a", "b", "c"], "query", name_of=lambda s: s, scorer=lambda c, q: scores[c]
    )
    assert result is not None
    assert result.record == "b"
    assert result.score == 60


def test_ties_keep_first_seen() -> None:
    result = resolve_best_match(
        ["first", "second"], "query", name_of=lambda s: s, scorer=lambda c, q: 70
    )
    assert result is not None
    assert result.record == "first"


def test_below_threshold_is_not_found() -> None:
    # Fallback containment only: 40 points.
    assert resolve_best_match([_player("Josh Allen")], "osh", name_of=_name) is None
    assert MIN_CONFIDENCE == 50


def test_threshold_is_inclusive() -> None:
    result = resolve_best_match(["x"], "q", name_of=lambda s: s, scorer=lambda c, q: 50)
    assert result is not None
    assert result.score == 50


def test_hyphenated_surname_does_not_steal_match() -> None:
    batch = [
        _player("Josh Hines-Allen", "JAX"),
        _player("Keenan Allen", "CHI"),
        _player("Josh Allen"),
    ]

    result = resolve_best_match(batch, "josh allen", name_of=_name)
    assert result is not None
    assert result.record.team == "BUF"

    result = resolve_best_match(batch, "josh hines allen", name_of=_name)
    assert result is not None
    assert result.record.team == "JAX"


def test_common_surname_query_picks_first_in_batch_order() -> None:
    batch = [_player("Keenan Allen", "CHI"), _player("Josh Allen", "BUF")]
    result = resolve_best_match(batch, "allen", name_of=_name)
    assert result is not None
    assert result.record.team == "CHI"
    assert result.score == 70
