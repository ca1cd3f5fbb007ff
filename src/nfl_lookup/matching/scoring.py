"""Player name scoring heuristics.

Scores are ordinal confidence values in [0, 100], not probabilities. The point
constants below were tuned by hand against real provider rosters; they are
knobs, not derived values.
"""

from __future__ import annotations

from nfl_lookup.core.text import name_parts, normalize_name

EXACT_SCORE = 100

# name_similarity
CONTAINED_LONG_SCORE = 90  # shorter side has >= 4 chars
CONTAINED_SHORT_SCORE = 70  # shorter side has 3 chars
PREFIX_MAX_SCORE = 60
MIN_PREFIX_LEN = 3

# player_match_score
MIDDLE_PART_MIN_SCORE = 70
SURNAME_ONLY_MIN_SIMILARITY = 90
SURNAME_ONLY_PENALTY = 30
CANDIDATE_CONTAINS_QUERY_SCORE = 40
QUERY_CONTAINS_CANDIDATE_SCORE = 35


def _contains_either(a: str, b: str) -> bool:
    return a in b or b in a


def name_similarity(a: str, b: str) -> int:
    """Similarity of two single name parts (already normalized)."""

    if a == b:
        return EXACT_SCORE

    if _contains_either(a, b):
        shorter = min(len(a), len(b))
        if shorter >= 4:
            return CONTAINED_LONG_SCORE
        if shorter >= 3:
            return CONTAINED_SHORT_SCORE

    min_len = min(len(a), len(b))
    for length in range(min_len, MIN_PREFIX_LEN - 1, -1):
        if a[:length] == b[:length]:
            return round(length / min_len * PREFIX_MAX_SCORE)

    return 0


def player_match_score(candidate_name: str, query_name: str) -> int:
    """How well `candidate_name` (provider) matches `query_name` (user input).

    Full first+last agreement scores highest. Names with a different number of
    parts never match each other ("josh allen" vs "josh hines allen"), and a
    bare surname query is down-weighted so a common surname cannot reach full
    confidence on its own.
    """

    candidate = normalize_name(candidate_name)
    query = normalize_name(query_name)

    if candidate == query:
        return EXACT_SCORE

    candidate_parts = name_parts(candidate)
    query_parts = name_parts(query)

    if len(candidate_parts) >= 2 and len(query_parts) >= 2:
        if len(candidate_parts) != len(query_parts):
            return 0

        first, last = candidate_parts[0], candidate_parts[-1]
        query_first, query_last = query_parts[0], query_parts[-1]

        if _contains_either(first, query_first) and _contains_either(last, query_last):
            for middle, query_middle in zip(candidate_parts[1:-1], query_parts[1:-1]):
                if name_similarity(middle, query_middle) < MIDDLE_PART_MIN_SCORE:
                    return 0

            first_score = name_similarity(first, query_first)
            last_score = name_similarity(last, query_last)
            return (first_score + last_score) // 2

    elif len(query_parts) == 1 and len(candidate_parts) >= 2:
        last_score = name_similarity(candidate_parts[-1], query_parts[0])
        if last_score >= SURNAME_ONLY_MIN_SIMILARITY:
            return last_score - SURNAME_ONLY_PENALTY

    candidate_raw = candidate_name.lower()
    query_raw = query_name.lower()
    if query_raw in candidate_raw:
        return CANDIDATE_CONTAINS_QUERY_SCORE
    if candidate_raw in query_raw:
        return QUERY_CONTAINS_CANDIDATE_SCORE

    return 0
