from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from nfl_lookup.matching.scoring import player_match_score

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

MIN_CONFIDENCE = 50

Scorer = Callable[[str, str], int]


@dataclass(frozen=True)
class MatchResult(Generic[RecordT]):
    record: RecordT
    score: int


def resolve_best_match(
    candidates: Iterable[RecordT],
    query: str,
    *,
    name_of: Callable[[RecordT], str],
    min_confidence: int = MIN_CONFIDENCE,
    scorer: Scorer = player_match_score,
) -> MatchResult[RecordT] | None:
    """Pick the best-scoring candidate for `query` in a single pass.

    Candidates are scanned in the order given; on equal scores the earlier one
    is kept. Returns None when nothing reaches `min_confidence`, which is the
    normal outcome for misspelled or absent names.
    """

    if not query.strip():
        return None

    best: MatchResult[RecordT] | None = None
    for record in candidates:
        score = scorer(name_of(record), query)
        if best is None or score > best.score:
            best = MatchResult(record=record, score=score)

    if best is None or best.score < min_confidence:
        logger.debug(
            "No confident match for %r (best score %s)", query, best.score if best else None
        )
        return None

    logger.debug("Matched %r -> %r (score %d)", query, name_of(best.record), best.score)
    return best
