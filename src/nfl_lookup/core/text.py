from __future__ import annotations

import re

_whitespace_re = re.compile(r"\s+")
_dropped_punct_re = re.compile(r"['.]")


def normalize_name(value: str) -> str:
    """Normalize a person/team name for comparison.

    Lowercases, turns hyphens into spaces ("Hines-Allen" -> "hines allen"),
    drops apostrophes and periods ("Ja'Marr" -> "jamarr", "A.J." -> "aj") and
    collapses runs of whitespace.
    """

    v = value.lower().replace("-", " ")
    v = _dropped_punct_re.sub("", v)
    v = _whitespace_re.sub(" ", v)
    return v.strip()


def name_parts(normalized: str) -> list[str]:
    return normalized.split()
