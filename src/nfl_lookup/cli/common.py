from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from nfl_lookup.core.config import settings
from nfl_lookup.core.errors import InvalidInputError, NflLookupError, NotFoundError
from nfl_lookup.providers.base.errors import (
    ProviderParseError,
    ProviderRequestError,
    UpstreamError,
)
from nfl_lookup.service.comparison import PlayerComparison
from nfl_lookup.service.orchestrator import NflDataService
from nfl_lookup.service.types import PlayerStats


def describe_error(exc: NflLookupError) -> str:
    """Short, user-facing explanation for any lookup failure."""

    if isinstance(exc, NotFoundError):
        return f"{exc} {exc.hint}" if exc.hint else str(exc)
    if isinstance(exc, InvalidInputError):
        return f"Invalid request: {exc}"
    if isinstance(exc, UpstreamError):
        return f"NFL data request failed (HTTP {exc.status_code}): {exc.reason.message}"
    if isinstance(exc, ProviderParseError):
        return "NFL data provider sent a response that could not be read. Try again later."
    if isinstance(exc, ProviderRequestError):
        return f"Could not reach the NFL data provider: {exc}"
    return str(exc)


@contextmanager
def service_scope() -> Iterator[NflDataService]:
    """
    Context-managed service for CLI commands.
    Lookup errors are echoed to stderr and turned into exit code 1.
    """
    try:
        service = NflDataService.from_settings(settings)
    except NflLookupError as e:
        typer.echo(describe_error(e), err=True)
        raise typer.Exit(code=1) from e

    try:
        yield service
    except NflLookupError as e:
        typer.echo(describe_error(e), err=True)
        raise typer.Exit(code=1) from e
    finally:
        service.close()


def format_player_stats(stats: PlayerStats) -> list[str]:
    header = f"{stats.name} ({stats.position}, {stats.team}) {stats.season}"
    if stats.week is not None:
        header += f" week {stats.week}"
    lines = [header]

    if stats.passing is not None:
        p = stats.passing
        line = f"  passing: {p.yards} yds, {p.touchdowns} td, {p.interceptions} int"
        if p.completion_percent is not None:
            line += f", {p.completion_percent:.1f}% cmp"
        lines.append(line)
    if stats.rushing is not None:
        r = stats.rushing
        lines.append(f"  rushing: {r.yards} yds, {r.touchdowns} td")
    if stats.receiving is not None:
        c = stats.receiving
        lines.append(
            f"  receiving: {c.receptions}/{c.targets} rec, {c.yards} yds, {c.touchdowns} td"
        )
    if len(lines) == 1:
        lines.append("  no recorded passing, rushing or receiving stats")
    if stats.sample_note:
        lines.append(f"  note: {stats.sample_note}")
    return lines


def _fmt_value(value: float) -> str:
    return f"{value:.1f}" if isinstance(value, float) else str(value)


def format_comparison(comparison: PlayerComparison) -> list[str]:
    a, b = comparison.first, comparison.second
    lines = [
        comparison.title,
        f"  [1] {a.name} ({a.position}, {a.team}) vs [2] {b.name} ({b.position}, {b.team})",
    ]
    if not comparison.categories:
        lines.append("  no shared stat categories to compare")
    for category in comparison.categories:
        lines.append(f"  {category.category}:")
        for line in category.lines:
            row = f"    {line.label}: {_fmt_value(line.first)} | {_fmt_value(line.second)}"
            if line.leader is not None:
                row += f"  (+[{line.leader}])"
            lines.append(row)
    return lines
