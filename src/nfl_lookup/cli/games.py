from __future__ import annotations

from datetime import UTC, datetime

import typer

from nfl_lookup.cli.common import service_scope
from nfl_lookup.football.season_clock import current_season_info

app = typer.Typer(help="Live scores and the season clock.")


@app.command("scores")
def scores_cmd() -> None:
    """Scores for the current week."""

    with service_scope() as service:
        scores = service.get_live_scores()

    if not scores:
        typer.echo("No games this week.")
    for score in scores:
        typer.echo(score.score_line())


@app.command("season")
def season_cmd() -> None:
    """Which season/week lookups currently target (no API call)."""

    info = current_season_info(datetime.now(UTC))
    typer.echo(f"{info.label} week {info.week}")
