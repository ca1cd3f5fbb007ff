from __future__ import annotations

import typer

from nfl_lookup.cli.common import format_comparison, format_player_stats, service_scope
from nfl_lookup.core.enums import CompareModeEnum

app = typer.Typer(help="Look up player statistics.")


@app.command("stats")
def player_stats_cmd(
    name: str = typer.Argument(..., help="Player name, e.g. 'Josh Allen' or 'mahomes'."),
) -> None:
    """Stats for the current week."""

    with service_scope() as service:
        stats = service.get_player_stats(name)
    typer.echo("\n".join(format_player_stats(stats)))


@app.command("week")
def player_week_cmd(
    name: str = typer.Argument(..., help="Player name."),
    season: int = typer.Option(..., "--season", help="Season year (e.g. 2024)."),
    week: int = typer.Option(..., "--week", help="Regular season week (1-18)."),
) -> None:
    """Stats for a specific regular season week."""

    with service_scope() as service:
        stats = service.get_player_week_stats(name, season, week)
    typer.echo("\n".join(format_player_stats(stats)))


@app.command("season")
def player_season_cmd(
    name: str = typer.Argument(..., help="Player name."),
    season: int | None = typer.Option(
        None, "--season", help="Season year; defaults to the last completed season."
    ),
) -> None:
    """Approximate season totals from a sample of weeks."""

    with service_scope() as service:
        stats = service.get_player_season_stats(name, season)
    typer.echo("\n".join(format_player_stats(stats)))


@app.command("compare")
def player_compare_cmd(
    first: str = typer.Argument(..., help="First player name."),
    second: str = typer.Argument(..., help="Second player name."),
    mode: CompareModeEnum = typer.Option(
        CompareModeEnum.CURRENT, "--mode", help="current week, one week, or a season sample."
    ),
    season: int | None = typer.Option(None, "--season", help="Season year (week/season modes)."),
    week: int | None = typer.Option(None, "--week", help="Regular season week (week mode)."),
) -> None:
    """Side-by-side comparison of two players."""

    with service_scope() as service:
        comparison = service.compare_players(first, second, mode, season=season, week=week)
    typer.echo("\n".join(format_comparison(comparison)))
