from __future__ import annotations

import typer

from nfl_lookup.cli.games import app as games_app
from nfl_lookup.cli.players import app as players_app
from nfl_lookup.cli.teams import app as teams_app
from nfl_lookup.core.config import settings
from nfl_lookup.core.log import configure_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(players_app, name="players")
app.add_typer(teams_app, name="teams")
app.add_typer(games_app, name="games")


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, WARNING...)."
    ),
) -> None:
    """NFL player/team lookups against SportsData.io."""

    configure_logging(log_level)
