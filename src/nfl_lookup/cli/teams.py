from __future__ import annotations

import typer

from nfl_lookup.cli.common import service_scope

app = typer.Typer(help="Look up team information and schedules.")


@app.command("info")
def team_info_cmd(
    name: str = typer.Argument(..., help="Team nickname, city or abbreviation."),
) -> None:
    """Conference, division, coach and stadium for a team."""

    with service_scope() as service:
        team = service.get_team_info(name)

    typer.echo(f"{team.full_name or team.name} ({team.key})")
    typer.echo(f"  {team.conference} {team.division}")
    typer.echo(f"  coach: {team.coach}")
    typer.echo(f"  stadium: {team.stadium}")


@app.command("schedule")
def team_schedule_cmd(
    name: str = typer.Argument(..., help="Team nickname, city or abbreviation."),
) -> None:
    """Current season schedule for a team, BYE week included."""

    with service_scope() as service:
        schedule = service.get_team_schedule(name)

    typer.echo(f"{schedule.team_name} {schedule.season}{schedule.season_type.value} schedule:")
    for game in schedule.games:
        if game.is_bye:
            typer.echo(f"  week {game.week:>2}: BYE")
            continue
        when = game.kickoff.strftime("%Y-%m-%d %H:%M UTC") if game.kickoff else "TBD"
        line = f"  week {game.week:>2}: {game.away_team} @ {game.home_team} {when}"
        winner = game.winner()
        if winner is not None:
            line += f" final {game.away_score}-{game.home_score}"
        typer.echo(line)
