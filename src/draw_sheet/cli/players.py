from __future__ import annotations

import typer

from draw_sheet.cli.common import app_scope
from draw_sheet.providers.base.errors import DrawSheetError
from draw_sheet.providers.base.types import Event, Player


def format_player(p: Player, *, is_doubles: bool) -> str:
    if is_doubles:
        has_ranking, ranking = p.has_doubles_ranking, p.doubles_ranking
    else:
        has_ranking, ranking = p.has_singles_ranking, p.singles_ranking

    seed = f"[{p.seed}]" if p.seeded else ""
    rank = f"#{ranking}" if has_ranking else "unranked"
    return f"  {seed:>5} {p.name} ({p.country}) {rank}"


def format_event(event: Event) -> list[str]:
    lines = [f"{event.name} ({event.id})"]
    for p in event.seeded_players + event.unseeded_players:
        lines.append(format_player(p, is_doubles=event.is_doubles))
    return lines


def players_cmd(
    tournament_id: str = typer.Argument(..., help="Tournament id (e.g. uso)."),
) -> None:
    """Fetch a tournament's player list and print it per event."""

    try:
        with app_scope() as (catalog, pipeline):
            tournament = catalog.get_tournament(tournament_id)
            events = pipeline.get_players(tournament)
    except DrawSheetError as e:
        typer.echo(
            f"Error fetching player list for tournament with ID {tournament_id}: {e}",
            err=True,
        )
        raise typer.Exit(code=1) from e

    for event in events:
        for line in format_event(event):
            typer.echo(line)
