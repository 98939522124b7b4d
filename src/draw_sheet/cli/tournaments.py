from __future__ import annotations

import typer

from draw_sheet.cli.common import app_scope
from draw_sheet.providers.base.errors import DrawSheetError
from draw_sheet.providers.base.types import Tournament

app = typer.Typer(help="Inspect the tournaments catalog.")

_CAPABILITIES = [
    ("overview", "has_overview"),
    ("live scores", "has_live_scores"),
    ("results", "has_results"),
    ("draw", "has_draw"),
    ("schedule", "has_schedule"),
    ("seeds list", "has_seeds_list"),
    ("full players list", "has_full_players_list"),
    ("prize breakdown", "has_prize_breakdown"),
]


def format_tournament_line(t: Tournament) -> str:
    return f"{t.id}\t{t.year}\t{t.name}\t{t.tier}\t{t.surface}\t{t.provider_id}"


@app.command("list")
def list_tournaments_cmd() -> None:
    """List registered tournaments in catalog order."""

    try:
        with app_scope() as (catalog, _pipeline):
            tournaments = catalog.get_all_tournaments()
    except DrawSheetError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if not tournaments:
        typer.echo("No tournaments registered.")
        return

    for t in tournaments:
        typer.echo(format_tournament_line(t))


@app.command("show")
def show_tournament_cmd(
    tournament_id: str = typer.Argument(..., help="Tournament id (e.g. uso)."),
) -> None:
    """Show one tournament's metadata and what data it offers."""

    try:
        with app_scope() as (catalog, _pipeline):
            t = catalog.get_tournament(tournament_id)
    except DrawSheetError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"{t.name} {t.year} ({t.id})")
    typer.echo(f"  tier={t.tier} surface={t.surface} provider={t.provider_id}")
    typer.echo(f"  singles_draw={t.singles_draw_size} doubles_draw={t.doubles_draw_size}")
    offered = [label for label, attr in _CAPABILITIES if getattr(t, attr)]
    typer.echo(f"  offers: {', '.join(offered) if offered else 'nothing'}")
