from __future__ import annotations

import typer

from draw_sheet.cli.players import players_cmd
from draw_sheet.cli.tournaments import app as tournaments_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(tournaments_app, name="tournaments")
app.command("players")(players_cmd)
