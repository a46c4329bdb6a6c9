"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpage.cli.commands import convert_cmd


app = typer.Typer(name="mdpage", add_completion=False, help="Simplified Markdown to standalone HTML")

app.command(name="convert")(convert_cmd)
