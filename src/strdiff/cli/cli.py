"""CLI entrypoint: Typer app definition and command registration"""

import typer

from strdiff.cli.commands import diff_cmd, stat_cmd


app = typer.Typer(name="strdiff", no_args_is_help=True, help="Positional unified diffs of text files")

app.command(name="diff")(diff_cmd)
app.command(name="stat")(stat_cmd)
