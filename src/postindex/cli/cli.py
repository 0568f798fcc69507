"""CLI entrypoint: Typer app definition and command registration"""

import typer

from postindex.cli.commands import build_cmd, check_cmd


app = typer.Typer(name="postindex", no_args_is_help=True, help="Index blog posts into a JSON file for the site")

app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
