"""CLI entrypoint: Typer app definition and command registration"""

import typer

from safeslug.cli.commands import check_cmd, estimate_cmd, slug_cmd


app = typer.Typer(name="safeslug", no_args_is_help=True, help="Secure UTF-8 to URL slug conversion")

app.command(name="slug")(slug_cmd)
app.command(name="check")(check_cmd)
app.command(name="estimate")(estimate_cmd)
