"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from mdpage.cli.commands import build_cmd, check_cmd, layouts_cmd, render_cmd
from mdpage.core.utils.logger import configure_logging


app = typer.Typer(name="mdpage", no_args_is_help=True, help="Render Markdown documents with front matter to HTML pages")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Render Markdown documents with front matter to HTML pages."""
    if verbose:
        configure_logging("DEBUG")


app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
app.command(name="layouts")(layouts_cmd)
