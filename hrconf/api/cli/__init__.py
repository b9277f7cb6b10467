"""CLI entry point — Typer app.

All subcommands read configuration through hrconf.settings.get_settings().
"""

from __future__ import annotations

import logging

import typer

from hrconf.settings import get_settings

app = typer.Typer(name="hrconf", no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """Identifier format tooling for company settings."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from hrconf.api.cli.formats import formats_app  # noqa: E402
from hrconf.api.cli.ids import ids_app  # noqa: E402
from hrconf.api.cli.serve import serve_app  # noqa: E402

app.add_typer(formats_app, name="formats")
app.add_typer(ids_app, name="ids")
app.add_typer(serve_app, name="serve")
