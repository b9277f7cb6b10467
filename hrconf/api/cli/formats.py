"""hrconf formats — validate, preview and generate identifier formats.

Usage:
  hrconf formats validate "EMP{YYYY}-{###}"
  hrconf formats preview "DOC-{YYYY}-{MM}-{###}" --count 5
  hrconf formats variables
  hrconf formats generate "EMP{YY}-{DEPT}-{####}" --seq 12 --dept hr
  hrconf formats next "EMP{YYYY}-{###}" EMP2024-001 EMP2024-002
  hrconf formats parse EMP24-HR-0012 "EMP{YY}-{DEPT}-{####}"
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from hrconf.formats.engine import InvalidFormatError, list_variables, validate
from hrconf.formats.generator import generate_id, next_sequence_number, parse_id
from hrconf.formats.preview import preview_many
from hrconf.formats.types import IdContext
from hrconf.settings import get_settings

formats_app = typer.Typer(no_args_is_help=True)
_con = Console()

_DATE_FORMATS = ["%Y-%m-%d"]


def _fail(exc: InvalidFormatError) -> NoReturn:
    for error in exc.result.errors:
        typer.echo(f"  {error}", err=True)
    raise typer.Exit(1)


@formats_app.command("validate")
def validate_command(
    format: str = typer.Argument(help="Format string, e.g. EMP{YYYY}-{###}"),
):
    """Check a format string and list every problem found."""
    result = validate(format)
    if result.valid:
        typer.echo("valid")
        return
    typer.echo(f"invalid ({len(result.errors)} error(s))", err=True)
    for issue in result.issues:
        typer.echo(f"  [{issue.position:>3}] {issue.message}", err=True)
    raise typer.Exit(1)


@formats_app.command("preview")
def preview_command(
    format: str = typer.Argument(help="Format string"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="Number of examples"),
    date: Optional[datetime] = typer.Option(None, "--date", "-d", formats=_DATE_FORMATS, help="Reference date"),
):
    """Print illustrative identifiers with sample department/location values."""
    settings = get_settings()
    count = count or settings.preview_default_count
    if count > settings.preview_max_count:
        typer.echo(f"--count must be <= {settings.preview_max_count}", err=True)
        raise typer.Exit(1)
    try:
        examples = preview_many(format, count, at=date, settings=settings)
    except InvalidFormatError as exc:
        _fail(exc)
    for example in examples:
        typer.echo(example)


@formats_app.command("variables")
def variables_command():
    """Show the placeholders a format may use."""
    table = Table(title="Format variables", show_lines=False)
    table.add_column("Placeholder", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Example", style="dim")
    for var in list_variables():
        table.add_row(var.placeholder, var.description, var.example)
    _con.print(table)


@formats_app.command("generate")
def generate_command(
    format: str = typer.Argument(help="Format string"),
    seq: int = typer.Option(1, "--seq", "-s", min=1, help="Sequence number"),
    dept: Optional[str] = typer.Option(None, "--dept", help="Department code"),
    loc: Optional[str] = typer.Option(None, "--loc", help="Location code"),
    employee_type: Optional[str] = typer.Option(None, "--type", help="Employee type"),
    date: Optional[datetime] = typer.Option(None, "--date", "-d", formats=_DATE_FORMATS, help="Reference date"),
):
    """Generate one identifier from real values."""
    context = IdContext(sequence=seq, department=dept, location=loc, employee_type=employee_type)
    try:
        typer.echo(generate_id(format, context, at=date))
    except InvalidFormatError as exc:
        _fail(exc)


@formats_app.command("next")
def next_command(
    format: str = typer.Argument(help="Format string"),
    existing: Optional[List[str]] = typer.Argument(None, help="Identifiers already issued"),
    date: Optional[datetime] = typer.Option(None, "--date", "-d", formats=_DATE_FORMATS, help="Reference date"),
):
    """Print the next sequence number for the current period."""
    try:
        typer.echo(next_sequence_number(format, existing or [], at=date))
    except InvalidFormatError as exc:
        _fail(exc)


@formats_app.command("parse")
def parse_command(
    identifier: str = typer.Argument(help="Identifier to decode"),
    format: str = typer.Argument(help="Format it was generated from"),
):
    """Decode an identifier into its placeholder values (JSON output)."""
    try:
        parsed = parse_id(identifier, format)
    except InvalidFormatError as exc:
        _fail(exc)
    if parsed is None:
        typer.echo(f"{identifier} does not match {format}", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(parsed.model_dump(exclude_none=True), indent=2))
