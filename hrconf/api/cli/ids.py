"""hrconf ids — compare invite employee IDs with employee records.

Usage:
  hrconf ids status invites.json employees.json

invites.json maps email → invite document; employees.json maps uid →
employee document (each with ``email`` and ``employeeId``).
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from hrconf.services.id_sync import find_mismatches, id_status

ids_app = typer.Typer(no_args_is_help=True)


def _load(path: Path) -> dict:
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(1)
    if not isinstance(data, dict):
        typer.echo(f"{path} must contain a JSON object", err=True)
        raise typer.Exit(1)
    return data


@ids_app.command("status")
def status_command(
    invites_file: Path = typer.Argument(help="JSON object of invites keyed by email"),
    employees_file: Path = typer.Argument(help="JSON object of employees keyed by uid"),
):
    """Report employee ID drift between invites and employee records."""
    invites = _load(invites_file)
    employees = _load(employees_file)

    status = id_status(invites, employees)
    typer.echo(
        f"Employees: {status.total_employees}, invites: {status.total_invites}, "
        f"mismatches: {status.mismatches} ({status.status})"
    )
    for m in find_mismatches(invites, employees):
        typer.echo(f"  {m.name} <{m.email}>  record={m.employee_record_id}  invite={m.invite_employee_id}")
    if status.mismatches:
        raise typer.Exit(1)
