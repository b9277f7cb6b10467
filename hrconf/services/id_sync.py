"""Detect employee ID drift between invites and employee records.

An invite is issued with an employee ID; the employee record created when
the invite is accepted should carry the same ID. Both collections are keyed
by email. This module only compares them, writing fixes back is left to
the caller's storage layer.

Usage:
  from hrconf.services.id_sync import find_mismatches, id_status

  invites = {"ana@acme.io": {"employeeId": "EMP2024-001", "name": "Ana"}}
  employees = {"u1": {"email": "ana@acme.io", "employeeId": "EMP2024-007"}}
  find_mismatches(invites, employees)
  # [IdMismatch(uid='u1', invite_employee_id='EMP2024-001', ...)]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)


@dataclass
class IdMismatch:
    uid: str
    invite_employee_id: str
    employee_record_id: str | None
    email: str
    name: str


@dataclass
class IdStatus:
    total_employees: int
    total_invites: int
    mismatches: int

    @property
    def status(self) -> str:
        return "healthy" if self.mismatches == 0 else "has_mismatches"


def find_mismatches(
    invites: Mapping[str, Mapping[str, Any]],
    employees: Mapping[str, Mapping[str, Any]],
) -> list[IdMismatch]:
    """Compare invites (keyed by email) with employee records (keyed by uid).

    Invites without an employee ID, or without a matching employee record,
    are skipped.
    """
    by_email = {
        record["email"]: (uid, record)
        for uid, record in employees.items()
        if record.get("email")
    }

    mismatches: list[IdMismatch] = []
    for email, invite in invites.items():
        invite_id = invite.get("employeeId")
        if not invite_id or email not in by_email:
            continue
        uid, record = by_email[email]
        if invite_id != record.get("employeeId"):
            mismatches.append(IdMismatch(
                uid=uid,
                invite_employee_id=invite_id,
                employee_record_id=record.get("employeeId"),
                email=email,
                name=record.get("name") or invite.get("name") or email,
            ))

    log.info("Found %d employee ID mismatch(es)", len(mismatches))
    return mismatches


def id_status(
    invites: Mapping[str, Mapping[str, Any]],
    employees: Mapping[str, Mapping[str, Any]],
) -> IdStatus:
    return IdStatus(
        total_employees=len(employees),
        total_invites=len(invites),
        mismatches=len(find_mismatches(invites, employees)),
    )
