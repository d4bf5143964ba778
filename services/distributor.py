"""Weekly audit distribution: 5 sectors x 5 weekdays."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from config import CONFIG
from domain.models import AuditAssignment, Employee, Sector
from rules import sector_pattern
from rules.rotor import AuditorRotator, ChecklistTypeRotator

logger = logging.getLogger(__name__)

WEEKDAYS = range(1, 6)
SLOTS_PER_WEEK = sector_pattern.SECTORS_PER_WEEK * len(WEEKDAYS)


def mock_auditors() -> List[Employee]:
    return [Employee.from_dict(record) for record in CONFIG["mock_auditors"]]


@dataclass
class WeekRotation:
    """Rotation state scoped to a single ``distribute_for_week`` call."""

    auditors: AuditorRotator
    checklists: ChecklistTypeRotator

    @classmethod
    def fresh(cls, employees: Sequence[Employee]) -> "WeekRotation":
        return cls(auditors=AuditorRotator(employees), checklists=ChecklistTypeRotator())


class AuditDistributor:
    def __init__(self, employees: Sequence[Employee], sectors: Sequence[Sector]) -> None:
        if employees:
            self.employees: List[Employee] = list(employees)
        else:
            logger.warning("No auditors registered, using %d mock auditors", len(CONFIG["mock_auditors"]))
            self.employees = mock_auditors()
        self.sectors: List[Sector] = list(sectors)

    def sectors_for_week(self, local_week: int) -> List[Sector]:
        return sector_pattern.sectors_for_week(local_week, self.sectors)

    def distribute_for_week(self, local_week: int, year: int) -> List[AuditAssignment]:
        """Assign an auditor and a checklist to every sector/weekday slot.

        Output is sector-major, weekday-minor. *year* is accepted for callers
        that label weeks by year; the rotation itself does not depend on it.
        """
        rotation = WeekRotation.fresh(self.employees)
        assignments: List[AuditAssignment] = []
        for sector in self.sectors_for_week(local_week):
            for day in WEEKDAYS:
                auditor = rotation.auditors.next_auditor(day)
                checklist = rotation.checklists.next_checklist(auditor.id)
                assignments.append(
                    AuditAssignment(
                        sector_id=sector.id,
                        employee_id=auditor.id,
                        checklist_id=checklist.id,
                        checklist_name=checklist.name,
                        sector_name=sector.name,
                        employee_name=auditor.name,
                        day=day,
                    )
                )
        logger.debug("Week %s/%s: %d assignments", local_week, year, len(assignments))
        return assignments


__all__ = ["AuditDistributor", "WeekRotation", "SLOTS_PER_WEEK", "mock_auditors"]
