"""High level orchestration for monthly audit schedule generation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from adapters.repository import Repository
from dao import checklists_dao, employees_dao, schedule_dao, sectors_dao
from domain.checklist_types import ensure_mandatory_checklists
from domain.models import AuditAssignment, ScheduleEntry, ScheduleStatus, generate_id
from rules import week_numbering
from services.distributor import SLOTS_PER_WEEK, AuditDistributor, mock_auditors

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    month: int
    year: int
    base_week: int
    weeks: List[int] = field(default_factory=list)
    entries: int = 0
    short_weeks: List[int] = field(default_factory=list)

    @property
    def warning(self) -> Optional[str]:
        if not self.weeks:
            return "Nenhum setor cadastrado: cronograma não gerado."
        if self.short_weeks:
            labels = ", ".join(str(week) for week in self.short_weeks)
            return f"Semanas com menos de {SLOTS_PER_WEEK} auditorias: {labels}. Verifique os nomes dos setores."
        return None


def _to_entry(assignment: AuditAssignment, week_number: int, month: int, year: int) -> ScheduleEntry:
    return ScheduleEntry(
        id=generate_id(),
        week_number=week_number,
        day_of_week=assignment.day,
        month=month,
        year=year,
        employee_id=assignment.employee_id,
        sector_id=assignment.sector_id,
        checklist_id=assignment.checklist_id,
        status=ScheduleStatus.PENDING,
    )


class SchedulerService:
    def __init__(self, repo: Repository) -> None:
        self.repo = repo
        self.last_stats: Optional[GenerationStats] = None

    def ensure_mandatory_checklists(self) -> int:
        _, created = ensure_mandatory_checklists(checklists_dao.load_checklists(self.repo))
        if created:
            checklists_dao.append_checklists(self.repo, created)
            logger.info("Created mandatory checklists: %s", ", ".join(c.name for c in created))
        return len(created)

    def generate_schedule(self, month: int, year: int, first_week_number: Optional[int] = None) -> List[ScheduleEntry]:
        """Distribute audits for every local week of ``month``/``year`` and persist them.

        Existing entries for the same month and year are replaced; other months
        are left untouched. An empty sector catalog yields an empty result and
        nothing is written.
        """
        if not 0 <= month <= 11:
            raise ValueError(f"month must be within 0..11, got {month}")
        self.ensure_mandatory_checklists()

        employees = employees_dao.load_employees(self.repo) or mock_auditors()
        sectors = sectors_dao.load_sectors(self.repo)
        base_week = week_numbering.base_week_for_month(month, year, first_week_number)
        stats = GenerationStats(month=month, year=year, base_week=base_week)
        self.last_stats = stats
        if not sectors:
            logger.warning("No sectors registered; schedule for %02d/%s not generated", month + 1, year)
            return []

        distributor = AuditDistributor(employees, sectors)
        entries: List[ScheduleEntry] = []
        for local_week in week_numbering.local_weeks(year, month):
            week_number = base_week + (local_week - 1)
            assignments = distributor.distribute_for_week(local_week, year)
            if len(assignments) < SLOTS_PER_WEEK:
                stats.short_weeks.append(week_number)
            stats.weeks.append(week_number)
            entries.extend(_to_entry(assignment, week_number, month, year) for assignment in assignments)

        schedule_dao.replace_month_schedule(self.repo, month, year, entries)
        stats.entries = len(entries)
        logger.info(
            "Generated %d entries for %02d/%s (weeks %s-%s)",
            len(entries),
            month + 1,
            year,
            stats.weeks[0],
            stats.weeks[-1],
        )
        if stats.short_weeks:
            logger.warning("Short weeks in %02d/%s: %s", month + 1, year, stats.short_weeks)
        return entries


def generate_schedule(repo: Repository, month: int, year: int, first_week_number: Optional[int] = None) -> List[ScheduleEntry]:
    return SchedulerService(repo).generate_schedule(month, year, first_week_number)


__all__ = ["SchedulerService", "GenerationStats", "generate_schedule"]
