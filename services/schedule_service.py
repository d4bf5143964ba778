from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Any, Dict, List, Optional

from adapters.repository import Repository
from dao import employees_dao, schedule_dao, sectors_dao
from domain.models import ScheduleEntry, ScheduleStatus, generate_id


class EntryNotFound(LookupError):
    """Raised when a schedule entry id is unknown."""


def _sort_key(entry: ScheduleEntry) -> tuple[int, int]:
    return entry.week_number, entry.day_of_week


def list_month(repo: Repository, month: int, year: int) -> List[ScheduleEntry]:
    return sorted(schedule_dao.fetch_month(repo, month, year), key=_sort_key)


def week_matrix(repo: Repository, month: int, year: int) -> Dict[int, Dict[str, Dict[int, List[Dict[str, Any]]]]]:
    """Group a month as ``{week_number: {sector_id: {day_of_week: [entry, ...]}}}``."""
    matrix: Dict[int, Dict[str, Dict[int, List[Dict[str, Any]]]]] = {}
    for entry in list_month(repo, month, year):
        sectors = matrix.setdefault(entry.week_number, {})
        days = sectors.setdefault(entry.sector_id, defaultdict(list))
        days[entry.day_of_week].append(entry.to_dict())
    return {week: {sector: dict(days) for sector, days in sectors.items()} for week, sectors in matrix.items()}


def add_entry(repo: Repository, payload: Dict[str, Any]) -> ScheduleEntry:
    entry = ScheduleEntry.from_dict({**payload, "id": generate_id(), "status": ScheduleStatus.PENDING.value})
    return schedule_dao.add_entry(repo, entry)


def update_entry(repo: Repository, entry_id: str, changes: Dict[str, Any]) -> ScheduleEntry:
    if not schedule_dao.update_entry(repo, entry_id, changes):
        raise EntryNotFound(entry_id)
    entry = schedule_dao.get_entry(repo, entry_id)
    if entry is None:
        raise EntryNotFound(entry_id)
    return entry


def delete_entry(repo: Repository, entry_id: str) -> None:
    if not schedule_dao.delete_entry(repo, entry_id):
        raise EntryNotFound(entry_id)


def set_status(repo: Repository, entry_id: str, status: ScheduleStatus) -> ScheduleEntry:
    return update_entry(repo, entry_id, {"status": status.value})


def mark_missed(repo: Repository, entry_id: str) -> ScheduleEntry:
    return set_status(repo, entry_id, ScheduleStatus.MISSED)


def clean_old_entries(repo: Repository, today: Optional[date] = None) -> int:
    """Drop entries of months before the current one. Returns the number removed."""
    today = today or date.today()
    current = (today.year, today.month - 1)
    entries = schedule_dao.fetch_all(repo)
    kept = [entry for entry in entries if (entry.year, entry.month) >= current]
    if len(kept) != len(entries):
        schedule_dao.save_all(repo, kept)
    return len(entries) - len(kept)


def missed_analysis(repo: Repository) -> Dict[str, Any]:
    missed = [entry for entry in schedule_dao.fetch_all(repo) if entry.status is ScheduleStatus.MISSED]
    employees = {emp["id"]: emp for emp in employees_dao.list_employees(repo)}
    sectors = {sector["id"]: sector for sector in sectors_dao.list_sectors(repo)}

    by_auditor = Counter(entry.employee_id for entry in missed)
    by_sector = Counter(entry.sector_id for entry in missed)
    return {
        "total": len(missed),
        "entries": [entry.to_dict() for entry in missed],
        "auditors": [
            {"employee": employees[emp_id], "count": count}
            for emp_id, count in by_auditor.most_common()
            if emp_id in employees
        ],
        "sectors": [
            {"sector": sectors[sector_id], "count": count}
            for sector_id, count in by_sector.most_common()
            if sector_id in sectors
        ],
    }
