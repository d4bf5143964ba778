from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from adapters.repository import SCHEDULE, Repository
from domain.models import ScheduleEntry

from . import collection


def fetch_all(repo: Repository) -> List[ScheduleEntry]:
    return [ScheduleEntry.from_dict(payload) for payload in collection.list_records(repo, SCHEDULE)]


def fetch_month(repo: Repository, month: int, year: int) -> List[ScheduleEntry]:
    return [entry for entry in fetch_all(repo) if entry.month == month and entry.year == year]


def get_entry(repo: Repository, entry_id: str) -> Optional[ScheduleEntry]:
    payload = collection.get_record(repo, SCHEDULE, entry_id)
    return ScheduleEntry.from_dict(payload) if payload else None


def save_all(repo: Repository, entries: Iterable[ScheduleEntry]) -> None:
    repo.save(SCHEDULE, [entry.to_dict() for entry in entries])


def replace_month_schedule(repo: Repository, month: int, year: int, entries: Iterable[ScheduleEntry]) -> None:
    """Swap every entry of ``(month, year)`` for *entries*; other months stay as stored."""
    kept = [
        payload
        for payload in collection.list_records(repo, SCHEDULE)
        if not (payload.get("month") == month and payload.get("year") == year)
    ]
    repo.save(SCHEDULE, kept + [entry.to_dict() for entry in entries])


def add_entry(repo: Repository, entry: ScheduleEntry) -> ScheduleEntry:
    collection.create_record(repo, SCHEDULE, entry.to_dict())
    return entry


def update_entry(repo: Repository, entry_id: str, changes: Dict[str, Any]) -> int:
    return collection.update_record(repo, SCHEDULE, entry_id, changes, ScheduleEntry.from_dict)


def delete_entry(repo: Repository, entry_id: str) -> int:
    return collection.delete_record(repo, SCHEDULE, entry_id)
