from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from adapters.repository import CHECKLISTS, Repository
from domain.models import Checklist

from . import collection


def list_checklists(repo: Repository) -> List[Dict[str, Any]]:
    return collection.list_records(repo, CHECKLISTS)


def load_checklists(repo: Repository) -> List[Checklist]:
    return [Checklist.from_dict(payload) for payload in list_checklists(repo)]


def append_checklists(repo: Repository, checklists: List[Checklist]) -> None:
    stored = list_checklists(repo)
    taken = {record.get("id") for record in stored}
    for checklist in checklists:
        if checklist.id in taken:
            raise ValueError(f"{CHECKLISTS}: id {checklist.id!r} already exists")
        taken.add(checklist.id)
    repo.save(CHECKLISTS, stored + [checklist.to_dict() for checklist in checklists])


def get_checklist(repo: Repository, checklist_id: str) -> Optional[Dict[str, Any]]:
    return collection.get_record(repo, CHECKLISTS, checklist_id)


def create_checklist(repo: Repository, payload: Dict[str, Any]) -> Dict[str, Any]:
    record = dict(payload)
    if not record.get("created_at"):
        record["created_at"] = date.today().isoformat()
    return collection.create_record(repo, CHECKLISTS, record, Checklist.from_dict)


def update_checklist(repo: Repository, checklist_id: str, payload: Dict[str, Any]) -> int:
    return collection.update_record(repo, CHECKLISTS, checklist_id, payload, Checklist.from_dict)


def delete_checklist(repo: Repository, checklist_id: str) -> int:
    return collection.delete_record(repo, CHECKLISTS, checklist_id)
