from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from adapters.repository import MACHINES, Repository
from domain.models import Machine

from . import collection


def list_machines(repo: Repository, sector: Optional[str] = None) -> List[Dict[str, Any]]:
    machines = collection.list_records(repo, MACHINES)
    if sector:
        machines = [machine for machine in machines if machine.get("sector") == sector]
    return machines


def load_machines(repo: Repository) -> List[Machine]:
    return [Machine.from_dict(payload) for payload in list_machines(repo)]


def get_machine(repo: Repository, machine_id: str) -> Optional[Dict[str, Any]]:
    return collection.get_record(repo, MACHINES, machine_id)


def create_machine(repo: Repository, payload: Dict[str, Any]) -> Dict[str, Any]:
    record = dict(payload)
    if not record.get("created_at"):
        record["created_at"] = date.today().isoformat()
    return collection.create_record(repo, MACHINES, record, Machine.from_dict)


def update_machine(repo: Repository, machine_id: str, payload: Dict[str, Any]) -> int:
    return collection.update_record(repo, MACHINES, machine_id, payload, Machine.from_dict)


def delete_machine(repo: Repository, machine_id: str) -> int:
    return collection.delete_record(repo, MACHINES, machine_id)


def replace_machines(repo: Repository, machines: List[Machine]) -> None:
    repo.save(MACHINES, [machine.to_dict() for machine in machines])
