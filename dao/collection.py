"""Generic record helpers over one JSON collection in the repository."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from adapters.repository import Repository
from domain.models import generate_id

Record = Dict[str, Any]


def list_records(repo: Repository, key: str, default: Optional[List[Record]] = None) -> List[Record]:
    return list(repo.load(key, default or []))


def get_record(repo: Repository, key: str, record_id: str) -> Optional[Record]:
    for record in list_records(repo, key):
        if record.get("id") == record_id:
            return record
    return None


def create_record(
    repo: Repository,
    key: str,
    payload: Record,
    validate: Callable[[Record], Any] | None = None,
) -> Record:
    record = dict(payload)
    record.setdefault("id", generate_id())
    if not record["id"]:
        record["id"] = generate_id()
    if validate is not None:
        record = validate(record).to_dict()
    records = list_records(repo, key)
    if any(existing.get("id") == record["id"] for existing in records):
        raise ValueError(f"{key}: id {record['id']!r} already exists")
    records.append(record)
    repo.save(key, records)
    return record


def update_record(
    repo: Repository,
    key: str,
    record_id: str,
    changes: Record,
    validate: Callable[[Record], Any] | None = None,
) -> int:
    records = list_records(repo, key)
    updated = 0
    for idx, record in enumerate(records):
        if record.get("id") != record_id:
            continue
        merged = {**record, **{k: v for k, v in changes.items() if k != "id"}}
        records[idx] = validate(merged).to_dict() if validate is not None else merged
        updated += 1
    if updated:
        repo.save(key, records)
    return updated


def delete_record(repo: Repository, key: str, record_id: str) -> int:
    records = list_records(repo, key)
    kept = [record for record in records if record.get("id") != record_id]
    if len(kept) != len(records):
        repo.save(key, kept)
    return len(records) - len(kept)
