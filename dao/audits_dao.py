from __future__ import annotations

from typing import List, Optional

from adapters.repository import AUDITS, Repository
from domain.models import AuditRecord

from . import collection


def list_audits(repo: Repository, employee_id: Optional[str] = None) -> List[AuditRecord]:
    records = [AuditRecord.from_dict(payload) for payload in collection.list_records(repo, AUDITS)]
    if employee_id:
        records = [record for record in records if record.employee_id == employee_id]
    return records


def find_by_entry(repo: Repository, entry_id: str) -> Optional[AuditRecord]:
    for record in list_audits(repo):
        if record.schedule_entry_id == entry_id:
            return record
    return None


def add_audit(repo: Repository, record: AuditRecord) -> AuditRecord:
    collection.create_record(repo, AUDITS, record.to_dict())
    return record
