"""Recording completed audits against schedule entries."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from adapters.repository import Repository
from dao import audits_dao, schedule_dao
from domain.models import AuditRecord, ScheduleStatus, generate_id
from services.schedule_service import EntryNotFound, set_status

logger = logging.getLogger(__name__)


def record_audit(repo: Repository, payload: Dict[str, Any]) -> AuditRecord:
    entry_id = payload.get("schedule_entry_id")
    entry = schedule_dao.get_entry(repo, entry_id) if entry_id else None
    if entry is None:
        raise EntryNotFound(entry_id or "")

    record = AuditRecord.from_dict(
        {
            "employee_id": entry.employee_id,
            "checklist_id": entry.checklist_id,
            "date": date.today().isoformat(),
            **payload,
            "id": generate_id(),
        }
    )
    audits_dao.add_audit(repo, record)
    set_status(repo, entry.id, ScheduleStatus.COMPLETED)
    logger.info("Audit %s recorded for entry %s (%s)", record.id, entry.id, record.status.value)
    return record


def list_audits(repo: Repository, employee_id: Optional[str] = None) -> List[AuditRecord]:
    return audits_dao.list_audits(repo, employee_id)
