"""Domain dataclasses for LPA audit scheduling."""
from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


def generate_id() -> str:
    return uuid.uuid4().hex[:9]


def _require(payload: Dict[str, Any], *keys: str) -> None:
    missing = [key for key in keys if payload.get(key) in (None, "")]
    if missing:
        raise ValueError(f"missing required field(s): {', '.join(missing)}")


class ScheduleStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    MISSED = "missed"


class AuditStatus(str, Enum):
    CONFORME = "conforme"
    NAO_CONFORME = "nao_conforme"
    PARCIAL = "parcial"

    @classmethod
    def from_answers(cls, answers: Iterable["AuditAnswer"]) -> "AuditStatus":
        conformities = [answer.conformity for answer in answers]
        if all(value == "ok" for value in conformities):
            return cls.CONFORME
        if any(value == "nok" for value in conformities):
            return cls.NAO_CONFORME
        return cls.PARCIAL


@dataclass(frozen=True)
class Sector:
    id: str
    name: str
    checklist_id: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Sector":
        _require(payload, "id", "name")
        return cls(id=str(payload["id"]), name=str(payload["name"]), checklist_id=str(payload.get("checklist_id") or ""))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    role: str = ""
    sector: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Employee":
        _require(payload, "id", "name")
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            role=str(payload.get("role") or ""),
            sector=str(payload.get("sector") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Machine:
    id: str
    name: str
    code: str
    sector: str
    description: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Machine":
        _require(payload, "id", "name", "code")
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            code=str(payload["code"]),
            sector=str(payload.get("sector") or ""),
            description=str(payload.get("description") or ""),
            created_at=str(payload.get("created_at") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ITEM_TYPES = ("ok_nok", "text", "number")


@dataclass
class ChecklistItem:
    id: str
    question: str
    type: str = "ok_nok"

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ChecklistItem":
        _require(payload, "question")
        item_type = payload.get("type", "ok_nok")
        if item_type not in ITEM_TYPES:
            raise ValueError(f"unknown checklist item type: {item_type}")
        return cls(id=str(payload.get("id") or f"ci-{generate_id()}"), question=str(payload["question"]), type=item_type)


@dataclass
class Checklist:
    id: str
    name: str
    category: str
    items: List[ChecklistItem] = field(default_factory=list)
    created_at: str = ""
    level: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Checklist":
        _require(payload, "id", "name")
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            category=str(payload.get("category") or ""),
            items=[ChecklistItem.from_dict(item) for item in payload.get("items", [])],
            created_at=str(payload.get("created_at") or ""),
            level=payload.get("level"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AuditAssignment:
    """One sector/day slot produced by the distributor. Never persisted as-is."""

    sector_id: str
    employee_id: str
    checklist_id: str
    checklist_name: str
    sector_name: str
    employee_name: str
    day: int


@dataclass
class ScheduleEntry:
    id: str
    week_number: int
    day_of_week: int
    month: int
    year: int
    employee_id: str
    sector_id: str
    checklist_id: str
    status: ScheduleStatus = ScheduleStatus.PENDING

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ScheduleEntry":
        _require(payload, "id", "week_number", "day_of_week", "month", "year")
        entry = cls(
            id=str(payload["id"]),
            week_number=int(payload["week_number"]),
            day_of_week=int(payload["day_of_week"]),
            month=int(payload["month"]),
            year=int(payload["year"]),
            employee_id=str(payload.get("employee_id") or ""),
            sector_id=str(payload.get("sector_id") or ""),
            checklist_id=str(payload.get("checklist_id") or ""),
            status=ScheduleStatus(payload.get("status", ScheduleStatus.PENDING.value)),
        )
        entry.validate()
        return entry

    def validate(self) -> None:
        if self.week_number < 1:
            raise ValueError(f"week_number must be >= 1, got {self.week_number}")
        if not 1 <= self.day_of_week <= 6:
            raise ValueError(f"day_of_week must be within 1..6, got {self.day_of_week}")
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be within 0..11, got {self.month}")

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["status"] = self.status.value
        return payload


@dataclass
class AuditAnswer:
    checklist_item_id: str
    answer: str
    conformity: str = "ok"

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuditAnswer":
        _require(payload, "checklist_item_id")
        conformity = payload.get("conformity", "ok")
        if conformity not in ("ok", "nok", "na"):
            raise ValueError(f"unknown conformity: {conformity}")
        return cls(
            checklist_item_id=str(payload["checklist_item_id"]),
            answer=str(payload.get("answer") or ""),
            conformity=conformity,
        )


@dataclass
class AuditRecord:
    id: str
    schedule_entry_id: str
    employee_id: str
    machine_id: str
    checklist_id: str
    date: str
    answers: List[AuditAnswer] = field(default_factory=list)
    observations: str = ""
    photos: List[str] = field(default_factory=list)
    status: AuditStatus = AuditStatus.CONFORME
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuditRecord":
        _require(payload, "id", "schedule_entry_id", "employee_id", "checklist_id", "date")
        answers = [AuditAnswer.from_dict(item) for item in payload.get("answers", [])]
        status = payload.get("status")
        record = cls(
            id=str(payload["id"]),
            schedule_entry_id=str(payload["schedule_entry_id"]),
            employee_id=str(payload["employee_id"]),
            machine_id=str(payload.get("machine_id") or ""),
            checklist_id=str(payload["checklist_id"]),
            date=str(payload["date"]),
            answers=answers,
            observations=str(payload.get("observations") or ""),
            photos=list(payload.get("photos", [])),
            status=AuditStatus(status) if status else AuditStatus.from_answers(answers),
        )
        if payload.get("created_at"):
            record.created_at = str(payload["created_at"])
        return record

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["status"] = self.status.value
        return payload
