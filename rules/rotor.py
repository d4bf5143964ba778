"""Rotation utilities for auditors and checklist types within one week."""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Generic, Hashable, NamedTuple, Sequence, Set, TypeVar

from domain.checklist_types import CHECKLIST_TYPES, display_name, normalize_checklist_id
from domain.models import Employee

T = TypeVar("T")


class ChecklistRef(NamedTuple):
    id: str
    name: str


class UsagePool(Generic[T]):
    """Pick items from *pool* per bucket without repeating inside the bucket.

    The n-th draw for a bucket takes index ``n % len(available)`` of the
    items not yet used there, in pool order. An exhausted bucket is cleared
    and restarts from the first item of the pool.
    """

    def __init__(self, pool: Sequence[T], key=lambda item: item) -> None:
        if not pool:
            raise ValueError("rotation pool must not be empty")
        self._pool = list(pool)
        self._key = key
        self._used: Dict[Hashable, Set[Hashable]] = defaultdict(set)

    def draw(self, bucket: Hashable) -> T:
        used = self._used[bucket]
        available = [item for item in self._pool if self._key(item) not in used]
        if not available:
            used.clear()
            selected = self._pool[0]
        else:
            selected = available[len(used) % len(available)]
        used.add(self._key(selected))
        return selected

    def used(self, bucket: Hashable) -> Set[Hashable]:
        return set(self._used.get(bucket, ()))


class AuditorRotator:
    """Round-robin auditors per weekday; nobody audits twice on the same day."""

    def __init__(self, auditors: Sequence[Employee]) -> None:
        self._pool: UsagePool[Employee] = UsagePool(auditors, key=lambda employee: employee.id)

    def next_auditor(self, day: int) -> Employee:
        return self._pool.draw(day)

    def used_on(self, day: int) -> Set[str]:
        return self._pool.used(day)  # type: ignore[return-value]


class ChecklistTypeRotator:
    """Rotate checklist types per auditor; no type repeats for an auditor in a week."""

    def __init__(self, types: Sequence[str] = CHECKLIST_TYPES) -> None:
        self._pool: UsagePool[str] = UsagePool(types)

    def next_type(self, auditor_id: str) -> str:
        return self._pool.draw(auditor_id)

    def next_checklist(self, auditor_id: str) -> ChecklistRef:
        label = self.next_type(auditor_id)
        return ChecklistRef(normalize_checklist_id(label), display_name(label))
