"""Mandatory checklist types and the checklist id they map to."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import List, Sequence, Tuple

from config import CONFIG

from .models import Checklist, ChecklistItem, generate_id

__all__ = [
    "CHECKLIST_TYPES",
    "normalize_checklist_id",
    "display_name",
    "build_mandatory_checklist",
    "ensure_mandatory_checklists",
]

logger = logging.getLogger(__name__)

CHECKLIST_TYPES: Tuple[str, ...] = tuple(CONFIG["checklist_types"])

_WHITESPACE = re.compile(r"\s+")
_NOT_ID_CHAR = re.compile(r"[^a-z0-9-]")


def normalize_checklist_id(label: str) -> str:
    """Return the canonical checklist id for a type *label*.

    Lowercase, whitespace runs become ``-``, then everything outside
    ``[a-z0-9-]`` is dropped. Accented letters and ``&`` are removed rather
    than transliterated, so ``"PCP & Produção"`` becomes ``"ck-pcp--produo"``.
    Every component resolving generated ids must go through this function.
    """
    base = _WHITESPACE.sub("-", label.lower())
    return f"ck-{_NOT_ID_CHAR.sub('', base)}"


def display_name(label: str) -> str:
    return f"Auditoria {label}"


def build_mandatory_checklist(label: str) -> Checklist:
    return Checklist(
        id=normalize_checklist_id(label),
        name=label,
        category=label,
        created_at=datetime.now(timezone.utc).isoformat(),
        items=[
            ChecklistItem(id=f"ci-{generate_id()}", question=f"Verificar {label}?", type="ok_nok"),
            ChecklistItem(id=f"ci-{generate_id()}", question="Observações", type="text"),
        ],
    )


def ensure_mandatory_checklists(existing: Sequence[Checklist]) -> Tuple[List[Checklist], List[Checklist]]:
    """Append a checklist for each mandatory type with no checklist of that name.

    Returns ``(all_checklists, created)``. Existing checklists are kept in order.
    A type whose normalized id is already taken by another checklist is skipped.
    """
    names = {checklist.name for checklist in existing}
    taken = {checklist.id for checklist in existing}
    created: List[Checklist] = []
    for label in CHECKLIST_TYPES:
        if label in names:
            continue
        checklist_id = normalize_checklist_id(label)
        if checklist_id in taken:
            logger.warning("Checklist id %s already in use; mandatory checklist %r not created", checklist_id, label)
            continue
        created.append(build_mandatory_checklist(label))
        taken.add(checklist_id)
    return list(existing) + created, created
