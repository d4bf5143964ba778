"""Fixed 4-week sector rotation with a derived fifth week."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Mapping, Sequence

from config import CONFIG
from domain.models import Sector

logger = logging.getLogger(__name__)

SECTOR_NAMES: List[str] = list(CONFIG["sector_names"])
SECTOR_PATTERNS: Dict[int, List[int]] = {int(key): list(value) for key, value in CONFIG["sector_patterns"].items()}
SECTORS_PER_WEEK = 5


def week5_indices(patterns: Mapping[int, Sequence[int]] = SECTOR_PATTERNS) -> List[int]:
    """Least-used sectors not audited in week 4, padded from week 4's order."""
    week4 = list(patterns[3])
    usage = Counter({idx: 0 for idx in range(len(SECTOR_NAMES))})
    for pattern in patterns.values():
        usage.update(pattern)
    # sorted() is stable: equal counts keep index order
    candidates = sorted((idx for idx in range(len(SECTOR_NAMES)) if idx not in week4), key=lambda idx: usage[idx])
    chosen = candidates[:SECTORS_PER_WEEK]
    for idx in week4:
        if len(chosen) >= SECTORS_PER_WEEK:
            break
        if idx not in chosen:
            chosen.append(idx)
    return chosen


def indices_for_week(local_week: int) -> List[int]:
    if local_week == 5:
        return week5_indices()
    return list(SECTOR_PATTERNS[(local_week - 1) % 4])


def names_for_week(local_week: int) -> List[str]:
    return [SECTOR_NAMES[idx] for idx in indices_for_week(local_week)]


def resolve_sectors(names: Sequence[str], catalog: Sequence[Sector]) -> List[Sector]:
    """Match pattern names against the registered sectors by exact name.

    Names with no registered sector are dropped.
    """
    by_name: Dict[str, Sector] = {}
    for sector in catalog:
        by_name.setdefault(sector.name, sector)
    resolved = [by_name[name] for name in names if name in by_name]
    if len(resolved) < len(names):
        missing = [name for name in names if name not in by_name]
        logger.warning("Sectors not registered, skipped: %s", ", ".join(missing))
    return resolved


def sectors_for_week(local_week: int, catalog: Sequence[Sector]) -> List[Sector]:
    return resolve_sectors(names_for_week(local_week), catalog)
