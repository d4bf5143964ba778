"""Config loading helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, MutableMapping

import yaml


def load_config(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as fh:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(fh) or {}
        return json.load(fh)


# Rotation tables and checklist types are fixed; only seed catalogs can be replaced.
OVERRIDABLE = frozenset(
    {"default_sectors", "default_employees", "default_machines", "sector_checklists", "mock_auditors"}
)


def merge_catalogs(base: MutableMapping[str, Any], overrides: Dict[str, Any]) -> list[str]:
    """Overwrite seed catalogs of *base* in place. Any other key raises ``ValueError``."""
    unknown = sorted(set(overrides) - OVERRIDABLE)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    for key, value in overrides.items():
        base[key] = value
    return sorted(overrides)
