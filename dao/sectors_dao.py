from __future__ import annotations

from typing import Any, Dict, List, Optional

from adapters.repository import SECTORS, Repository
from domain.models import Sector

from . import collection


def list_sectors(repo: Repository) -> List[Dict[str, Any]]:
    return collection.list_records(repo, SECTORS)


def load_sectors(repo: Repository) -> List[Sector]:
    return [Sector.from_dict(payload) for payload in list_sectors(repo)]


def get_sector(repo: Repository, sector_id: str) -> Optional[Dict[str, Any]]:
    return collection.get_record(repo, SECTORS, sector_id)


def create_sector(repo: Repository, payload: Dict[str, Any]) -> Dict[str, Any]:
    return collection.create_record(repo, SECTORS, payload, Sector.from_dict)


def update_sector(repo: Repository, sector_id: str, payload: Dict[str, Any]) -> int:
    return collection.update_record(repo, SECTORS, sector_id, payload, Sector.from_dict)


def delete_sector(repo: Repository, sector_id: str) -> int:
    return collection.delete_record(repo, SECTORS, sector_id)
