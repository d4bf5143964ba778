from __future__ import annotations

from typing import Any, Dict, List, Optional

from adapters.repository import EMPLOYEES, Repository
from domain.models import Employee

from . import collection


def list_employees(repo: Repository) -> List[Dict[str, Any]]:
    return collection.list_records(repo, EMPLOYEES)


def load_employees(repo: Repository) -> List[Employee]:
    return [Employee.from_dict(payload) for payload in list_employees(repo)]


def get_employee(repo: Repository, emp_id: str) -> Optional[Dict[str, Any]]:
    return collection.get_record(repo, EMPLOYEES, emp_id)


def create_employee(repo: Repository, payload: Dict[str, Any]) -> str:
    return collection.create_record(repo, EMPLOYEES, payload, Employee.from_dict)["id"]


def update_employee(repo: Repository, emp_id: str, payload: Dict[str, Any]) -> int:
    return collection.update_record(repo, EMPLOYEES, emp_id, payload, Employee.from_dict)


def delete_employee(repo: Repository, emp_id: str) -> int:
    return collection.delete_record(repo, EMPLOYEES, emp_id)
