from __future__ import annotations

from pathlib import Path

import pytest

from adapters.repository import InMemoryRepository
from app import create_app
from domain.models import Employee, Sector
from services.db import seed_repository

CANONICAL_SECTORS = [
    Sector(id="sec1", name="Brochadeira", checklist_id="ck1"),
    Sector(id="sec2", name="Prensa Ressalto", checklist_id="ck2"),
    Sector(id="sec3", name="Estampa Furo", checklist_id="ck3"),
    Sector(id="sec4", name="Mandrila", checklist_id="ck4"),
    Sector(id="sec5", name="Fresa Canal", checklist_id="ck5"),
    Sector(id="sec6", name="Chanfradeira", checklist_id="ck6"),
    Sector(id="sec7", name="Inspeção Final", checklist_id="ck7"),
    Sector(id="sec8", name="Prensa Curvar", checklist_id="ck8"),
]

FOUR_AUDITORS = [
    Employee(id="emp1", name="Diego Lima", role="Auditor", sector="Qualidade"),
    Employee(id="emp2", name="Rafael Costa", role="Auditor", sector="Processo"),
    Employee(id="emp3", name="Marlon Oliveira", role="Auditor", sector="Produção"),
    Employee(id="emp4", name="Carlos Henrique", role="Auditor", sector="Qualidade"),
]


@pytest.fixture()
def sectors():
    return list(CANONICAL_SECTORS)


@pytest.fixture()
def auditors():
    return list(FOUR_AUDITORS)


@pytest.fixture()
def repo():
    repository = InMemoryRepository()
    seed_repository(repository)
    return repository


@pytest.fixture()
def client(tmp_path: Path):
    db_path = tmp_path / "test.sqlite"
    app = create_app({
        "TESTING": True,
        "DATABASE": str(db_path),
        "AUTO_INIT_DB": True,
    })
    with app.test_client() as client:
        yield client
