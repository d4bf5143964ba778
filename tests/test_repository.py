import sqlite3

from adapters.config_loader import load_config, merge_catalogs
from adapters.report import csv_writer
from adapters.repository import SCHEDULE, SECTORS, DatabaseError, InMemoryRepository, SqliteRepository
from domain.models import Machine
from services.db import seed_repository

import pytest


def test_sqlite_repository_roundtrip(tmp_path):
    repo = SqliteRepository(tmp_path / "lpa.sqlite")
    default = []
    assert repo.load(SCHEDULE, default) == []
    assert repo.load(SCHEDULE, default) is not default
    assert not repo.has(SCHEDULE)

    repo.save(SCHEDULE, [{"id": "a", "month": 0}])
    reopened = SqliteRepository(tmp_path / "lpa.sqlite")
    assert reopened.load(SCHEDULE) == [{"id": "a", "month": 0}]
    assert reopened.has(SCHEDULE)


def test_in_memory_repository_returns_copies():
    repo = InMemoryRepository({SECTORS: [{"id": "s1", "name": "Mandrila"}]})
    loaded = repo.load(SECTORS)
    loaded.append({"id": "s2"})
    assert repo.load(SECTORS) == [{"id": "s1", "name": "Mandrila"}]


def test_seed_only_fills_empty_store():
    repo = InMemoryRepository()
    assert seed_repository(repo) is True
    repo.save(SECTORS, [])
    assert seed_repository(repo) is False
    assert repo.load(SECTORS) == []


def test_load_config_yaml_and_merge(tmp_path):
    path = tmp_path / "catalogs.yaml"
    path.write_text("mock_auditors:\n  - {id: m1, name: Auditor Um}\n", encoding="utf-8")
    overrides = load_config(path)
    base = {"mock_auditors": [], "sector_names": ["x"]}
    assert merge_catalogs(base, overrides) == ["mock_auditors"]
    assert base["mock_auditors"] == [{"id": "m1", "name": "Auditor Um"}]
    with pytest.raises(ValueError):
        merge_catalogs(base, {"sector_names": []})


def test_machine_csv_skips_incomplete_rows():
    text = csv_writer.write_machines([Machine(id="m", name="Fresa #9", code="FRE-009", sector="Fresa Canal")])
    assert text.splitlines()[0] == '\ufeff"Nome","Código","Setor","Descrição"'
    parsed = csv_writer.read_machines(text + '"Sem código","",,\n')
    assert [(m.name, m.code, m.sector) for m in parsed] == [("Fresa #9", "FRE-009", "Fresa Canal")]


def test_sqlite_failures_surface_as_database_error(tmp_path, monkeypatch):
    repo = SqliteRepository(tmp_path / "lpa.sqlite")

    def broken_connect():
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(repo, "_connect", broken_connect)
    with pytest.raises(DatabaseError):
        repo.has(SCHEDULE)
    with pytest.raises(DatabaseError):
        repo.load(SCHEDULE)
