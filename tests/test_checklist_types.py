import pytest

from adapters.repository import CHECKLISTS, InMemoryRepository
from dao import checklists_dao
from domain.checklist_types import (
    CHECKLIST_TYPES,
    build_mandatory_checklist,
    display_name,
    ensure_mandatory_checklists,
    normalize_checklist_id,
)
from domain.models import Checklist
from services.scheduler import SchedulerService


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Processo", "ck-processo"),
        ("Qualidade", "ck-qualidade"),
        # "&" and accented letters are stripped, not transliterated
        ("PCP & Produção", "ck-pcp--produo"),
        ("MAN & MC", "ck-man--mc"),
        ("Gestão de Pessoas", "ck-gesto-de-pessoas"),
        ("IF", "ck-if"),
    ],
)
def test_normalize_checklist_id_literal(label, expected):
    assert normalize_checklist_id(label) == expected


def test_whitespace_runs_collapse_to_one_hyphen():
    assert normalize_checklist_id("Linha   A\t2") == "ck-linha-a-2"


def test_display_name():
    assert display_name("IF") == "Auditoria IF"


def test_mandatory_checklist_shape():
    checklist = build_mandatory_checklist("MAN & MC")
    assert checklist.id == "ck-man--mc"
    assert checklist.name == checklist.category == "MAN & MC"
    assert [item.type for item in checklist.items] == ["ok_nok", "text"]
    assert checklist.items[0].question == "Verificar MAN & MC?"


def test_ensure_mandatory_keeps_existing_and_creates_missing():
    existing = [
        Checklist(id="custom-q", name="Qualidade", category="Qualidade"),
        Checklist(id="ck1", name="Segurança da Máquina", category="Segurança"),
    ]
    complete, created = ensure_mandatory_checklists(existing)
    assert complete[:2] == existing
    assert [c.name for c in created] == [label for label in CHECKLIST_TYPES if label != "Qualidade"]
    assert len(complete) == 7


def test_ensure_mandatory_is_noop_when_complete():
    complete, _ = ensure_mandatory_checklists([])
    again, created = ensure_mandatory_checklists(complete)
    assert created == []
    assert again == complete


def test_ensure_mandatory_skips_type_whose_id_is_taken():
    existing = [Checklist(id="ck-processo", name="Auditoria Processo", category="Processo")]
    complete, created = ensure_mandatory_checklists(existing)
    assert "Processo" not in [c.name for c in created]
    assert len(created) == len(CHECKLIST_TYPES) - 1
    ids = [c.id for c in complete]
    assert len(ids) == len(set(ids))


def test_scheduler_keeps_checklist_ids_unique():
    repo = InMemoryRepository(
        {CHECKLISTS: [{"id": "ck-processo", "name": "Auditoria Processo", "category": "Processo"}]}
    )
    assert SchedulerService(repo).ensure_mandatory_checklists() == len(CHECKLIST_TYPES) - 1
    ids = [record["id"] for record in checklists_dao.list_checklists(repo)]
    assert len(ids) == len(set(ids)) == len(CHECKLIST_TYPES)
    assert checklists_dao.get_checklist(repo, "ck-processo")["name"] == "Auditoria Processo"


def test_append_checklists_rejects_duplicate_id():
    repo = InMemoryRepository({CHECKLISTS: [{"id": "ck-if", "name": "IF", "category": "IF"}]})
    with pytest.raises(ValueError):
        checklists_dao.append_checklists(repo, [build_mandatory_checklist("IF")])
