from datetime import date

import pytest

from dao import schedule_dao
from services import audit_service, schedule_service
from services.schedule_service import EntryNotFound


def _entry(repo, **overrides):
    payload = {"week_number": 2, "day_of_week": 3, "month": 4, "year": 2026,
               "employee_id": "emp1", "sector_id": "sec1", "checklist_id": "ck-processo"}
    payload.update(overrides)
    return schedule_service.add_entry(repo, payload)


def test_add_entry_is_pending_with_fresh_id(repo):
    entry = _entry(repo, status="completed", id="forced")
    assert entry.status.value == "pending"
    assert entry.id != "forced"
    assert schedule_dao.get_entry(repo, entry.id) == entry


def test_add_entry_rejects_bad_day(repo):
    with pytest.raises(ValueError):
        _entry(repo, day_of_week=7)
    with pytest.raises(ValueError):
        _entry(repo, month=12)


def test_update_and_delete(repo):
    entry = _entry(repo)
    updated = schedule_service.update_entry(repo, entry.id, {"employee_id": "emp2", "day_of_week": 5})
    assert (updated.employee_id, updated.day_of_week) == ("emp2", 5)
    schedule_service.delete_entry(repo, entry.id)
    with pytest.raises(EntryNotFound):
        schedule_service.delete_entry(repo, entry.id)
    with pytest.raises(EntryNotFound):
        schedule_service.update_entry(repo, "nope", {"day_of_week": 1})


def test_list_month_sorted_and_matrix(repo):
    late = _entry(repo, week_number=3, day_of_week=1)
    early = _entry(repo, week_number=2, day_of_week=4)
    _entry(repo, month=5)
    assert [e.id for e in schedule_service.list_month(repo, 4, 2026)] == [early.id, late.id]
    matrix = schedule_service.week_matrix(repo, 4, 2026)
    assert matrix[2]["sec1"][4][0]["id"] == early.id
    assert sorted(matrix) == [2, 3]


def test_missed_analysis_ranks_auditors_and_sectors(repo):
    for emp_id, sector_id in [("emp1", "sec1"), ("emp1", "sec2"), ("emp2", "sec1"), ("ghost", "sec1")]:
        schedule_service.mark_missed(repo, _entry(repo, employee_id=emp_id, sector_id=sector_id).id)
    _entry(repo)
    analysis = schedule_service.missed_analysis(repo)
    assert analysis["total"] == 4
    assert [(r["employee"]["id"], r["count"]) for r in analysis["auditors"]] == [("emp1", 2), ("emp2", 1)]
    assert analysis["sectors"][0]["sector"]["id"] == "sec1"
    assert analysis["sectors"][0]["count"] == 3


def test_clean_old_entries(repo):
    old = _entry(repo, month=1, year=2026)
    older = _entry(repo, month=11, year=2025)
    current = _entry(repo, month=2, year=2026)
    assert schedule_service.clean_old_entries(repo, today=date(2026, 3, 15)) == 2
    remaining = {e.id for e in schedule_dao.fetch_all(repo)}
    assert remaining == {current.id}
    assert old.id not in remaining and older.id not in remaining


def test_record_audit_completes_entry(repo):
    entry = _entry(repo)
    record = audit_service.record_audit(
        repo,
        {
            "schedule_entry_id": entry.id,
            "machine_id": "mach1",
            "answers": [
                {"checklist_item_id": "i1", "answer": "OK", "conformity": "ok"},
                {"checklist_item_id": "i2", "answer": "NOK", "conformity": "nok"},
            ],
        },
    )
    assert record.status.value == "nao_conforme"
    assert record.employee_id == "emp1"
    assert record.checklist_id == "ck-processo"
    assert schedule_dao.get_entry(repo, entry.id).status.value == "completed"
    assert [a.id for a in audit_service.list_audits(repo, "emp1")] == [record.id]
    assert audit_service.list_audits(repo, "emp2") == []


def test_record_audit_partial_and_unknown_entry(repo):
    entry = _entry(repo)
    record = audit_service.record_audit(
        repo,
        {"schedule_entry_id": entry.id,
         "answers": [{"checklist_item_id": "i1", "conformity": "na"}]},
    )
    assert record.status.value == "parcial"
    with pytest.raises(EntryNotFound):
        audit_service.record_audit(repo, {"schedule_entry_id": "missing"})


def test_update_raises_when_entry_disappears(repo, monkeypatch):
    entry = _entry(repo)
    monkeypatch.setattr(schedule_dao, "get_entry", lambda repo, entry_id: None)
    with pytest.raises(EntryNotFound):
        schedule_service.update_entry(repo, entry.id, {"day_of_week": 2})
