from adapters.repository import CHECKLISTS, EMPLOYEES, SCHEDULE, SECTORS, InMemoryRepository
from dao import checklists_dao, schedule_dao
from domain.checklist_types import CHECKLIST_TYPES, normalize_checklist_id
from services import schedule_service
from services.scheduler import SchedulerService, generate_schedule


def _weeks(entries):
    return sorted({entry.week_number for entry in entries})


def test_generate_january_labels_global_weeks(repo):
    entries = generate_schedule(repo, 0, 2026)
    assert len(entries) == 125
    assert _weeks(entries) == [1, 2, 3, 4, 5]
    assert {(e.month, e.year) for e in entries} == {(0, 2026)}
    assert all(e.status.value == "pending" for e in entries)
    assert {e.day_of_week for e in entries} == {1, 2, 3, 4, 5}
    keys = [(e.week_number, e.day_of_week, e.sector_id) for e in entries]
    assert len(keys) == len(set(keys))
    assert len({e.id for e in entries}) == 125


def test_february_continues_after_january_and_keeps_it(repo):
    january = generate_schedule(repo, 0, 2026)
    february = generate_schedule(repo, 1, 2026)
    assert _weeks(february) == [6, 7, 8, 9]
    assert len(february) == 100
    stored_jan = schedule_dao.fetch_month(repo, 0, 2026)
    assert [e.id for e in stored_jan] == [e.id for e in january]


def test_regenerating_replaces_only_the_target_month(repo):
    generate_schedule(repo, 0, 2026)
    february = generate_schedule(repo, 1, 2026)
    manual = schedule_service.add_entry(
        repo,
        {"week_number": 1, "day_of_week": 6, "month": 0, "year": 2026,
         "employee_id": "emp1", "sector_id": "sec1", "checklist_id": "ck-if"},
    )
    other_year = schedule_service.add_entry(
        repo,
        {"week_number": 1, "day_of_week": 2, "month": 0, "year": 2025,
         "employee_id": "emp1", "sector_id": "sec1", "checklist_id": "ck-if"},
    )
    regenerated = generate_schedule(repo, 0, 2026)

    stored = schedule_dao.fetch_all(repo)
    stored_ids = {e.id for e in stored}
    assert manual.id not in stored_ids
    assert other_year.id in stored_ids
    assert {e.id for e in february} <= stored_ids
    assert len(stored) == len(regenerated) + len(february) + 1


def test_override_sets_minimum_week_number(repo):
    entries = generate_schedule(repo, 1, 2026, 10)
    assert min(e.week_number for e in entries) == 10
    assert _weeks(entries) == [10, 11, 12, 13]


def test_six_week_month(repo):
    service = SchedulerService(repo)
    entries = service.generate_schedule(7, 2026)
    assert len(service.last_stats.weeks) == 6
    assert len(entries) == 150
    assert service.last_stats.warning is None


def test_empty_sector_catalog_generates_nothing():
    repo = InMemoryRepository({EMPLOYEES: [], SECTORS: []})
    service = SchedulerService(repo)
    assert service.generate_schedule(0, 2026) == []
    assert not repo.has(SCHEDULE)
    assert service.last_stats.warning


def test_missing_employees_use_mock_auditors(repo):
    repo.save(EMPLOYEES, [])
    entries = generate_schedule(repo, 2, 2026)
    assert entries
    assert all(e.employee_id.startswith("emp-mock-") for e in entries)


def test_short_weeks_reported_when_sectors_are_unregistered(repo):
    repo.save(SECTORS, [{"id": "s1", "name": "Brochadeira"}, {"id": "s2", "name": "Torno"}])
    service = SchedulerService(repo)
    entries = service.generate_schedule(1, 2026)
    # Brochadeira is in pattern weeks 1, 2 and 4
    assert len(entries) == 15
    assert service.last_stats.short_weeks == [6, 7, 8, 9]
    assert "Verifique" in service.last_stats.warning


def test_mandatory_checklists_created_once(repo):
    before = len(checklists_dao.list_checklists(repo))
    generate_schedule(repo, 0, 2026)
    generate_schedule(repo, 1, 2026)
    checklists = checklists_dao.list_checklists(repo)
    assert len(checklists) == before + len(CHECKLIST_TYPES)
    ids = {c["id"] for c in checklists}
    assert {normalize_checklist_id(label) for label in CHECKLIST_TYPES} <= ids
    generated_ids = {e.checklist_id for e in schedule_dao.fetch_all(repo)}
    assert generated_ids <= ids


def test_existing_mandatory_checklist_is_not_duplicated():
    repo = InMemoryRepository({
        CHECKLISTS: [{"id": "mine", "name": "Processo", "category": "Processo", "items": []}],
        SECTORS: [],
    })
    SchedulerService(repo).ensure_mandatory_checklists()
    names = [c["name"] for c in checklists_dao.list_checklists(repo)]
    assert names.count("Processo") == 1
    assert len(names) == 6
