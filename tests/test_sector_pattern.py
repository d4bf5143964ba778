from domain.models import Sector
from rules import sector_pattern


def test_week_one_pattern():
    assert sector_pattern.names_for_week(1) == [
        "Brochadeira",
        "Chanfradeira",
        "Prensa Ressalto",
        "Inspeção Final",
        "Estampa Furo",
    ]


def test_pattern_repeats_every_four_weeks():
    assert sector_pattern.names_for_week(6) == sector_pattern.names_for_week(2)
    assert sector_pattern.indices_for_week(4) == [4, 0, 5, 1, 6]


def test_every_sector_scheduled_at_least_twice_per_cycle():
    counts = {idx: 0 for idx in range(8)}
    for week in range(1, 5):
        indices = sector_pattern.indices_for_week(week)
        assert len(indices) == len(set(indices)) == 5
        for idx in indices:
            counts[idx] += 1
    assert all(count >= 2 for count in counts.values())


def test_week_five_prefers_sectors_absent_from_week_four():
    assert sector_pattern.week5_indices() == [2, 3, 7, 4, 0]
    assert sector_pattern.names_for_week(5) == [
        "Estampa Furo",
        "Mandrila",
        "Prensa Curvar",
        "Fresa Canal",
        "Brochadeira",
    ]


def test_week_five_tie_break_keeps_index_order():
    patterns = {0: [0, 1, 2, 3, 4], 1: [0, 1, 2, 3, 4], 2: [0, 1, 2, 3, 4], 3: [7, 6, 0, 1, 2]}
    # 3 and 4 used 3 times, 5 never: 5 first, then 3, 4 by index, then week 4 backfill
    assert sector_pattern.week5_indices(patterns) == [5, 3, 4, 7, 6]


def test_unregistered_sector_names_are_dropped(sectors):
    catalog = [sector for sector in sectors if sector.name != "Chanfradeira"]
    resolved = sector_pattern.sectors_for_week(1, catalog)
    assert [sector.name for sector in resolved] == [
        "Brochadeira",
        "Prensa Ressalto",
        "Inspeção Final",
        "Estampa Furo",
    ]


def test_non_canonical_catalog_resolves_nothing():
    catalog = [Sector(id="x", name="Brochadeira 2"), Sector(id="y", name="brochadeira")]
    assert sector_pattern.sectors_for_week(1, catalog) == []
