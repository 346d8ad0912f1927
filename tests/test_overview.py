# tests/test_overview.py
from datetime import date

from shippy.logic.collection import ProductCollection, TeamCollection
from shippy.logic.overview import overview_stats
from shippy.logic.salary import SalaryController


def test_fallbacks_before_anything_is_stored(store):
    stats = overview_stats(store, date(2026, 10, 19))
    assert stats["product_count"] == 847
    assert stats["team_count"] == 3
    assert stats["total_earnings"] == 170000
    assert stats["next_salary_date"] == date(2025, 8, 25)
    assert stats["monthly_growth"] == 26.7
    # reading the overview seeds nothing
    assert store.load("shippy_products") is None


def test_counts_follow_stored_collections(store, clock):
    products = ProductCollection(store)
    products.remove(products.records[0].id)
    team = TeamCollection(store)
    team.add({"name": "Ravi", "email": "ravi@shippy.com"})
    SalaryController(store, clock=clock)

    stats = overview_stats(store, date(2026, 1, 3))
    assert stats["product_count"] == 9
    assert stats["team_count"] == 4
    assert stats["monthly_growth"] == 15.2
    assert stats["next_salary_date"] == date(2026, 11, 25)


def test_empty_files_count_as_never_stored(store):
    store.data_dir.mkdir(parents=True)
    (store.data_dir / "shippy_products.json").write_text("", encoding="utf-8")
    store.save("shippy_team_members", [])
    stats = overview_stats(store, date(2026, 10, 19))
    assert stats["product_count"] == 847
    assert stats["team_count"] == 0
