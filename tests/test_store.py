# tests/test_store.py
import json

import pytest

from shippy.data.store import PRODUCTS_KEY, SALARY_KEY


def test_save_then_load_returns_same_sequence(store):
    records = [{"id": "b", "name": "B"}, {"id": "a", "name": "A"}, {"id": "c", "name": "C"}]
    store.save(PRODUCTS_KEY, records)
    assert store.load(PRODUCTS_KEY) == records


def test_absent_key_without_default_is_none(store):
    assert store.load(PRODUCTS_KEY) is None
    assert not store.exists(PRODUCTS_KEY)


def test_absent_key_seeds_default_and_persists_it(store):
    seed = {"currentSalary": 45000}
    assert store.load(SALARY_KEY, default=seed) == seed
    assert store.exists(SALARY_KEY)
    # the stored value wins over a new default from now on
    assert store.load(SALARY_KEY, default={"currentSalary": 1}) == seed


def test_save_overwrites_whole_value(store):
    store.save(PRODUCTS_KEY, [{"id": "1"}, {"id": "2"}])
    store.save(PRODUCTS_KEY, [{"id": "3"}])
    assert store.load(PRODUCTS_KEY) == [{"id": "3"}]


def test_save_leaves_no_tmp_file(store):
    store.save(PRODUCTS_KEY, [])
    assert [p.name for p in store.data_dir.iterdir()] == [f"{PRODUCTS_KEY}.json"]


def test_empty_file_counts_as_absent(store):
    store.data_dir.mkdir(parents=True)
    (store.data_dir / f"{PRODUCTS_KEY}.json").write_text("  \n", encoding="utf-8")
    assert store.load(PRODUCTS_KEY, default=[{"id": "1"}]) == [{"id": "1"}]


def test_malformed_document_raises(store):
    store.data_dir.mkdir(parents=True)
    (store.data_dir / f"{PRODUCTS_KEY}.json").write_text("[{oops", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        store.load(PRODUCTS_KEY, default=[])


def test_remove(store):
    store.save("shippy_auth", "true")
    store.remove("shippy_auth")
    assert store.load("shippy_auth") is None
    store.remove("shippy_auth")  # already gone: no error
