"""Pool Store: tests for JSON file persistence.

Invariants:
    - Missing file loads as an empty pool without creating the file
    - save -> load reproduces both piles element-for-element
    - Unknown/missing fields and invalid JSON raise MalformedStateError
    - IO failures raise PersistenceError
"""

import json

import pytest

from deckpool.core.errors import MalformedStateError, PersistenceError
from deckpool.core.pool import Pool
from deckpool.infrastructure.pool_store import PoolStore


@pytest.fixture
def store(tmp_path):
    return PoolStore(tmp_path / "data.json")


def test_load_missing_file_returns_empty_pool(store):
    pool = store.load()
    assert pool.entries() == ((), ())
    assert not store.path.exists()


def test_save_writes_two_field_record(store):
    store.save(Pool(active=["b"], used=["a", "c"]))
    assert json.loads(store.path.read_text()) == {
        "deck": ["b"], "discard": ["a", "c"],
    }


def test_save_then_load_roundtrip(store):
    pool = Pool(used=[f"card-{i}" for i in range(12)])
    for _ in range(5):
        pool.discard(pool.draw())
    store.save(pool)
    assert store.load().entries() == pool.entries()


def test_save_truncates_previous_content(store):
    store.save(Pool(used=[f"long-entry-{i}" for i in range(50)]))
    store.save(Pool(used=["x"]))
    assert store.load().entries() == ((), ("x",))


def test_save_creates_parent_directories(tmp_path):
    store = PoolStore(tmp_path / "nested" / "dir" / "data.json")
    store.save(Pool(used=["a"]))
    assert store.path.exists()


def test_unicode_entries_roundtrip(store):
    pool = Pool(used=["café", "日本", "emoji 🂡"])
    store.save(pool)
    assert store.load().entries() == pool.entries()


def test_load_reads_existing_file(store):
    store.path.write_text('{"discard": ["b"], "deck": ["a"]}')
    assert store.load().entries() == (("a",), ("b",))


def test_load_unknown_field_is_malformed(store):
    store.path.write_text('{"deck": [], "discard": [], "extra": 1}')
    with pytest.raises(MalformedStateError) as exc:
        store.load()
    assert exc.value.context.data_file == str(store.path)


def test_load_missing_field_is_malformed(store):
    store.path.write_text('{"deck": []}')
    with pytest.raises(MalformedStateError):
        store.load()


def test_load_invalid_json_is_malformed(store):
    store.path.write_text("{not json")
    with pytest.raises(MalformedStateError):
        store.load()


def test_load_directory_is_persistence_error(tmp_path):
    store = PoolStore(tmp_path)
    with pytest.raises(PersistenceError) as exc:
        store.load()
    assert exc.value.operation == "load"


def test_save_into_file_path_is_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = PoolStore(blocker / "data.json")
    with pytest.raises(PersistenceError) as exc:
        store.save(Pool(used=["a"]))
    assert exc.value.operation == "save"


def test_health_check_true_for_writable_directory(store):
    assert store.health_check()


def test_health_check_false_for_missing_directory(tmp_path):
    assert not PoolStore(tmp_path / "missing" / "data.json").health_check()


def test_unencodable_entry_leaves_previous_file_intact(store):
    store.save(Pool(used=["a", "b"]))
    before = store.path.read_bytes()

    with pytest.raises(PersistenceError):
        store.save(Pool(used=["a", "b", "c", "\ud800"]))

    assert store.path.read_bytes() == before
    assert store.load().entries() == ((), ("a", "b"))
