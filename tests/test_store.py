import pytest

from synapse_docs.core.store import RecordStore


@pytest.fixture
def store():
    return RecordStore()


async def test_connect_marks_store_connected(store):
    assert not store.connected
    await store.connect()
    assert store.connected


def test_insert_assigns_id_and_timestamps(store):
    record = store.insert("users", {"name": "Ada"})

    assert record["name"] == "Ada"
    assert isinstance(record["id"], str) and record["id"]
    assert record["created_at"] == record["updated_at"]
    assert store.find_by_id("users", record["id"]) == record


def test_insert_generates_unique_ids(store):
    ids = {store.insert("t", {"n": i})["id"] for i in range(50)}
    assert len(ids) == 50


def test_insert_overrides_caller_supplied_id(store):
    record = store.insert("t", {"id": "mine", "n": 1})
    assert record["id"] != "mine"


def test_insert_creates_missing_table(store):
    store.insert("fresh", {"a": 1})
    assert "fresh" in store.tables()
    assert store.count("fresh") == 1


def test_create_table_resets_existing_table(store):
    store.insert("t", {"a": 1})
    store.create_table("t")
    assert store.find("t") == []


def test_find_without_conditions_returns_all_in_insertion_order(store):
    for n in range(3):
        store.insert("t", {"n": n})
    assert [r["n"] for r in store.find("t")] == [0, 1, 2]
    assert [r["n"] for r in store.find("t", {})] == [0, 1, 2]


def test_find_matches_all_conditions(store):
    store.insert("t", {"a": 1, "b": 1})
    store.insert("t", {"a": 1, "b": 2})
    store.insert("t", {"a": 2, "b": 2})

    assert len(store.find("t", {"a": 1})) == 2
    assert [r["b"] for r in store.find("t", {"a": 1, "b": 2})] == [2]
    assert store.find("t", {"missing": 1}) == []


def test_find_on_unknown_table_is_empty(store):
    assert store.find("nope") == []
    assert store.find_by_id("nope", "x") is None
    assert store.count("nope") == 0


def test_returned_records_are_copies(store):
    record = store.insert("t", {"tags": ["a"]})
    record["tags"].append("b")
    found = store.find("t")[0]
    found["tags"].append("c")

    assert store.find_by_id("t", record["id"])["tags"] == ["a"]


def test_update_merges_fields_and_refreshes_updated_at(store):
    record = store.insert("t", {"a": 1, "b": 1})

    assert store.update("t", record["id"], {"b": 2, "c": 3})
    updated = store.find_by_id("t", record["id"])

    assert updated["a"] == 1
    assert updated["b"] == 2
    assert updated["c"] == 3
    assert updated["created_at"] == record["created_at"]
    assert updated["updated_at"] > record["updated_at"]


def test_update_keeps_id_and_created_at(store):
    record = store.insert("t", {"a": 1})
    store.update("t", record["id"], {"id": "other", "created_at": None})

    updated = store.find_by_id("t", record["id"])
    assert updated["id"] == record["id"]
    assert updated["created_at"] == record["created_at"]


def test_update_missing_record_returns_false(store):
    assert store.update("t", "missing", {"a": 1}) is False
    store.create_table("t")
    assert store.update("t", "missing", {"a": 1}) is False


def test_delete(store):
    record = store.insert("t", {"a": 1})

    assert store.delete("t", record["id"]) is True
    assert store.find_by_id("t", record["id"]) is None
    assert store.delete("t", record["id"]) is False
    assert store.delete("unknown", record["id"]) is False


def test_timestamps_strictly_increase(store):
    stamps = [store.insert("t", {"n": n})["created_at"] for n in range(20)]
    assert stamps == sorted(stamps)
    assert len(set(stamps)) == len(stamps)


def test_find_compares_value_types(store):
    store.insert("t", {"flag": 1})
    store.insert("t", {"flag": True})

    assert [r["flag"] for r in store.find("t", {"flag": True})] == [True]
    assert [r["flag"] for r in store.find("t", {"flag": 1})] == [1]
