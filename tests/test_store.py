import json

from leaddesk.core.records import RecordStore


def test_load_absent_key_is_empty(store):
    assert store.load("billProfiles") == []


def test_load_unparseable_value_is_empty(store, storage):
    storage.set_item("billProfiles", "{not json")
    assert store.load("billProfiles") == []


def test_load_non_array_is_empty(store, storage):
    storage.set_item("billProfiles", json.dumps({"id": "1"}))
    assert store.load("billProfiles") == []


def test_load_drops_non_object_entries(store, storage):
    storage.set_item("billProfiles", json.dumps([{"id": "1"}, 5, "x", None, {"id": "2"}]))
    assert store.load("billProfiles") == [{"id": "1"}, {"id": "2"}]


def test_load_drops_entries_without_string_id(store, storage):
    storage.set_item(
        "billProfiles",
        json.dumps(
            [
                {"id": ["x"], "billName": "list id"},
                {"id": 5, "billName": "numeric id"},
                {"id": "", "billName": "blank id"},
                {"billName": "no id"},
                {"id": "ok", "billName": "kept"},
            ]
        ),
    )
    assert store.load("billProfiles") == [{"id": "ok", "billName": "kept"}]


def test_upsert_over_malformed_ids_still_creates(store, storage):
    storage.set_item("billProfiles", json.dumps([{"id": ["x"], "billName": "legacy"}]))

    records = store.upsert("billProfiles", {"billName": "new"})

    assert [r["billName"] for r in records] == ["new"]
    assert isinstance(records[0]["id"], str)


def test_save_all_then_load_round_trips(store):
    records = [
        {"id": "a", "billName": "Ünïcode ₹", "subTotal": 10.5, "paid": False, "tags": ["x"]},
        {"id": "b", "billName": "Second", "extra": {"nested": 1}},
    ]
    store.save_all("billProfiles", records)
    assert store.load("billProfiles") == records


def test_stores_are_independent(store):
    store.save_all("billProfiles", [{"id": "1"}])
    assert store.load("attachments") == []


def test_upsert_appends_with_fresh_id(store):
    records = store.upsert("billProfiles", {"billName": "A"})
    assert len(records) == 1
    assert isinstance(records[0]["id"], str) and records[0]["id"]


def test_upsert_ids_stay_unique(store):
    for name in ("A", "B", "C", "D"):
        store.save_all("billProfiles", store.upsert("billProfiles", {"billName": name}))

    ids = [record["id"] for record in store.load("billProfiles")]
    assert len(ids) == 4
    assert len(set(ids)) == 4


def test_upsert_keeps_own_free_id(store):
    records = store.upsert("billProfiles", {"id": "imported-1", "billName": "A"})
    assert records[0]["id"] == "imported-1"


def test_upsert_regenerates_colliding_own_id(store):
    store.save_all("billProfiles", [{"id": "dup", "billName": "A"}])
    records = store.upsert("billProfiles", {"id": "dup", "billName": "B"})
    assert [r["billName"] for r in records] == ["A", "B"]
    assert records[1]["id"] != "dup"


def test_upsert_replaces_in_place(store):
    store.save_all("billProfiles", [{"id": "1", "n": 1}, {"id": "2", "n": 2}, {"id": "3", "n": 3}])

    records = store.upsert("billProfiles", {"id": "ignored", "n": 20}, match_id="2")

    assert records == [{"id": "1", "n": 1}, {"id": "2", "n": 20}, {"id": "3", "n": 3}]


def test_upsert_with_missing_match_id_appends_under_that_id(store):
    store.save_all("billProfiles", [{"id": "1"}])
    records = store.upsert("billProfiles", {"n": 1}, match_id="gone")
    assert records == [{"id": "1"}, {"n": 1, "id": "gone"}]


def test_upsert_does_not_persist(store):
    store.upsert("billProfiles", {"billName": "A"})
    assert store.load("billProfiles") == []


def test_remove_by_id(store):
    store.save_all("billProfiles", [{"id": "1"}, {"id": "2"}])
    assert store.remove_by_id("billProfiles", "1") == [{"id": "2"}]


def test_remove_missing_id_is_noop(store):
    records = [{"id": "1"}, {"id": "2"}]
    store.save_all("billProfiles", records)
    assert store.remove_by_id("billProfiles", "nope") == records


def test_get(store):
    store.save_all("billProfiles", [{"id": "1", "n": 1}])
    assert store.get("billProfiles", "1") == {"id": "1", "n": 1}
    assert store.get("billProfiles", "2") is None


def test_uuid_id_strategy(storage):
    uuid_store = RecordStore(storage, id_strategy="uuid")
    records = uuid_store.upsert("billProfiles", {"billName": "A"})
    assert len(records[0]["id"]) == 32


def test_profile_store_round_trip(profile_store):
    assert profile_store.load("applicantAddress") is None
    profile_store.save("applicantAddress", {"city": "Pune", "pincode": 411001})
    assert profile_store.load("applicantAddress") == {"city": "Pune", "pincode": 411001}


def test_profile_store_ignores_malformed_data(profile_store, storage):
    storage.set_item("applicantAddress", "[1, 2]")
    assert profile_store.load("applicantAddress") is None
    storage.set_item("applicantAddress", "nope")
    assert profile_store.load("applicantAddress") is None
