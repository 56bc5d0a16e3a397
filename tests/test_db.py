from datetime import datetime

import pytest

from db import (
    DuplicateTermError,
    EntryNotFoundError,
    Store,
    StoreError,
    ValidationError,
    sqlite_path_from_url,
)


def test_insert_and_list_in_insertion_order(store):
    store.insert_entry("motie", "voorstel")
    store.insert_entry("amendement", "wijziging")
    assert [e["original_term"] for e in store.list_entries()] == ["motie", "amendement"]


def test_duplicate_original_term(store):
    store.insert_entry("motie", "voorstel")
    with pytest.raises(DuplicateTermError):
        store.insert_entry("motie", "iets anders")
    assert len(store.list_entries()) == 1


@pytest.mark.parametrize("original,simplified", [
    (None, "voorstel"),
    ("motie", None),
    ("", "voorstel"),
    ("motie", "  "),
])
def test_required_fields(store, original, simplified):
    with pytest.raises(ValidationError):
        store.insert_entry(original, simplified)


def test_update_partial(store):
    entry = store.insert_entry("motie", "voorstel")
    updated = store.update_entry(entry["id"], {"simplified_term": "plan", "original_term": None})
    assert updated == {"id": entry["id"], "original_term": "motie", "simplified_term": "plan"}
    assert store.get_entry(str(entry["id"])) == updated


def test_update_rejects_blank_value(store):
    entry = store.insert_entry("motie", "voorstel")
    with pytest.raises(ValidationError):
        store.update_entry(entry["id"], {"simplified_term": ""})


def test_update_unknown(store):
    with pytest.raises(EntryNotFoundError):
        store.update_entry(1, {"simplified_term": "plan"})


def test_delete(store):
    entry = store.insert_entry("motie", "voorstel")
    store.delete_entry(entry["id"])
    assert store.list_entries() == []
    with pytest.raises(EntryNotFoundError):
        store.delete_entry(entry["id"])


def test_delete_non_numeric_id(store):
    with pytest.raises(EntryNotFoundError):
        store.delete_entry("abc")


def test_save_result_sets_created_at(store):
    saved = store.save_result("lange tekst", "korte tekst", "Ouderen", "Samenvatting")
    assert isinstance(saved["id"], int)
    datetime.fromisoformat(saved["created_at"])

    fetched = store.get_result(saved["id"])
    assert fetched["simplified_text"] == "korte tekst"
    assert fetched["target_audience"] == "Ouderen"
    assert store.get_result("999") is None


def test_save_result_requires_fields(store):
    with pytest.raises(ValidationError):
        store.save_result("lange tekst", "", "Ouderen", "Samenvatting")


def test_init_db_is_idempotent(tmp_path):
    s = Store(tmp_path / "nested" / "dir" / "app.db")
    s.init_db()
    s.insert_entry("motie", "voorstel")
    s.init_db()
    assert len(s.list_entries()) == 1


def test_sqlite_path_from_url(tmp_path):
    assert str(sqlite_path_from_url("sqlite:///data/app.db")) == "data/app.db"
    assert str(sqlite_path_from_url(f"sqlite:///{tmp_path}/app.db")) == f"{tmp_path}/app.db"
    assert "~" not in str(sqlite_path_from_url("sqlite:///~/app.db"))


@pytest.mark.parametrize("url", ["mongodb://localhost:27017/app", "data/app.db", "sqlite:///"])
def test_sqlite_path_from_url_rejects(url):
    with pytest.raises(RuntimeError):
        sqlite_path_from_url(url)


@pytest.mark.parametrize("entry_id", [str(2**63), str(-2**63 - 1), "99999999999999999999"])
def test_out_of_range_ids_are_not_found(store, entry_id):
    with pytest.raises(EntryNotFoundError):
        store.get_entry(entry_id)
    with pytest.raises(EntryNotFoundError):
        store.delete_entry(entry_id)
    assert store.get_result(entry_id) is None


def test_unusable_directory_raises_store_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(StoreError):
        Store(blocker / "app.db").init_db()
