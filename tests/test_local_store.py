"""Tests for LocalCollectionStore functionality."""

import json
from pathlib import Path

import pytest

from revolver.domain.link import Link
from revolver.stores.local import LocalCollectionStore
from tests.fakes import make_note


def test_store_is_initialized_on_first_load(
    local_store: LocalCollectionStore, store_file: Path
) -> None:
    assert not store_file.exists()

    collection = local_store.load()

    assert store_file.exists(), "Store file and its directory should be created"
    assert collection.notes == []
    assert collection.links == []
    assert collection.brand.revolver_wheel is not None
    assert collection.brand.revolver_wheel.style == "ring + central action"
    assert "nested-todo" in collection.brand.revolver_wheel.default_actions

    data = json.loads(store_file.read_text())
    assert set(data) == {"notes", "links", "tags", "analyses", "brand", "updatedAt"}
    assert data["brand"]["revolverWheel"]["defaultActions"][0] == "paragraph"


def test_existing_store_is_not_overwritten(
    local_store: LocalCollectionStore, store_file: Path
) -> None:
    store_file.parent.mkdir(parents=True)
    store_file.write_text(json.dumps({"notes": [{"id": "n1", "title": "Kept"}]}))

    local_store.ensure_store()
    collection = local_store.load()

    assert [note.title for note in collection.notes] == ["Kept"]
    assert collection.notes[0].tags == []
    assert collection.brand.revolver_wheel is None


def test_save_stamps_updated_at_and_writes_camel_case(
    local_store: LocalCollectionStore, store_file: Path
) -> None:
    collection = local_store.load()
    previous = collection.updated_at
    collection.add_note(make_note("n1", "First", tags=["rust"]))
    collection.add_note(make_note("n2", "Second"))
    collection.links.append(Link(id="l1", source_id="n1", target_id="n2"))

    saved = local_store.save(collection)

    assert saved.updated_at >= previous
    data = json.loads(store_file.read_text())
    assert data["links"][0]["sourceId"] == "n1"
    assert data["links"][0]["targetId"] == "n2"
    assert "createdAt" in data["notes"][0]
    assert data["tags"] == ["rust"]
    assert store_file.read_text().startswith("{\n  ")


def test_round_trip_keeps_notes(local_store: LocalCollectionStore) -> None:
    collection = local_store.load()
    note = make_note("n1", "First", text="Some text", tags=["rust"])
    collection.add_note(note)
    local_store.save(collection)

    reloaded = LocalCollectionStore(local_store.filepath).load()

    assert reloaded.get_note("n1") == note
    assert reloaded.notes[0].blocks[0].model_dump()["type"] == "paragraph"


def test_transaction_saves_on_success(local_store: LocalCollectionStore) -> None:
    with local_store.transaction() as collection:
        collection.add_note(make_note("n1", "First"))

    assert [note.id for note in local_store.load().notes] == ["n1"]


def test_transaction_discards_changes_on_error(local_store: LocalCollectionStore) -> None:
    with pytest.raises(RuntimeError):
        with local_store.transaction() as collection:
            collection.add_note(make_note("n1", "First"))
            raise RuntimeError("abort")

    assert local_store.load().notes == []


def test_transactions_can_nest_on_the_same_thread(local_store: LocalCollectionStore) -> None:
    with local_store.transaction() as outer:
        outer.add_note(make_note("n1", "First"))
        assert local_store.load().notes == []

    assert len(local_store.load().notes) == 1
