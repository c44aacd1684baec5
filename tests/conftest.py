from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from revolver.api import create_app
from revolver.domain.collection import Collection
from revolver.domain.note import Note
from revolver.heuristics.provider import HeuristicProvider
from revolver.services.notebook import Notebook
from revolver.stores.local import LocalCollectionStore
from tests.fakes import InMemoryCollectionStore, make_note


@pytest.fixture
def rust_note() -> Note:
    return make_note("note-a", "Rust ownership", tags=["rust"])


@pytest.fixture
def borrow_note() -> Note:
    return make_note(
        "note-b",
        "Borrow checker basics",
        text="The borrow checker enforces ownership rules at compile time.",
        tags=["memory", "rust"],
        minutes=1,
    )


@pytest.fixture
def cooking_note() -> Note:
    return make_note(
        "note-c",
        "Sourdough starter",
        text="Feed the starter with flour and water every day.",
        tags=["baking"],
        minutes=2,
    )


@pytest.fixture
def test_notes(rust_note: Note, borrow_note: Note, cooking_note: Note) -> list[Note]:
    return [rust_note, borrow_note, cooking_note]


@pytest.fixture
def test_collection(test_notes: list[Note]) -> Collection:
    collection = Collection.initial()
    for note in test_notes:
        collection.add_note(note)
    return collection


@pytest.fixture
def fake_store(test_collection: Collection) -> InMemoryCollectionStore:
    return InMemoryCollectionStore(test_collection)


@pytest.fixture
def provider() -> HeuristicProvider:
    return HeuristicProvider()


@pytest.fixture
def notebook(fake_store: InMemoryCollectionStore, provider: HeuristicProvider) -> Notebook:
    return Notebook(store=fake_store, provider=provider)


@pytest.fixture
def test_client(notebook: Notebook) -> TestClient:
    """Create test client over the in-memory store."""
    return TestClient(create_app(notebook=notebook))


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "store.json"


@pytest.fixture
def local_store(store_file: Path) -> LocalCollectionStore:
    return LocalCollectionStore(store_file)
