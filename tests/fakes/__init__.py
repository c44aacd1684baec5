from tests.fakes.factories import make_note
from tests.fakes.fake_store import InMemoryCollectionStore

__all__ = ["InMemoryCollectionStore", "make_note"]
