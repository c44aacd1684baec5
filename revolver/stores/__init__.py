from revolver.stores.base import CollectionStore
from revolver.stores.local import LocalCollectionStore

__all__ = ["CollectionStore", "LocalCollectionStore"]
