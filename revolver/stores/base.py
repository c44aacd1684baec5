from typing import ContextManager, Protocol

from revolver.domain.collection import Collection


class CollectionStore(Protocol):
    def load(self) -> Collection:
        """Load the whole collection."""
        ...

    def save(self, collection: Collection) -> Collection:
        """Overwrite the stored collection, stamping its updated_at."""
        ...

    def transaction(self) -> ContextManager[Collection]:
        """Load-mutate-save under the store's writer lock.

        The collection yielded is saved when the block exits cleanly and
        discarded when it raises.
        """
        ...
