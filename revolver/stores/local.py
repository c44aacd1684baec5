import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from revolver.domain.base import utc_now
from revolver.domain.collection import Collection
from revolver.stores.base import CollectionStore


class LocalCollectionStore(CollectionStore):
    """Collection store backed by a single JSON file, rewritten on every save."""

    def __init__(self, filepath: str | Path) -> None:
        """Initialize LocalCollectionStore.

        Args:
            filepath: Path to the store file. Created with an empty collection
                     (and parent directories) on first use.
        """
        self._filepath = Path(filepath)
        self._lock = threading.RLock()

    @property
    def filepath(self) -> Path:
        return self._filepath

    def ensure_store(self) -> None:
        """Write the initial collection if the file does not exist yet."""
        with self._lock:
            if self._filepath.exists():
                return
            logger.info(f"Initializing collection store at {self._filepath}")
            self._filepath.parent.mkdir(parents=True, exist_ok=True)
            self._write(Collection.initial())

    def load(self) -> Collection:
        """Load the collection from the JSON file."""
        with self._lock:
            self.ensure_store()
            with open(self._filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Collection.model_validate(data)

    def save(self, collection: Collection) -> Collection:
        """Save the collection to the JSON file.

        Returns:
            The saved collection, with updated_at set to now
        """
        with self._lock:
            stamped = collection.model_copy(update={"updated_at": utc_now()})
            self._filepath.parent.mkdir(parents=True, exist_ok=True)
            self._write(stamped)
            return stamped

    @contextmanager
    def transaction(self) -> Iterator[Collection]:
        with self._lock:
            collection = self.load()
            yield collection
            self.save(collection)

    def _write(self, collection: Collection) -> None:
        with open(self._filepath, "w", encoding="utf-8") as f:
            json.dump(collection.to_json_dict(), f, indent=2)
