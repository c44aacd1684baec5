"""Errors raised by the notebook service before any state is mutated."""


class RevolverError(Exception):
    """Base class for domain errors."""


class NoteNotFoundError(RevolverError, KeyError):
    def __init__(self, note_id: str) -> None:
        super().__init__(note_id)
        self.note_id = note_id

    def __str__(self) -> str:
        return f"Note {self.note_id} not found"


class InvalidLinkError(RevolverError, ValueError):
    """A link is missing an endpoint or points at a note that does not exist."""


class DuplicateLinkError(RevolverError, ValueError):
    def __init__(self, source_id: str, target_id: str) -> None:
        super().__init__(f"Link {source_id} -> {target_id} already exists")
        self.source_id = source_id
        self.target_id = target_id


class InvalidQueryError(RevolverError, ValueError):
    """A search was requested without a query."""
