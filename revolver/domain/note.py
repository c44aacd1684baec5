"""Note domain models."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from revolver.domain.base import CamelModel, format_timestamp, new_id, utc_now

DEFAULT_TITLE = "Untitled note"


def normalize_tags(tags: list[Any] | None) -> list[str]:
    """Trim, lowercase, drop empties, dedupe and sort a list of tags."""
    cleaned = {str(tag if tag is not None else "").strip().lower() for tag in tags or []}
    cleaned.discard("")
    return sorted(cleaned)


class Block(CamelModel):
    """A content block. Only ``text`` is read by the heuristics; any other keys
    (``type``, ``checked``, children, ...) are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Note(CamelModel):
    """Represents a note.

    Attributes:
        id: Unique identifier (uuid4)
        title: Note title, "Untitled note" when left empty
        blocks: Ordered content blocks
        tags: Normalized tags (lowercase, deduplicated, sorted)
        metadata: Free-form metadata, ``editedAt`` is stamped on every write
        created_at: Creation timestamp
        updated_at: Last edit timestamp
    """

    id: str = Field(default_factory=new_id)
    title: str = ""
    blocks: list[Block] = []
    tags: list[str] = []
    metadata: dict[str, Any] = {}
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class NoteInput(CamelModel):
    """Body accepted when creating or updating a note.

    Fields left unset keep the stored value on update. Blocks and tags sent as
    null (or anything but a list) are reset to empty lists.
    """

    title: str | None = None
    blocks: list[Block] | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @field_validator("blocks", mode="before")
    @classmethod
    def _blocks_as_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_strings(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return ["" if tag is None else str(tag) for tag in value]


def apply_note_input(note: Note | None, data: NoteInput) -> Note:
    """Build the next version of ``note`` (or a new note) from an input body.

    Title and tags are re-normalized, metadata is merged key-wise and stamped
    with ``editedAt``.
    """
    now = utc_now()
    changes = data.model_dump(exclude_unset=True)
    base = note or Note(created_at=now)

    title = changes.get("title", base.title) or ""
    tags = data.tags if "tags" in data.model_fields_set else base.tags
    blocks = data.blocks if "blocks" in data.model_fields_set else base.blocks
    metadata = {**base.metadata, **(changes.get("metadata") or {})}
    metadata["editedAt"] = format_timestamp(now)

    return base.model_copy(
        update={
            "title": title.strip() or DEFAULT_TITLE,
            "blocks": blocks,
            "tags": normalize_tags(tags),
            "metadata": metadata,
            "updated_at": now,
        }
    )
