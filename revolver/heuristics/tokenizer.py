"""Text normalization shared by the scoring and tagging heuristics."""

import re

from revolver.domain.note import Note

NON_WORD_PATTERN = re.compile(r"[^a-z0-9\s]")
MIN_TOKEN_LENGTH = 3


def tokenize(text: str | None) -> list[str]:
    """Split text into lowercase alphanumeric words longer than two characters.

    Order and duplicates are preserved since downstream counts depend on them.

    Args:
        text: Any text, None is treated as empty

    Returns:
        List of tokens
    """
    cleaned = NON_WORD_PATTERN.sub(" ", (text or "").lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def get_note_text(note: Note) -> str:
    """Project a note onto one searchable string: title, block text, then tags."""
    block_text = " ".join(block.text or "" for block in note.blocks)
    return f"{note.title or ''} {block_text} {' '.join(note.tags)}".strip()
