"""Tag suggestions from a note's own words and the tags used across the collection."""

from collections import Counter

from revolver.domain.note import Note
from revolver.heuristics.tokenizer import MIN_TOKEN_LENGTH, get_note_text, tokenize


def extract_tag_candidates(note: Note, all_notes: list[Note], limit: int = 5) -> list[str]:
    """Suggest tags for a note.

    Words of the note itself and every tag of every note feed one frequency
    count. Words of other notes do not take part, only their tags do.

    Args:
        note: Note to suggest tags for
        all_notes: The whole collection, ``note`` included
        limit: Maximum number of suggestions

    Returns:
        Candidates by frequency descending, ties alphabetically, without the
        tags the note already has
    """
    counts = Counter(tokenize(get_note_text(note)))
    counts.update(str(tag).lower() for entry in all_notes for tag in entry.tags)

    existing = set(note.tags)
    ranked = sorted(
        (token for token in counts if len(token) >= MIN_TOKEN_LENGTH),
        key=lambda token: (-counts[token], token),
    )
    return [token for token in ranked if token not in existing][:limit]
