"""Scoring of how related other notes are to a target note."""

from revolver.domain.analysis import RelatedNote
from revolver.domain.note import Note
from revolver.heuristics.tokenizer import get_note_text, tokenize

TITLE_MATCH_BONUS = 2
MAX_REASON_TOKENS = 6


def score_related_notes(target: Note, notes: list[Note], limit: int = 5) -> list[RelatedNote]:
    """Rank the notes sharing words, title or tags with the target.

    The score of a candidate is the number of its tokens (duplicates included)
    found in the target's text, plus 2 for a case-insensitive title match, plus
    the number of shared tags. Notes scoring 0 are left out.

    Args:
        target: Note to find relatives for, skipped if present in ``notes``
        notes: Candidate notes
        limit: Maximum number of results

    Returns:
        Related notes by score descending, ties by note id ascending
    """
    target_tokens = set(tokenize(get_note_text(target)))
    target_title = (target.title or "").lower()
    target_tags = set(target.tags)

    related = []
    for note in notes:
        if note.id == target.id:
            continue

        overlap = [token for token in tokenize(get_note_text(note)) if token in target_tokens]
        title_bonus = TITLE_MATCH_BONUS if (note.title or "").lower() == target_title else 0
        shared_tags = [tag for tag in note.tags if tag in target_tags]
        score = len(overlap) + title_bonus + len(shared_tags)
        if score <= 0:
            continue

        related.append(
            RelatedNote(
                id=note.id,
                title=note.title,
                score=score,
                reasons=sorted(set(overlap[:MAX_REASON_TOKENS]) | set(shared_tags)),
            )
        )

    related.sort(key=lambda entry: (-entry.score, entry.id))
    return related[:limit]
