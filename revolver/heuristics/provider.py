"""The suggestion provider behind note analysis."""

from revolver.domain.analysis import HEURISTIC_MODE, AIProvider, Analysis, Suggestions
from revolver.domain.note import Note
from revolver.heuristics.relatedness import score_related_notes
from revolver.heuristics.tagging import extract_tag_candidates


class HeuristicProvider:
    """Local stand-in for an AI tagging service.

    The provider label only decides what is stamped on the result; every label
    runs the same heuristic.
    """

    def __init__(
        self,
        provider: AIProvider = AIProvider.CLAUDE,
        *,
        max_tags: int = 5,
        max_related: int = 5,
    ) -> None:
        self.provider = AIProvider(provider)
        self.max_tags = max_tags
        self.max_related = max_related

    def suggest(self, note: Note, all_notes: list[Note]) -> Suggestions:
        return Suggestions(
            provider=self.provider,
            suggested_tags=extract_tag_candidates(note, all_notes, limit=self.max_tags),
            related_notes=score_related_notes(note, all_notes, limit=self.max_related),
            mode=HEURISTIC_MODE,
        )


def build_analysis(note: Note, all_notes: list[Note], provider: HeuristicProvider) -> Analysis:
    """Analyze a note against the whole collection.

    Returns:
        A completed Analysis with a fresh id and timestamp, ready to be upserted
    """
    suggestions = provider.suggest(note, all_notes)
    return Analysis(
        note_id=note.id,
        provider=suggestions.provider,
        suggested_tags=suggestions.suggested_tags,
        related_notes=suggestions.related_notes,
        mode=suggestions.mode,
    )
