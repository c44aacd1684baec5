"""Local heuristics for related-note scoring and tag suggestions."""

from revolver.heuristics.provider import HeuristicProvider, build_analysis
from revolver.heuristics.relatedness import score_related_notes
from revolver.heuristics.tagging import extract_tag_candidates
from revolver.heuristics.tokenizer import get_note_text, tokenize

__all__ = [
    "HeuristicProvider",
    "build_analysis",
    "extract_tag_candidates",
    "get_note_text",
    "score_related_notes",
    "tokenize",
]
