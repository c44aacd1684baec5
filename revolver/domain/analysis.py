"""Analysis domain models."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import Field

from revolver.domain.base import CamelModel, new_id, utc_now

HEURISTIC_MODE = "context-driven-local-heuristic"


class AIProvider(str, Enum):
    """Label stamped on analyses. Both values run the same local heuristic."""

    CLAUDE = "claude"
    GEMINI = "gemini"


class RelatedNote(CamelModel):
    """A note scored as related to the analyzed note.

    ``reasons`` lists overlapping tokens and shared tags; it is informational
    and plays no part in the score.
    """

    id: str
    title: str
    score: int
    reasons: list[str] = []


class Suggestions(CamelModel):
    provider: AIProvider
    suggested_tags: list[str] = []
    related_notes: list[RelatedNote] = []
    mode: str = HEURISTIC_MODE


class Analysis(CamelModel):
    """The stored result of analyzing one note. At most one exists per note id."""

    id: str = Field(default_factory=new_id)
    note_id: str
    provider: AIProvider
    suggested_tags: list[str] = []
    related_notes: list[RelatedNote] = []
    mode: str = HEURISTIC_MODE
    status: Literal["completed"] = "completed"
    created_at: datetime = Field(default_factory=utc_now)
