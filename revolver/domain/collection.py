"""The collection document: every note, link, tag and analysis in one place."""

from datetime import datetime

from pydantic import Field

from revolver.domain.analysis import Analysis
from revolver.domain.base import CamelModel, utc_now
from revolver.domain.link import Link
from revolver.domain.note import Note

DEFAULT_WHEEL_ACTIONS = [
    "paragraph",
    "heading",
    "quote",
    "code",
    "bullet",
    "numbered",
    "todo",
    "nested-todo",
]


class RevolverWheel(CamelModel):
    style: str = "ring + central action"
    default_actions: list[str] = Field(default_factory=lambda: list(DEFAULT_WHEEL_ACTIONS))


class Brand(CamelModel):
    revolver_wheel: RevolverWheel | None = None


class Collection(CamelModel):
    """Represents the complete stored document.

    Attributes:
        notes: All notes, in insertion order
        links: Manual links between notes
        tags: Derived registry, the sorted union of every note's tags
        analyses: At most one analysis per note id
        brand: Static metadata written when the store is initialized
        updated_at: Stamped by the store on every save
    """

    notes: list[Note] = []
    links: list[Link] = []
    tags: list[str] = []
    analyses: list[Analysis] = []
    brand: Brand = Field(default_factory=Brand)
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def initial(cls) -> "Collection":
        """An empty collection carrying the default brand block."""
        return cls(brand=Brand(revolver_wheel=RevolverWheel()))

    def get_note(self, note_id: str) -> Note | None:
        for note in self.notes:
            if note.id == note_id:
                return note
        return None

    def refresh_tags(self) -> None:
        """Recompute the tag registry from the notes."""
        self.tags = sorted({tag for note in self.notes for tag in note.tags if tag})

    def add_note(self, note: Note) -> None:
        self.notes.append(note)
        self.refresh_tags()

    def replace_note(self, note: Note) -> None:
        """Swap in a new version of an existing note, keeping its position."""
        for index, existing in enumerate(self.notes):
            if existing.id == note.id:
                self.notes[index] = note
                break
        else:
            raise KeyError(note.id)
        self.refresh_tags()

    def remove_note(self, note_id: str) -> Note | None:
        """Delete a note with its links and analysis.

        Returns:
            The removed note, or None when no note has that id
        """
        note = self.get_note(note_id)
        if note is None:
            return None

        self.notes = [entry for entry in self.notes if entry.id != note_id]
        self.links = [
            link for link in self.links if note_id not in (link.source_id, link.target_id)
        ]
        self.analyses = [analysis for analysis in self.analyses if analysis.note_id != note_id]
        self.refresh_tags()
        return note

    def has_link(self, source_id: str, target_id: str) -> bool:
        return any(
            link.source_id == source_id and link.target_id == target_id for link in self.links
        )

    def upsert_analysis(self, analysis: Analysis) -> None:
        """Replace the analysis for the same note, or append a first one."""
        for index, existing in enumerate(self.analyses):
            if existing.note_id == analysis.note_id:
                self.analyses[index] = analysis
                return
        self.analyses.append(analysis)
