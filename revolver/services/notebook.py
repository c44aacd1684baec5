"""Notebook service: note, link and analysis operations over a collection store."""

from loguru import logger

from revolver.domain.analysis import Analysis
from revolver.domain.base import CamelModel
from revolver.domain.collection import Brand, Collection
from revolver.domain.graph import Graph
from revolver.domain.link import Link, LinkInput
from revolver.domain.note import Note, NoteInput, apply_note_input
from revolver.errors import (
    DuplicateLinkError,
    InvalidLinkError,
    InvalidQueryError,
    NoteNotFoundError,
)
from revolver.graph.builder import KnowledgeGraphBuilder
from revolver.heuristics.provider import HeuristicProvider, build_analysis
from revolver.heuristics.tokenizer import get_note_text
from revolver.stores.base import CollectionStore


class SearchResults(CamelModel):
    exact_matches: list[Note] = []
    context_matches: list[Note] = []
    total: int = 0


class Notebook:
    """Runs every operation against the store.

    Each mutating operation is one store transaction, so validation errors are
    raised before anything is saved.
    """

    def __init__(
        self,
        *,
        store: CollectionStore,
        provider: HeuristicProvider,
        graph_builder: KnowledgeGraphBuilder | None = None,
    ):
        """Initialize the notebook.

        Args:
            store: Collection store to read from and write to
            provider: Suggestion provider used by analyze
            graph_builder: Builder for the graph view
        """
        self.store = store
        self.provider = provider
        self.graph_builder = graph_builder or KnowledgeGraphBuilder()

    def get_collection(self) -> Collection:
        return self.store.load()

    def get_brand(self) -> Brand:
        return self.store.load().brand

    def list_notes(self) -> list[Note]:
        """All notes, most recently updated first."""
        notes = self.store.load().notes
        return sorted(notes, key=lambda note: note.updated_at, reverse=True)

    def get_note(self, note_id: str) -> Note:
        note = self.store.load().get_note(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return note

    def create_note(self, data: NoteInput) -> Note:
        note = apply_note_input(None, data)
        with self.store.transaction() as collection:
            collection.add_note(note)
        logger.info(f"Created note {note.id}")
        return note

    def update_note(self, note_id: str, data: NoteInput) -> Note:
        """Merge the given fields over the stored note."""
        with self.store.transaction() as collection:
            existing = collection.get_note(note_id)
            if existing is None:
                raise NoteNotFoundError(note_id)
            updated = apply_note_input(existing, data)
            collection.replace_note(updated)
        logger.info(f"Updated note {note_id}")
        return updated

    def delete_note(self, note_id: str) -> str:
        """Delete a note along with its links and analysis."""
        with self.store.transaction() as collection:
            if collection.remove_note(note_id) is None:
                raise NoteNotFoundError(note_id)
        logger.info(f"Deleted note {note_id}")
        return note_id

    def search(self, query: str) -> SearchResults:
        """Case-insensitive search.

        Notes whose title equals the query are exact matches. Other notes whose
        title, block text or tags contain the query are context matches.
        """
        needle = (query or "").strip().lower()
        if not needle:
            raise InvalidQueryError('Query parameter "q" is required.')

        exact_matches = []
        context_matches = []
        for note in self.store.load().notes:
            if (note.title or "").lower() == needle:
                exact_matches.append(note)
            elif needle in get_note_text(note).lower():
                context_matches.append(note)

        return SearchResults(
            exact_matches=exact_matches,
            context_matches=context_matches,
            total=len(exact_matches) + len(context_matches),
        )

    def list_links(self) -> list[Link]:
        return self.store.load().links

    def create_link(self, data: LinkInput) -> Link:
        if not data.source_id or not data.target_id:
            raise InvalidLinkError("sourceId and targetId are required.")

        with self.store.transaction() as collection:
            if (
                collection.get_note(data.source_id) is None
                or collection.get_note(data.target_id) is None
            ):
                raise InvalidLinkError("Both notes must exist before creating a link.")
            if collection.has_link(data.source_id, data.target_id):
                raise DuplicateLinkError(data.source_id, data.target_id)

            link = Link(source_id=data.source_id, target_id=data.target_id, type=data.type)
            collection.links.append(link)
        logger.info(f"Linked {link.source_id} -> {link.target_id} ({link.type})")
        return link

    def analyze(self, note_id: str) -> Analysis:
        """Analyze a note against the whole collection and store the result.

        Replaces any earlier analysis of the same note.
        """
        with self.store.transaction() as collection:
            note = collection.get_note(note_id)
            if note is None:
                raise NoteNotFoundError(note_id)
            analysis = build_analysis(note, collection.notes, self.provider)
            collection.upsert_analysis(analysis)
        logger.info(
            f"Analyzed note {note_id} with {analysis.provider.value}: "
            f"{len(analysis.suggested_tags)} tags, {len(analysis.related_notes)} related notes"
        )
        return analysis

    def build_graph(self) -> Graph:
        return self.graph_builder.build_graph(self.store.load())
