"""Building the knowledge graph served by ``/graph``."""

from revolver.domain.collection import Collection
from revolver.domain.graph import Graph, GraphEdge, GraphNode

TAG_PREFIX = "tag:"
DEFAULT_LINK_TYPE = "manual-link"


def tag_node_id(tag: str) -> str:
    return f"{TAG_PREFIX}{tag}"


class KnowledgeGraphBuilder:
    """Projects a collection onto nodes (notes, tags) and edges.

    Edges come from three sources and are not merged: manual links, tag
    membership and the related notes of stored analyses. A pair of notes that
    is both linked and AI-related therefore has two edges.
    """

    def build_graph(self, collection: Collection) -> Graph:
        """Build the graph for a collection.

        Args:
            collection: The stored collection

        Returns:
            Graph with note nodes followed by tag nodes, and link, membership
            then AI edges
        """
        nodes = self._build_note_nodes(collection) + self._build_tag_nodes(collection)
        edges = (
            self._build_link_edges(collection)
            + self._build_tag_edges(collection)
            + self._build_ai_edges(collection)
        )
        return Graph(nodes=nodes, edges=edges)

    def _build_note_nodes(self, collection: Collection) -> list[GraphNode]:
        return [
            GraphNode(
                id=note.id,
                label=note.title,
                type="note",
                tags=list(note.tags),
                updated_at=note.updated_at,
            )
            for note in collection.notes
        ]

    def _build_tag_nodes(self, collection: Collection) -> list[GraphNode]:
        """One node per distinct tag of the registry."""
        return [
            GraphNode(id=tag_node_id(tag), label=tag, type="tag")
            for tag in sorted(set(collection.tags))
            if tag
        ]

    def _build_link_edges(self, collection: Collection) -> list[GraphEdge]:
        return [
            GraphEdge(
                id=link.id,
                source=link.source_id,
                target=link.target_id,
                type=link.type or DEFAULT_LINK_TYPE,
            )
            for link in collection.links
        ]

    def _build_tag_edges(self, collection: Collection) -> list[GraphEdge]:
        edges = []
        for note in collection.notes:
            for tag in note.tags:
                edges.append(
                    GraphEdge(
                        id=f"edge:{note.id}:{tag_node_id(tag)}",
                        source=note.id,
                        target=tag_node_id(tag),
                        type="tag-relationship",
                    )
                )
        return edges

    def _build_ai_edges(self, collection: Collection) -> list[GraphEdge]:
        edges = []
        for analysis in collection.analyses:
            for related in analysis.related_notes:
                edges.append(
                    GraphEdge(
                        id=f"edge:ai:{analysis.note_id}:{related.id}",
                        source=analysis.note_id,
                        target=related.id,
                        type="ai-related",
                        score=related.score,
                    )
                )
        return edges
