from revolver.domain.analysis import AIProvider, Analysis, RelatedNote
from revolver.domain.collection import Collection
from revolver.domain.link import Link
from revolver.graph.builder import KnowledgeGraphBuilder
from tests.fakes import make_note


def _collection_with_shared_tag(count: int) -> Collection:
    collection = Collection.initial()
    for index in range(count):
        collection.add_note(make_note(f"n{index}", f"Note {index}", tags=["x"]))
    return collection


def test_shared_tag_has_one_node_and_one_edge_per_note() -> None:
    collection = _collection_with_shared_tag(4)

    graph = KnowledgeGraphBuilder().build_graph(collection)

    tag_nodes = [node for node in graph.nodes if node.type == "tag"]
    assert [node.id for node in tag_nodes] == ["tag:x"]
    assert tag_nodes[0].label == "x"

    membership = [edge for edge in graph.edges if edge.target == "tag:x"]
    assert len(membership) == 4
    assert {edge.source for edge in membership} == {"n0", "n1", "n2", "n3"}
    assert all(edge.type == "tag-relationship" for edge in membership)
    assert membership[0].id == "edge:n0:tag:x"


def test_manual_link_adds_exactly_one_edge() -> None:
    collection = _collection_with_shared_tag(3)
    before = KnowledgeGraphBuilder().build_graph(collection)

    collection.links.append(Link(id="link-1", source_id="n0", target_id="n1"))
    after = KnowledgeGraphBuilder().build_graph(collection)

    assert len(after.edges) == len(before.edges) + 1
    link_edges = [edge for edge in after.edges if edge.id == "link-1"]
    assert len(link_edges) == 1
    assert (link_edges[0].source, link_edges[0].target, link_edges[0].type) == (
        "n0",
        "n1",
        "manual",
    )
    assert after.edges[0].id == "link-1"


def test_link_without_type_gets_default_type() -> None:
    collection = _collection_with_shared_tag(2)
    collection.links.append(Link(id="link-1", source_id="n0", target_id="n1", type=""))

    graph = KnowledgeGraphBuilder().build_graph(collection)

    assert graph.edges[0].type == "manual-link"


def test_note_nodes_carry_label_tags_and_timestamp() -> None:
    collection = _collection_with_shared_tag(1)
    note = collection.notes[0]

    graph = KnowledgeGraphBuilder().build_graph(collection)
    data = graph.to_json_dict()

    note_node = data["nodes"][0]
    assert note_node["id"] == note.id
    assert note_node["label"] == "Note 0"
    assert note_node["type"] == "note"
    assert note_node["tags"] == ["x"]
    assert "updatedAt" in note_node

    tag_node = data["nodes"][1]
    assert tag_node == {"id": "tag:x", "label": "x", "type": "tag"}
    assert "score" not in data["edges"][0]


def test_ai_edges_are_kept_next_to_manual_links() -> None:
    collection = _collection_with_shared_tag(2)
    collection.links.append(Link(id="link-1", source_id="n0", target_id="n1"))
    collection.upsert_analysis(
        Analysis(
            note_id="n0",
            provider=AIProvider.CLAUDE,
            related_notes=[RelatedNote(id="n1", title="Note 1", score=3, reasons=["note"])],
        )
    )

    graph = KnowledgeGraphBuilder().build_graph(collection)

    between = [edge for edge in graph.edges if (edge.source, edge.target) == ("n0", "n1")]
    assert sorted(edge.type for edge in between) == ["ai-related", "manual"]
    ai_edge = next(edge for edge in between if edge.type == "ai-related")
    assert ai_edge.id == "edge:ai:n0:n1"
    assert ai_edge.score == 3


def test_empty_collection_gives_empty_graph() -> None:
    graph = KnowledgeGraphBuilder().build_graph(Collection.initial())

    assert graph.nodes == []
    assert graph.edges == []
