"""Graph view models. Graphs are derived on request and never persisted."""

from datetime import datetime
from typing import Literal

from revolver.domain.base import CamelModel


class GraphNode(CamelModel):
    id: str
    label: str
    type: Literal["note", "tag"]
    tags: list[str] | None = None  # note nodes only
    updated_at: datetime | None = None  # note nodes only


class GraphEdge(CamelModel):
    id: str
    source: str
    target: str
    type: str
    score: int | None = None  # ai-related edges only


class Graph(CamelModel):
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []

    def to_json_dict(self, **kwargs) -> dict:
        kwargs.setdefault("exclude_none", True)
        return super().to_json_dict(**kwargs)
