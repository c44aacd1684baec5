"""Knowledge graph assembly over the stored collection."""

from revolver.graph.builder import KnowledgeGraphBuilder

__all__ = ["KnowledgeGraphBuilder"]
