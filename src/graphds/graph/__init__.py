"""
Graph subsystem for graphds.

Defines the directed graph store and the algorithms and serializer that
operate on it:
- node/edge storage with weights and insertion-ordered iteration
- depth-first search, topological sort and lowest common ancestors
- ``{nodes, links}`` serialization
"""

from graphds.graph.errors import (
    GraphError,
    InvalidNodeError,
    NodeNotFoundError,
    EdgeNotFoundError,
    NoPathError,
)
from graphds.graph.graph_schema import Node, Edge
from graphds.graph.graph_query import GraphQueryEngine, PathResult
from graphds.graph.graph_serializer import GraphSerializer
from graphds.graph.graph_store import Graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphQueryEngine",
    "GraphSerializer",
    "PathResult",
    "GraphError",
    "InvalidNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "NoPathError",
]
