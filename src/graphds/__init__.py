"""
graphds
=======

An in-memory directed graph for callers that bring their own node
identity and attributes.

Core idea:
- Nodes are keyed by their ``id``; everything else rides along untouched.

Public API:
- Graph
- GraphConfig
- Node / Edge
"""

from graphds.config import GraphConfig, load_graph_config
from graphds.graph import (
    Graph,
    Node,
    Edge,
    PathResult,
    GraphError,
    InvalidNodeError,
    NodeNotFoundError,
    EdgeNotFoundError,
    NoPathError,
)

__all__ = [
    "Graph",
    "GraphConfig",
    "load_graph_config",
    "Node",
    "Edge",
    "PathResult",
    "GraphError",
    "InvalidNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "NoPathError",
]

__version__ = "0.1.0"
