from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """
    Base class for graph engine errors.
    """


class InvalidNodeError(GraphError, ValueError):
    """
    Raised for node-like values or serialized payloads that cannot be read.
    """


class NodeNotFoundError(GraphError, KeyError):
    def __init__(self, node_id: Hashable) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"node {self.node_id!r} not found"


class EdgeNotFoundError(GraphError, KeyError):
    """
    Raised when reading or writing the weight of an edge that does not exist.
    """

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__((source, target))
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"edge {self.source!r} -> {self.target!r} not found"


class NoPathError(GraphError):
    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(f"no path from {source!r} to {target!r}")
        self.source = source
        self.target = target
