from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Mapping, Optional

from graphds.graph.errors import InvalidNodeError


@dataclass(frozen=True)
class Node:
    """
    Identified entity in the graph.

    The identifier is the only field the engine interprets; attributes are
    kept verbatim for the caller.
    """

    id: Hashable
    attributes: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def coerce(node_like: Any) -> "Node":
        """
        Build a Node from a node-like value.

        Accepts a Node, a mapping carrying an ``"id"`` key (the whole
        mapping minus ``"id"`` becomes the attribute record), or a bare
        identifier.
        """
        if isinstance(node_like, Node):
            return node_like

        if isinstance(node_like, Mapping):
            if "id" not in node_like:
                raise InvalidNodeError(
                    f"node mapping has no 'id' field: {dict(node_like)!r}"
                )
            return Node(
                id=node_like["id"],
                attributes={k: v for k, v in node_like.items() if k != "id"},
            )

        return Node(id=node_like)

    def to_dict(self) -> Dict[str, Any]:
        return {**self.attributes, "id": self.id}


def node_id(node_like: Any) -> Hashable:
    """
    Identifier of a node-like value without building a Node.
    """
    if isinstance(node_like, Node):
        return node_like.id
    if isinstance(node_like, Mapping):
        if "id" not in node_like:
            raise InvalidNodeError(
                f"node mapping has no 'id' field: {dict(node_like)!r}"
            )
        return node_like["id"]
    return node_like


@dataclass(frozen=True)
class Edge:
    """
    Directed, optionally weighted relation between two node identifiers.

    ``weight`` is None when no weight was ever set explicitly.
    """

    source: Hashable
    target: Hashable
    weight: Optional[float] = None

    def to_dict(self, *, default_weight: Optional[float] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"source": self.source, "target": self.target}
        if self.weight is not None:
            payload["weight"] = self.weight
        elif default_weight is not None:
            payload["weight"] = default_weight
        return payload
