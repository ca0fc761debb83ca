from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

from graphds.graph.errors import InvalidNodeError
from graphds.graph.graph_schema import Node, node_id
from graphds.utils.json_safe import to_json_safe

if TYPE_CHECKING:
    from graphds.graph.graph_store import Graph

logger = logging.getLogger("graphds.serializer")


class GraphSerializer:
    """
    Bulk export/import between a Graph and the flat ``{nodes, links}``
    exchange structure.

    The structure only holds plain lists, dicts and the caller's own
    identifier and attribute values, so it can be written with any
    JSON-style encoder.
    """

    def __init__(self, store: "Graph") -> None:
        self.store = store

    def serialize(self) -> Dict[str, List[Dict[str, Any]]]:
        config = self.store.config
        default_weight = (
            config.default_edge_weight if config.serialize_default_weights else None
        )

        return {
            "nodes": [node.to_dict() for node in self.store.get_nodes()],
            "links": [
                edge.to_dict(default_weight=default_weight)
                for edge in self.store.edges()
            ],
        }

    def deserialize(self, data: Mapping[str, Any]) -> None:
        """
        Replace every node and edge of the graph with those in ``data``.

        The payload is fully read before the graph is touched, so a
        malformed payload leaves the graph unchanged.
        """
        nodes = self._parse_nodes(data.get("nodes") or [])
        links = self._parse_links(data.get("links") or [])

        self.store.clear()
        for node in nodes:
            self.store.add_node(node)
        for source, target, weight in links:
            self.store.add_edge(source, target, weight)

        logger.info(
            "Deserialized graph with %d nodes and %d links",
            self.store.node_count(),
            self.store.edge_count(),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = self.store.config.json_indent
        return json.dumps(to_json_safe(self.serialize()), indent=indent)

    def from_json(self, text: str) -> None:
        payload = json.loads(text)
        if not isinstance(payload, dict):
            raise InvalidNodeError("serialized graph must be a JSON object")
        self.deserialize(payload)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_nodes(entries: Any) -> List[Node]:
        if not isinstance(entries, (list, tuple)):
            raise InvalidNodeError("'nodes' must be a list")
        return [Node.coerce(entry) for entry in entries]

    @staticmethod
    def _parse_links(
        entries: Any,
    ) -> List[Tuple[Any, Any, Optional[float]]]:
        if not isinstance(entries, (list, tuple)):
            raise InvalidNodeError("'links' must be a list")

        links = []
        for entry in entries:
            if (
                not isinstance(entry, Mapping)
                or "source" not in entry
                or "target" not in entry
            ):
                raise InvalidNodeError(f"link needs 'source' and 'target': {entry!r}")
            # endpoints stay node-like so implicit creation keeps their attributes
            node_id(entry["source"])
            node_id(entry["target"])
            links.append((entry["source"], entry["target"], entry.get("weight")))
        return links
