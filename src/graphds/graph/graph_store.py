from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional

import networkx as nx

from graphds.config.settings import GraphConfig
from graphds.graph.errors import EdgeNotFoundError, NodeNotFoundError
from graphds.graph.graph_query import GraphQueryEngine, PathResult
from graphds.graph.graph_schema import Edge, Node, node_id
from graphds.graph.graph_serializer import GraphSerializer

logger = logging.getLogger("graphds.store")


class Graph:
    """
    Authoritative in-memory directed graph.

    Nodes and edges live in a networkx DiGraph, which keeps node and
    successor order as insertion order. Each node carries its Node record
    under ``"data"``; each edge carries an ``"order"`` stamp and, when set
    explicitly, a ``"weight"``.

    Every mutating call returns the same instance so calls can be chained.
    """

    def __init__(
        self,
        serialized: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.config = config or GraphConfig()
        self._graph = nx.DiGraph()
        self._edge_counter = 0

        if serialized is not None:
            self.deserialize(serialized)

    # -------------------- Nodes --------------------

    def add_node(self, node_like: Any) -> "Graph":
        node = Node.coerce(node_like)
        self._graph.add_node(node.id, data=node)
        return self

    def remove_node(self, node_like: Any) -> "Graph":
        nid = node_id(node_like)
        if nid in self._graph:
            self._graph.remove_node(nid)
        return self

    def nodes(self) -> List[Hashable]:
        return list(self._graph.nodes)

    def has_node(self, node_like: Any) -> bool:
        return node_id(node_like) in self._graph

    def get_node(self, node_like: Any) -> Node:
        nid = node_id(node_like)
        if nid not in self._graph:
            raise NodeNotFoundError(nid)
        return self._graph.nodes[nid]["data"]

    def get_nodes(self) -> List[Node]:
        return [data["data"] for _, data in self._graph.nodes(data=True)]

    # -------------------- Edges --------------------

    def add_edge(
        self,
        source: Any,
        target: Any,
        weight: Optional[float] = None,
    ) -> "Graph":
        u = self._ensure_node(source)
        v = self._ensure_node(target)

        if self._graph.has_edge(u, v):
            if weight is not None:
                self._graph.edges[u, v]["weight"] = weight
            return self

        attrs: Dict[str, Any] = {"order": self._edge_counter}
        if weight is not None:
            attrs["weight"] = weight
        self._edge_counter += 1
        self._graph.add_edge(u, v, **attrs)
        return self

    def remove_edge(self, source: Any, target: Any) -> "Graph":
        u, v = node_id(source), node_id(target)
        if self._graph.has_edge(u, v):
            self._graph.remove_edge(u, v)
        return self

    def has_edge(self, source: Any, target: Any) -> bool:
        return self._graph.has_edge(node_id(source), node_id(target))

    def edges(self) -> List[Edge]:
        """
        All edges in the order they were first added.
        """
        ordered = sorted(
            self._graph.edges(data=True),
            key=lambda item: item[2]["order"],
        )
        return [Edge(source=u, target=v, weight=data.get("weight")) for u, v, data in ordered]

    def get_edge_weight(self, source: Any, target: Any) -> float:
        """
        Weight of an existing edge, or the configured default weight when
        none was set. Raises EdgeNotFoundError if the edge does not exist.
        """
        u, v = node_id(source), node_id(target)
        if not self._graph.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        return self._graph.edges[u, v].get("weight", self.config.default_edge_weight)

    def set_edge_weight(self, source: Any, target: Any, weight: float) -> "Graph":
        u, v = node_id(source), node_id(target)
        if not self._graph.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        self._graph.edges[u, v]["weight"] = weight
        return self

    # -------------------- Traversal --------------------

    def adjacent(self, node_like: Any) -> List[Hashable]:
        nid = node_id(node_like)
        if nid not in self._graph:
            return []
        return list(self._graph.successors(nid))

    def indegree(self, node_like: Any) -> int:
        nid = node_id(node_like)
        if nid not in self._graph:
            return 0
        return self._graph.in_degree(nid)

    def outdegree(self, node_like: Any) -> int:
        nid = node_id(node_like)
        if nid not in self._graph:
            return 0
        return self._graph.out_degree(nid)

    # -------------------- Algorithms --------------------

    def depth_first_search(
        self,
        source_ids: Optional[Iterable[Any]] = None,
        include_source_ids: bool = True,
    ) -> List[Hashable]:
        return GraphQueryEngine(self).depth_first_search(
            source_ids, include_source_ids
        )

    def topological_sort(
        self,
        source_ids: Optional[Iterable[Any]] = None,
        include_source_ids: bool = True,
    ) -> List[Hashable]:
        return GraphQueryEngine(self).topological_sort(source_ids, include_source_ids)

    def lowest_common_ancestors(self, a: Any, b: Any) -> List[Hashable]:
        return GraphQueryEngine(self).lowest_common_ancestors(a, b)

    def has_cycle(self) -> bool:
        return GraphQueryEngine(self).has_cycle()

    def shortest_path(self, source: Any, target: Any) -> PathResult:
        return GraphQueryEngine(self).shortest_path(source, target)

    # -------------------- Serialization --------------------

    def serialize(self) -> Dict[str, List[Dict[str, Any]]]:
        return GraphSerializer(self).serialize()

    def deserialize(self, data: Mapping[str, Any]) -> "Graph":
        GraphSerializer(self).deserialize(data)
        return self

    def to_json(self, indent: Optional[int] = None) -> str:
        return GraphSerializer(self).to_json(indent=indent)

    @classmethod
    def from_json(cls, text: str, *, config: Optional[GraphConfig] = None) -> "Graph":
        graph = cls(config=config)
        GraphSerializer(graph).from_json(text)
        return graph

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node_like: Any) -> bool:
        return self.has_node(node_like)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes())

    # -------------------- Lifecycle --------------------

    def clear(self) -> "Graph":
        self._graph.clear()
        self._edge_counter = 0
        return self

    def clone(self) -> "Graph":
        g = Graph(config=self.config)
        g._graph = self._graph.copy()
        for _, data in g._graph.nodes(data=True):
            node = data["data"]
            data["data"] = Node(id=node.id, attributes=dict(node.attributes))
        g._edge_counter = self._edge_counter
        return g

    # -------------------- Internals --------------------

    def _ensure_node(self, node_like: Any) -> Hashable:
        nid = node_id(node_like)
        if nid not in self._graph:
            logger.debug("Implicitly creating node %r from edge", nid)
            self.add_node(node_like)
        return nid
