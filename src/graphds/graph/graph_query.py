from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Mapping, Optional

import networkx as nx

from graphds.graph.errors import NoPathError
from graphds.graph.graph_schema import Node, node_id

if TYPE_CHECKING:
    from graphds.graph.graph_store import Graph

logger = logging.getLogger("graphds.query")

_ON_PATH = 1
_FINISHED = 2


@dataclass(frozen=True)
class PathResult:
    """
    Result of a weighted shortest-path query.
    """

    nodes: List[Hashable]
    weight: float


class GraphQueryEngine:
    """
    Read-only traversal algorithms over a Graph.

    Walks are iterative and use three-state marking (unvisited, on the
    current path, finished), so cycles are cut at the point of re-entry
    instead of recursing forever or raising.
    """

    def __init__(self, store: "Graph") -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Depth-first search / topological order
    # ------------------------------------------------------------------

    def depth_first_search(
        self,
        source_ids: Optional[Iterable[Any]] = None,
        include_source_ids: bool = True,
    ) -> List[Hashable]:
        """
        Finish order of a depth-first walk from ``source_ids`` (every node
        when omitted). Each node appears after everything reachable from it.
        """
        starts = self._resolve_starts(source_ids)
        finished: List[Hashable] = []
        state: Dict[Hashable, int] = {}

        for start in starts:
            self._visit(start, state, finished.append)

        if not include_source_ids:
            excluded = set(starts)
            finished = [n for n in finished if n not in excluded]
        return finished

    def topological_sort(
        self,
        source_ids: Optional[Iterable[Any]] = None,
        include_source_ids: bool = True,
    ) -> List[Hashable]:
        """
        Order nodes so that for every traversed edge u -> v, u precedes v.

        Nodes are pushed to the front of the output as they finish, so the
        result needs no reversal. Cyclic re-entry is skipped silently.
        """
        starts = self._resolve_starts(source_ids)
        ordered: deque = deque()
        state: Dict[Hashable, int] = {}

        for start in starts:
            self._visit(start, state, ordered.appendleft)

        if include_source_ids:
            return list(ordered)

        excluded = set(starts)
        return [n for n in ordered if n not in excluded]

    # ------------------------------------------------------------------
    # Lowest common ancestors
    # ------------------------------------------------------------------

    def lowest_common_ancestors(self, a: Any, b: Any) -> List[Hashable]:
        """
        Lowest nodes reachable from both ``a`` and ``b``.

        Edges point from a node toward its ancestors, so the ancestors of
        ``x`` are ``x`` itself plus everything reachable from it. Common
        ancestors that are reachable from another common ancestor are
        dropped. Order follows discovery order from ``a``.
        """
        a, b = node_id(a), node_id(b)
        if not self.store.has_node(a) or not self.store.has_node(b):
            return []
        if a == b:
            return [a]

        reach_b = self._reachable(b)
        common = [n for n in self._reachable(a) if n in reach_b]

        reach_of = {n: self._reachable(n) for n in common}
        return [
            n
            for n in common
            if not any(n in reach_of[other] for other in common if other != n)
        ]

    # ------------------------------------------------------------------
    # Supplementary queries
    # ------------------------------------------------------------------

    def has_cycle(self) -> bool:
        return not nx.is_directed_acyclic_graph(self.store._graph)

    def shortest_path(self, source: Any, target: Any) -> PathResult:
        """
        Dijkstra over edge weights; unweighted edges use the configured
        default weight.
        """
        u, v = node_id(source), node_id(target)
        default = self.store.config.default_edge_weight

        try:
            weight, path = nx.single_source_dijkstra(
                self.store._graph,
                u,
                v,
                weight=lambda _u, _v, data: data.get("weight", default),
            )
        except (nx.NetworkXNoPath, nx.NodeNotFound) as exc:
            raise NoPathError(u, v) from exc

        return PathResult(nodes=list(path), weight=float(weight))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_starts(self, source_ids: Optional[Iterable[Any]]) -> List[Hashable]:
        if source_ids is None:
            return self.store.nodes()
        if isinstance(source_ids, (str, bytes, Mapping, Node)):
            # a single node-like rather than a sequence of them
            source_ids = [source_ids]

        starts: List[Hashable] = []
        for sid in source_ids:
            nid = node_id(sid)
            if not self.store.has_node(nid):
                logger.debug("Skipping unknown start node %r", nid)
                continue
            starts.append(nid)
        return starts

    def _visit(self, start: Hashable, state: Dict[Hashable, int], emit) -> None:
        if start in state:
            return

        state[start] = _ON_PATH
        stack = [(start, iter(self.store.adjacent(start)))]

        while stack:
            node, successors = stack[-1]
            for nxt in successors:
                mark = state.get(nxt)
                if mark is None:
                    state[nxt] = _ON_PATH
                    stack.append((nxt, iter(self.store.adjacent(nxt))))
                    break
                if mark == _ON_PATH:
                    logger.debug("Cycle re-entry at %r from %r skipped", nxt, node)
            else:
                stack.pop()
                state[node] = _FINISHED
                emit(node)

    def _reachable(self, start: Hashable) -> Dict[Hashable, None]:
        # insertion-ordered set of nodes reachable from start, start first
        seen: Dict[Hashable, None] = {start: None}
        stack = [iter(self.store.adjacent(start))]

        while stack:
            for nxt in stack[-1]:
                if nxt not in seen:
                    seen[nxt] = None
                    stack.append(iter(self.store.adjacent(nxt)))
                    break
            else:
                stack.pop()
        return seen
