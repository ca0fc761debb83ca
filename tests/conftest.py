import pytest

from graphds import Graph


@pytest.fixture
def clothing_graph() -> Graph:
    # Cormen et al., "Introduction to Algorithms", getting dressed
    graph = Graph()
    graph.add_edge({"id": "socks", "name": "I'm socks", "size": 1}, {"id": "shoes", "size": 10})
    graph.add_edge({"id": "shirt", "size": 2}, {"id": "belt"})
    graph.add_edge({"id": "shirt", "size": 1}, {"id": "tie"})
    graph.add_edge({"id": "tie"}, {"id": "jacket", "size": 4})
    graph.add_edge({"id": "belt"}, {"id": "jacket", "size": 4})
    graph.add_edge({"id": "pants"}, {"id": "shoes", "size": 10})
    graph.add_edge({"id": "underpants"}, {"id": "pants"})
    graph.add_edge({"id": "pants"}, {"id": "belt"})
    return graph


@pytest.fixture
def diamond_graph() -> Graph:
    return (
        Graph()
        .add_edge("a", "b")
        .add_edge("b", "d")
        .add_edge("c", "d")
        .add_edge("b", "e")
        .add_edge("c", "e")
        .add_edge("d", "g")
        .add_edge("e", "g")
        .add_node("f")
    )
