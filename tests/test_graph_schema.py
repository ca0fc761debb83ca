from __future__ import annotations

import pytest

from graphds import Edge, InvalidNodeError, Node
from graphds.graph.graph_schema import node_id


def test_coerce_mapping_splits_identifier_from_attributes() -> None:
    node = Node.coerce({"id": "a", "name": "I'm node a", "size": 3})
    assert node.id == "a"
    assert node.attributes == {"name": "I'm node a", "size": 3}
    assert node.to_dict() == {"id": "a", "name": "I'm node a", "size": 3}


def test_coerce_bare_identifier() -> None:
    assert Node.coerce(("x", 1)) == Node(id=("x", 1))


def test_node_id_accepts_all_node_likes() -> None:
    assert node_id("a") == "a"
    assert node_id({"id": "a", "other": 1}) == "a"
    assert node_id(Node(id="a")) == "a"

    with pytest.raises(InvalidNodeError):
        node_id({"name": "nobody"})


def test_edge_to_dict() -> None:
    assert Edge("a", "b").to_dict() == {"source": "a", "target": "b"}
    assert Edge("a", "b", 3).to_dict() == {"source": "a", "target": "b", "weight": 3}
    assert Edge("a", "b").to_dict(default_weight=1.0)["weight"] == 1.0


def test_identifier_wins_over_id_attribute() -> None:
    node = Node(id=1, attributes={"id": 2, "name": "one"})
    assert node.to_dict() == {"id": 1, "name": "one"}
