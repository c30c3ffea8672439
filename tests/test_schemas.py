"""Unit tests for snapshot models."""

import numpy as np
import pytest
from pydantic import ValidationError

from graphunit.schemas.graph import (
    GraphSnapshot,
    Node,
    Relationship,
    normalize_property_value,
    property_kind,
)


def test_node_accepts_single_label_string():
    node = Node(id=1, labels="Person")
    assert node.labels == frozenset({"Person"})


def test_node_labels_deduplicate():
    node = Node(id=1, labels=["Person", "Person", "Admin"])
    assert node.labels == frozenset({"Person", "Admin"})


def test_list_and_numpy_properties_become_tuples():
    node = Node(id=1, properties={"tags": ["a", "b"], "scores": np.array([1, 2, 3])})
    assert node.properties["tags"] == ("a", "b")
    assert node.properties["scores"] == (1, 2, 3)
    assert isinstance(node.properties["scores"][0], int)


def test_numpy_scalar_is_unwrapped():
    assert normalize_property_value(np.float64(1.5)) == 1.5
    assert type(normalize_property_value(np.int64(3))) is int


def test_bool_property_stays_bool():
    node = Node(id=1, properties={"active": True})
    assert node.properties["active"] is True


@pytest.mark.parametrize(
    "value",
    [None, {"nested": 1}, [[1, 2]], [1, "a"], [True, 1]],
)
def test_invalid_property_values_rejected(value):
    with pytest.raises(ValidationError):
        Node(id=1, properties={"bad": value})


def test_property_kind_tags():
    assert property_kind(True) == "boolean"
    assert property_kind(1) == "number"
    assert property_kind(1.5) == "number"
    assert property_kind("x") == "string"
    assert property_kind((1, 2)) == "array"


def test_relationship_requires_type():
    with pytest.raises(ValidationError):
        Relationship(id=1, type="", start=1, end=2)


def test_snapshot_rejects_duplicate_node_ids():
    with pytest.raises(ValidationError, match="Duplicate node id"):
        GraphSnapshot(nodes=[Node(id=1), Node(id=1)])


def test_snapshot_rejects_duplicate_relationship_ids():
    with pytest.raises(ValidationError, match="Duplicate relationship id"):
        GraphSnapshot(
            nodes=[Node(id=1), Node(id=2)],
            relationships=[
                Relationship(id=7, type="R", start=1, end=2),
                Relationship(id=7, type="R", start=2, end=1),
            ],
        )


def test_snapshot_rejects_dangling_relationship():
    with pytest.raises(ValidationError, match="unknown node"):
        GraphSnapshot(
            nodes=[Node(id=1)],
            relationships=[Relationship(id=1, type="R", start=1, end=2)],
        )


def test_snapshot_is_frozen(people_graph):
    with pytest.raises(ValidationError):
        people_graph.nodes = ()


def test_snapshot_queries(make_graph):
    graph = make_graph(
        {
            1: (["Person", "Admin"], {"name": "A"}),
            2: (["Person"], {"name": "B", "age": 3}),
            3: ([], {}),
        },
        [(1, "KNOWS", 2, {"since": 2001}), (1, "OWNS", 3, {}), (2, "KNOWS", 1, {})],
    )

    assert graph.labels() == {"Person", "Admin"}
    assert graph.relationship_types() == {"KNOWS", "OWNS"}
    assert graph.property_keys() == {"name", "age", "since"}
    assert [r.end for r in graph.outgoing(1)] == [2, 3]
    assert graph.outgoing(3) == ()
    assert {n.id for n in graph.nodes_with_label("Person")} == {1, 2}
    assert graph.nodes_with_label("Missing") == ()
    assert graph.node(2).properties["age"] == 3

    counts = graph.counts()
    assert counts.nodes == 3
    assert counts.labels == 2
    assert counts.property_keys == 3
    assert counts.relationships == 3
    assert counts.relationship_types == 2


def test_node_lookup_missing_raises(people_graph):
    with pytest.raises(KeyError):
        people_graph.node("nope")


def test_empty_snapshot_counts():
    counts = GraphSnapshot().counts()
    assert (counts.nodes, counts.relationships, counts.labels) == (0, 0, 0)
