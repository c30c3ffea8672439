from typing import Any, Dict, Iterable, Mapping, Tuple

import pytest
import structlog

from graphunit.schemas.graph import GraphSnapshot


def build_graph(
    nodes: Mapping[Any, Tuple[Iterable[str], Dict[str, Any]]],
    relationships: Iterable[Tuple[Any, str, Any, Dict[str, Any]]] = (),
) -> GraphSnapshot:
    """
    nodes:          {id: (labels, properties)}
    relationships:  [(start, type, end, properties)]
    """
    return GraphSnapshot(
        nodes=[
            {"id": node_id, "labels": list(labels), "properties": props}
            for node_id, (labels, props) in nodes.items()
        ],
        relationships=[
            {"id": i, "type": rel_type, "start": start, "end": end, "properties": props}
            for i, (start, rel_type, end, props) in enumerate(relationships)
        ],
    )


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def people_graph():
    """(A:Person)-[:KNOWS]->(B:Person)"""
    return build_graph(
        {
            "n1": (["Person"], {"name": "A"}),
            "n2": (["Person"], {"name": "B"}),
        },
        [("n1", "KNOWS", "n2", {})],
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
