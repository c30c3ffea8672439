"""
Snapshot adapters.

Materialize a :class:`GraphSnapshot` from the shapes a test usually has at
hand: a networkx graph, a pair of pandas DataFrames (node table and
relationship edge list) or a plain ``{"nodes": [...], "relationships": [...]}``
payload. The matching services only ever see the resulting snapshot.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import networkx as nx
import numpy as np
import pandas as pd

from graphunit.core.errors import SnapshotError
from graphunit.core.logging import get_logger
from graphunit.schemas.graph import GraphSnapshot, Node, Relationship

logger = get_logger(__name__)

LABELS_ATTR = "labels"
TYPE_ATTR = "type"


def _element_id(value: Any) -> Any:
    """Coerce a foreign identifier into a snapshot id (int or str)."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, str)):
        return value
    return str(value)


def _is_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple, np.ndarray)):
        return False
    return bool(pd.isna(value))


def _parse_labels(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [label for label in value.split(":") if label]
    if isinstance(value, (list, tuple, set, frozenset, np.ndarray)):
        return [str(label) for label in value]
    if _is_missing(value):
        return []
    raise SnapshotError(f"Cannot interpret labels: {value!r}")


# ═══════════════════════════════════════════════════════════════
#  networkx
# ═══════════════════════════════════════════════════════════════

def snapshot_from_networkx(G: nx.Graph) -> GraphSnapshot:
    """
    Build a snapshot from any networkx graph class.

    The ``labels`` node attribute holds the node's labels; the ``type`` edge
    attribute is the relationship type and is required. All other attributes
    become properties. Relationship ids are positions in edge order.
    """
    nodes = []
    for node_id, attrs in G.nodes(data=True):
        properties = dict(attrs)
        labels = _parse_labels(properties.pop(LABELS_ATTR, None))
        nodes.append(
            Node(id=_element_id(node_id), labels=labels, properties=properties)
        )

    relationships = []
    for position, (u, v, attrs) in enumerate(G.edges(data=True)):
        properties = dict(attrs)
        rel_type = properties.pop(TYPE_ATTR, None)
        if not rel_type:
            raise SnapshotError(f"Edge {u!r}->{v!r} has no '{TYPE_ATTR}' attribute")
        relationships.append(
            Relationship(
                id=position,
                type=str(rel_type),
                start=_element_id(u),
                end=_element_id(v),
                properties=properties,
            )
        )

    snapshot = GraphSnapshot(nodes=nodes, relationships=relationships)
    logger.debug(
        "snapshot_from_networkx",
        nodes=len(snapshot.nodes),
        relationships=len(snapshot.relationships),
        directed=G.is_directed(),
    )
    return snapshot


def to_networkx(snapshot: GraphSnapshot) -> nx.MultiDiGraph:
    """Render a snapshot as a MultiDiGraph, keyed by relationship id."""
    G = nx.MultiDiGraph()

    for node in snapshot.nodes:
        if LABELS_ATTR in node.properties:
            raise SnapshotError(f"Node property '{LABELS_ATTR}' clashes with the label attribute")
        G.add_node(node.id, **{LABELS_ATTR: sorted(node.labels)}, **node.properties)

    for rel in snapshot.relationships:
        if TYPE_ATTR in rel.properties:
            raise SnapshotError(f"Relationship property '{TYPE_ATTR}' clashes with the type attribute")
        G.add_edge(rel.start, rel.end, key=rel.id, **{TYPE_ATTR: rel.type}, **rel.properties)

    return G


# ═══════════════════════════════════════════════════════════════
#  pandas
# ═══════════════════════════════════════════════════════════════

def snapshot_from_frames(
    nodes_df: pd.DataFrame,
    relationships_df: Optional[pd.DataFrame] = None,
) -> GraphSnapshot:
    """
    Build a snapshot from a node table and a relationship edge list.

    ``nodes_df`` needs an ``id`` column and may carry a ``labels`` column
    (``"Person:Admin"`` or a list). ``relationships_df`` needs ``start``,
    ``end`` and ``type`` columns and may carry ``id``. Remaining columns are
    properties; null cells are absent properties.
    """
    if "id" not in nodes_df.columns:
        raise SnapshotError("Node frame needs an 'id' column")

    nodes = []
    for record in nodes_df.to_dict("records"):
        node_id = _element_id(record.pop("id"))
        labels = _parse_labels(record.pop(LABELS_ATTR, None))
        properties = {k: v for k, v in record.items() if not _is_missing(v)}
        nodes.append(Node(id=node_id, labels=labels, properties=properties))

    relationships = []
    if relationships_df is not None:
        missing = {"start", "end", TYPE_ATTR} - set(relationships_df.columns)
        if missing:
            raise SnapshotError(f"Relationship frame is missing columns: {sorted(missing)}")

        for position, record in enumerate(relationships_df.to_dict("records")):
            rel_id = record.pop("id", position)
            relationships.append(
                Relationship(
                    id=_element_id(rel_id),
                    type=str(record.pop(TYPE_ATTR)),
                    start=_element_id(record.pop("start")),
                    end=_element_id(record.pop("end")),
                    properties={k: v for k, v in record.items() if not _is_missing(v)},
                )
            )

    snapshot = GraphSnapshot(nodes=nodes, relationships=relationships)
    logger.debug(
        "snapshot_from_frames",
        nodes=len(snapshot.nodes),
        relationships=len(snapshot.relationships),
    )
    return snapshot


# ═══════════════════════════════════════════════════════════════
#  Plain payloads
# ═══════════════════════════════════════════════════════════════

def snapshot_from_dict(payload: Dict[str, Any]) -> GraphSnapshot:
    """Validate a ``{"nodes": [...], "relationships": [...]}`` payload."""
    return GraphSnapshot.model_validate(payload)


def as_snapshot(graph: Any) -> GraphSnapshot:
    """Accept a snapshot, a networkx graph or a dict payload."""
    if isinstance(graph, GraphSnapshot):
        return graph
    if isinstance(graph, nx.Graph):
        return snapshot_from_networkx(graph)
    if isinstance(graph, dict):
        return snapshot_from_dict(graph)
    raise SnapshotError(f"Cannot build a graph snapshot from {type(graph).__name__}")
