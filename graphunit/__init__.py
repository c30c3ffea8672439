"""graphunit: assert that a graph is (or contains) an expected graph, ids aside."""

from graphunit.core.config import Settings, settings
from graphunit.core.errors import (
    CountMismatch,
    GraphMismatch,
    GraphUnitError,
    LabelCountMismatch,
    NoCandidateForNode,
    NodeCountMismatch,
    NoValidMapping,
    PropertyKeyCountMismatch,
    RelationshipCountMismatch,
    RelationshipTypeCountMismatch,
    SnapshotError,
)
from graphunit.core.logging import configure_logging
from graphunit.schemas.graph import GraphSnapshot, Node, Relationship
from graphunit.services.graph_unit import (
    assert_same_graph,
    assert_subgraph,
    find_embedding,
    is_same_graph,
    is_subgraph,
)
from graphunit.services.snapshot_service import (
    as_snapshot,
    snapshot_from_dict,
    snapshot_from_frames,
    snapshot_from_networkx,
    to_networkx,
)

__all__ = [
    "CountMismatch",
    "GraphMismatch",
    "GraphSnapshot",
    "GraphUnitError",
    "LabelCountMismatch",
    "NoCandidateForNode",
    "NoValidMapping",
    "Node",
    "NodeCountMismatch",
    "PropertyKeyCountMismatch",
    "Relationship",
    "RelationshipCountMismatch",
    "RelationshipTypeCountMismatch",
    "Settings",
    "SnapshotError",
    "as_snapshot",
    "assert_same_graph",
    "assert_subgraph",
    "configure_logging",
    "find_embedding",
    "is_same_graph",
    "is_subgraph",
    "settings",
    "snapshot_from_dict",
    "snapshot_from_frames",
    "snapshot_from_networkx",
    "to_networkx",
]
