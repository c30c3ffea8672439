"""
Failure taxonomy.

Negative verdicts derive from ``AssertionError`` so test runners report them
as failed assertions rather than errors. Misuse of the library (an input
that cannot become a snapshot) derives from ``GraphUnitError``.
"""

from __future__ import annotations

from typing import Any, Optional


class GraphUnitError(Exception):
    """Base class for library misuse."""


class SnapshotError(GraphUnitError, ValueError):
    """An input could not be materialized as a graph snapshot."""


# ═══════════════════════════════════════════════════════════════
#  Verdicts
# ═══════════════════════════════════════════════════════════════

class GraphMismatch(AssertionError):
    """The actual graph does not match the expected graph."""

    reason: str = "graph_mismatch"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CountMismatch(GraphMismatch):
    """Base for the cardinality pre-checks of a full-equality assertion."""

    reason = "count_mismatch"
    element = "elements"

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"There are different numbers of {self.element} in the two graphs "
            f"(actual={actual}, expected={expected})"
        )
        self.actual = actual
        self.expected = expected


class NodeCountMismatch(CountMismatch):
    reason = "node_count_mismatch"
    element = "nodes"


class LabelCountMismatch(CountMismatch):
    reason = "label_count_mismatch"
    element = "labels"


class PropertyKeyCountMismatch(CountMismatch):
    reason = "property_key_count_mismatch"
    element = "property keys"


class RelationshipCountMismatch(CountMismatch):
    reason = "relationship_count_mismatch"
    element = "relationships"


class RelationshipTypeCountMismatch(CountMismatch):
    reason = "relationship_type_count_mismatch"
    element = "relationship types"


class NoCandidateForNode(GraphMismatch):
    """An expected node has no equivalent node in the actual graph."""

    reason = "no_candidate_for_node"

    def __init__(self, node: Any) -> None:
        super().__init__(f"There is no corresponding node to {node!r}")
        self.node = node


class NoValidMapping(GraphMismatch):
    """Every node mapping failed relationship validation."""

    reason = "no_valid_mapping"

    def __init__(self, mappings_checked: Optional[int] = None) -> None:
        message = "There is no corresponding relationship mapping for any of the possible node mappings"
        if mappings_checked is not None:
            message += f" ({mappings_checked} checked)"
        super().__init__(message)
        self.mappings_checked = mappings_checked
