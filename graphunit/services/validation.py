"""Mapping validator: does a node mapping carry every expected relationship over?"""

from __future__ import annotations

from typing import Any, Mapping

from graphunit.schemas.graph import GraphSnapshot, Relationship
from graphunit.services.equivalence import relationships_equivalent


def relationship_mapped(
    actual: GraphSnapshot,
    relationship: Relationship,
    mapping: Mapping[Any, Any],
) -> bool:
    """
    True iff an outgoing relationship of the mapped start node ends at the
    mapped end node and is equivalent to *relationship*.
    """
    start = mapping[relationship.start]
    end = mapping[relationship.end]

    for candidate in actual.outgoing(start):
        if candidate.end == end and relationships_equivalent(candidate, relationship):
            return True

    return False


def mapping_is_valid(
    actual: GraphSnapshot,
    expected: GraphSnapshot,
    mapping: Mapping[Any, Any],
) -> bool:
    # Actual relationships are not consumed: one may satisfy several
    # equivalent expected relationships between the same pair.
    return all(
        relationship_mapped(actual, relationship, mapping)
        for relationship in expected.relationships
    )
