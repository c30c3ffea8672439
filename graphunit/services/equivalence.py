"""
Node and relationship equivalence predicates.

Two elements are equivalent when they would be indistinguishable once their
identifiers are ignored: same labels (or type) and same properties.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from graphunit.schemas.graph import Node, Relationship, property_kind


def property_values_equal(a: Any, b: Any) -> bool:
    """
    Structural equality over tagged property values.

    Booleans never equal numbers, ints and floats compare numerically,
    NaN equals NaN, arrays compare element by element.

    Numeric comparison is looser than a Java store's boxed equality, where
    a Long never equals a Double: here `1` and `1.0` are the same value.
    """
    kind = property_kind(a)
    if kind != property_kind(b):
        return False

    if kind == "array":
        return len(a) == len(b) and all(
            property_values_equal(x, y) for x, y in zip(a, b)
        )

    if kind == "number" and isinstance(a, float) and isinstance(b, float):
        if math.isnan(a) and math.isnan(b):
            return True

    return a == b


def properties_equal(p1: Mapping[str, Any], p2: Mapping[str, Any]) -> bool:
    if len(p1) != len(p2):
        return False

    for key, value in p1.items():
        if key not in p2 or not property_values_equal(value, p2[key]):
            return False

    return True


def nodes_equivalent(a: Node, b: Node) -> bool:
    return a.labels == b.labels and properties_equal(a.properties, b.properties)


def relationships_equivalent(a: Relationship, b: Relationship) -> bool:
    # Endpoints are checked under a node mapping, not here.
    return a.type == b.type and properties_equal(a.properties, b.properties)
