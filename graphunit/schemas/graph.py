"""
Pydantic models for graph snapshots.

A snapshot is an immutable view of one labeled multigraph: nodes with label
sets and properties, and typed, directed relationships with properties.
Identifiers are scoped to their own snapshot and are never compared across
snapshots.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

import numpy as np
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

NodeId = Union[StrictInt, StrictStr]
RelationshipId = Union[StrictInt, StrictStr]

Scalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
PropertyValue = Union[Scalar, Tuple[Scalar, ...]]
Properties = Dict[str, PropertyValue]


# ═══════════════════════════════════════════════════════════════
#  Property values
# ═══════════════════════════════════════════════════════════════

def scalar_kind(value: Any) -> str:
    """Return the tag of a scalar property value: boolean, number or string."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    raise ValueError(f"Unsupported property value type: {type(value).__name__}")


def property_kind(value: Any) -> str:
    """Return the tag of a property value; arrays are tagged ``array``."""
    if isinstance(value, tuple):
        return "array"
    return scalar_kind(value)


def _normalize_scalar(value: Any) -> Any:
    if isinstance(value, np.generic):
        value = value.item()
    scalar_kind(value)
    return value


def normalize_property_value(value: Any) -> PropertyValue:
    """
    Coerce *value* into the tagged property representation.

    Lists and numpy arrays become tuples, numpy scalars become Python
    scalars. Arrays must be flat and hold a single kind of scalar.
    """
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if isinstance(value, (list, tuple)):
        items = tuple(_normalize_scalar(v) for v in value)
        kinds = {scalar_kind(v) for v in items}
        if len(kinds) > 1:
            raise ValueError(f"Array property mixes value kinds: {sorted(kinds)}")
        return items
    if value is None:
        raise ValueError("Property values cannot be null")
    return _normalize_scalar(value)


def _normalize_properties(value: Any) -> Any:
    if value is None:
        return {}
    if not isinstance(value, dict):
        return value
    return {key: normalize_property_value(v) for key, v in value.items()}


# ═══════════════════════════════════════════════════════════════
#  Elements
# ═══════════════════════════════════════════════════════════════

class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: NodeId
    labels: FrozenSet[str] = frozenset()
    properties: Properties = Field(default_factory=dict)

    @field_validator("labels", mode="before")
    @classmethod
    def split_single_label(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset([v])
        return v

    @field_validator("properties", mode="before")
    @classmethod
    def normalize_properties(cls, v: Any) -> Any:
        return _normalize_properties(v)

    def __repr__(self) -> str:
        labels = "".join(f":{label}" for label in sorted(self.labels))
        return f"Node[{self.id}]({labels} {self.properties})"


class Relationship(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RelationshipId
    type: str = Field(..., min_length=1)
    start: NodeId
    end: NodeId
    properties: Properties = Field(default_factory=dict)

    @field_validator("properties", mode="before")
    @classmethod
    def normalize_properties(cls, v: Any) -> Any:
        return _normalize_properties(v)

    def __repr__(self) -> str:
        return f"Relationship[{self.id}]({self.start})-[:{self.type} {self.properties}]->({self.end})"


class GraphCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: int
    labels: int
    property_keys: int
    relationships: int
    relationship_types: int


# ═══════════════════════════════════════════════════════════════
#  Snapshot
# ═══════════════════════════════════════════════════════════════

class GraphSnapshot(BaseModel):
    """Read-only, queryable view of one graph."""

    model_config = ConfigDict(frozen=True)

    nodes: Tuple[Node, ...] = ()
    relationships: Tuple[Relationship, ...] = ()

    _nodes_by_id: Optional[Dict[Any, Node]] = PrivateAttr(default=None)
    _outgoing: Optional[Dict[Any, Tuple[Relationship, ...]]] = PrivateAttr(default=None)
    _by_label: Optional[Dict[str, Tuple[Node, ...]]] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def check_integrity(self) -> "GraphSnapshot":
        node_ids = set()
        for node in self.nodes:
            if node.id in node_ids:
                raise ValueError(f"Duplicate node id: {node.id!r}")
            node_ids.add(node.id)

        rel_ids = set()
        for rel in self.relationships:
            if rel.id in rel_ids:
                raise ValueError(f"Duplicate relationship id: {rel.id!r}")
            rel_ids.add(rel.id)
            for endpoint in (rel.start, rel.end):
                if endpoint not in node_ids:
                    raise ValueError(
                        f"Relationship {rel.id!r} references unknown node {endpoint!r}"
                    )
        return self

    def _build_indexes(self) -> None:
        outgoing: Dict[Any, List[Relationship]] = defaultdict(list)
        for rel in self.relationships:
            outgoing[rel.start].append(rel)

        by_label: Dict[str, List[Node]] = defaultdict(list)
        for node in self.nodes:
            for label in node.labels:
                by_label[label].append(node)

        self._nodes_by_id = {node.id: node for node in self.nodes}
        self._outgoing = {k: tuple(v) for k, v in outgoing.items()}
        self._by_label = {k: tuple(v) for k, v in by_label.items()}

    # ── Queries ───────────────────────────────────────────────

    def node(self, node_id: Any) -> Node:
        if self._nodes_by_id is None:
            self._build_indexes()
        return self._nodes_by_id[node_id]

    def outgoing(self, node_id: Any) -> Tuple[Relationship, ...]:
        """Relationships whose start node is *node_id*."""
        if self._outgoing is None:
            self._build_indexes()
        return self._outgoing.get(node_id, ())

    def nodes_with_label(self, label: str) -> Tuple[Node, ...]:
        if self._by_label is None:
            self._build_indexes()
        return self._by_label.get(label, ())

    def labels(self) -> FrozenSet[str]:
        return frozenset(label for node in self.nodes for label in node.labels)

    def relationship_types(self) -> FrozenSet[str]:
        return frozenset(rel.type for rel in self.relationships)

    def property_keys(self) -> FrozenSet[str]:
        """Distinct property keys across nodes and relationships."""
        keys = set()
        for node in self.nodes:
            keys.update(node.properties)
        for rel in self.relationships:
            keys.update(rel.properties)
        return frozenset(keys)

    def counts(self) -> GraphCounts:
        return GraphCounts(
            nodes=len(self.nodes),
            labels=len(self.labels()),
            property_keys=len(self.property_keys()),
            relationships=len(self.relationships),
            relationship_types=len(self.relationship_types()),
        )
