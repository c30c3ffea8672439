"""
Graph assertions for tests.

``assert_same_graph`` checks that two graphs are identical up to node and
relationship ids; ``assert_subgraph`` checks that the expected graph is
embedded in the actual one. Nodes are the same when they have the same
labels and properties; relationships when they have the same type,
properties and (mapped) direction.

This is not built for large graphs: the search enumerates every injective
node mapping the candidate sets allow, which is exponential in the worst
case.
"""

from __future__ import annotations

import time
from typing import Any, Optional, Tuple

from graphunit.core.config import Settings, settings as default_settings
from graphunit.core.errors import (
    GraphMismatch,
    LabelCountMismatch,
    NodeCountMismatch,
    NoValidMapping,
    PropertyKeyCountMismatch,
    RelationshipCountMismatch,
    RelationshipTypeCountMismatch,
)
from graphunit.core.logging import get_logger
from graphunit.schemas.graph import GraphSnapshot
from graphunit.services.candidates import build_candidate_index
from graphunit.services.mapping import NodeMapping, iter_mappings
from graphunit.services.snapshot_service import as_snapshot
from graphunit.services.validation import mapping_is_valid

logger = get_logger(__name__)

# Checked in this order; the first difference wins.
_COUNT_CHECKS = (
    ("nodes", NodeCountMismatch),
    ("labels", LabelCountMismatch),
    ("property_keys", PropertyKeyCountMismatch),
    ("relationships", RelationshipCountMismatch),
    ("relationship_types", RelationshipTypeCountMismatch),
)


def _assert_same_numbers_of_elements(actual: GraphSnapshot, expected: GraphSnapshot) -> None:
    actual_counts = actual.counts()
    expected_counts = expected.counts()

    for field, error in _COUNT_CHECKS:
        a = getattr(actual_counts, field)
        e = getattr(expected_counts, field)
        if a != e:
            logger.info("graph_count_mismatch", element=field, actual=a, expected=e)
            raise error(a, e)


def _search(
    actual: GraphSnapshot,
    expected: GraphSnapshot,
    settings: Settings,
) -> Tuple[Optional[NodeMapping], int]:
    """Return the first valid mapping (or ``None``) and how many were checked."""
    started = time.perf_counter()
    logger.debug(
        "graph_compare_start",
        actual_nodes=len(actual.nodes),
        expected_nodes=len(expected.nodes),
        expected_relationships=len(expected.relationships),
    )

    candidates = build_candidate_index(
        actual, expected, label_pruning=settings.LABEL_PRUNING
    )

    checked = 0
    for mapping in iter_mappings(candidates):
        checked += 1
        if mapping_is_valid(actual, expected, mapping):
            logger.debug(
                "graph_compare_complete",
                mappings_checked=checked,
                elapsed_seconds=round(time.perf_counter() - started, 4),
            )
            return mapping, checked

        if settings.PROGRESS_EVERY and checked % settings.PROGRESS_EVERY == 0:
            logger.debug("mapping_search_progress", mappings_checked=checked)

    logger.info(
        "graph_compare_failed",
        reason=NoValidMapping.reason,
        mappings_checked=checked,
        elapsed_seconds=round(time.perf_counter() - started, 4),
    )
    return None, checked


def find_embedding(
    actual: Any,
    expected: Any,
    *,
    settings: Optional[Settings] = None,
) -> Optional[NodeMapping]:
    """
    Search for a node mapping under which *expected* embeds in *actual*.

    Returns:
        The first valid mapping (expected node id -> actual node id), or
        ``None`` when every candidate mapping fails relationship validation.

    Raises:
        NoCandidateForNode: an expected node has no equivalent actual node.
    """
    mapping, _ = _search(
        as_snapshot(actual), as_snapshot(expected), settings or default_settings
    )
    return mapping


def assert_subgraph(
    actual: Any,
    expected: Any,
    *,
    settings: Optional[Settings] = None,
) -> NodeMapping:
    """
    Assert that every node and relationship of *expected* is present in
    *actual*, ids aside. Returns the witness mapping.

    Raises:
        NoCandidateForNode, NoValidMapping
    """
    mapping, checked = _search(
        as_snapshot(actual), as_snapshot(expected), settings or default_settings
    )
    if mapping is None:
        raise NoValidMapping(checked)
    return mapping


def assert_same_graph(
    actual: Any,
    expected: Any,
    *,
    settings: Optional[Settings] = None,
) -> NodeMapping:
    """
    Assert that *actual* and *expected* are the same graph, ids aside.

    Element counts are compared first; with equal counts a subgraph
    embedding is an isomorphism, so no reverse check is needed.

    Raises:
        CountMismatch subclasses, NoCandidateForNode, NoValidMapping
    """
    actual = as_snapshot(actual)
    expected = as_snapshot(expected)

    _assert_same_numbers_of_elements(actual, expected)
    return assert_subgraph(actual, expected, settings=settings)


def is_subgraph(actual: Any, expected: Any, *, settings: Optional[Settings] = None) -> bool:
    try:
        assert_subgraph(actual, expected, settings=settings)
    except GraphMismatch:
        return False
    return True


def is_same_graph(actual: Any, expected: Any, *, settings: Optional[Settings] = None) -> bool:
    try:
        assert_same_graph(actual, expected, settings=settings)
    except GraphMismatch:
        return False
    return True
