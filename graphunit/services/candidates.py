"""Candidate index: which actual nodes could stand in for each expected node."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet

from graphunit.core.errors import NoCandidateForNode
from graphunit.core.logging import get_logger
from graphunit.schemas.graph import GraphSnapshot, Node
from graphunit.services.equivalence import nodes_equivalent

logger = get_logger(__name__)


def find_candidates(
    actual: GraphSnapshot,
    node: Node,
    *,
    label_pruning: bool = True,
) -> FrozenSet[Any]:
    """
    Return the ids of all nodes in *actual* equivalent to *node*.

    With *label_pruning* on, a labeled node only scans the actual nodes
    carrying its first label (in sorted order). The equivalence predicate
    decides membership either way.
    """
    if label_pruning and node.labels:
        pool = actual.nodes_with_label(min(node.labels))
    else:
        pool = actual.nodes

    return frozenset(c.id for c in pool if nodes_equivalent(node, c))


def build_candidate_index(
    actual: GraphSnapshot,
    expected: GraphSnapshot,
    *,
    label_pruning: bool = True,
) -> Dict[Any, FrozenSet[Any]]:
    """
    Map every expected node id to its candidate set.

    Raises:
        NoCandidateForNode: on the first expected node with no candidates.
    """
    index: Dict[Any, FrozenSet[Any]] = {}

    for node in expected.nodes:
        candidates = find_candidates(actual, node, label_pruning=label_pruning)

        # fail fast
        if not candidates:
            logger.info("no_candidate_for_node", node=repr(node))
            raise NoCandidateForNode(node)

        index[node.id] = candidates

    logger.debug(
        "candidate_index_built",
        expected_nodes=len(index),
        ambiguous_nodes=sum(1 for c in index.values() if len(c) > 1),
    )
    return index
