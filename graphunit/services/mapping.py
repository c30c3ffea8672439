"""
Mapping enumerator.

Expands per-node candidate sets into every total, injective mapping from
expected node ids to actual node ids. Mappings are produced lazily, so the
caller can stop at the first one that validates. The search is exhaustive
and exponential in the number of ambiguous nodes in the worst case.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Tuple

NodeMapping = Dict[Any, Any]


def _search_order(candidates: Mapping[Any, FrozenSet[Any]]) -> List[Tuple[Any, Tuple[Any, ...]]]:
    # Most constrained first; sorted() is stable so ties keep insertion order.
    ordered = sorted(candidates.items(), key=lambda item: len(item[1]))
    return [(node_id, tuple(targets)) for node_id, targets in ordered]


def iter_mappings(candidates: Mapping[Any, FrozenSet[Any]]) -> Iterator[NodeMapping]:
    """
    Yield each injective mapping consistent with *candidates* exactly once.

    A partial mapping is extended one expected node at a time; an extension
    whose target is already used is dropped immediately.
    """
    order = _search_order(candidates)
    depth_limit = len(order)

    # (depth, partial mapping, targets already used)
    stack: List[Tuple[int, NodeMapping, FrozenSet[Any]]] = [(0, {}, frozenset())]

    while stack:
        depth, partial, used = stack.pop()

        if depth == depth_limit:
            yield partial
            continue

        node_id, targets = order[depth]
        # reversed so the first candidate is explored first
        for target in reversed(targets):
            if target in used:
                continue
            extended = dict(partial)
            extended[node_id] = target
            stack.append((depth + 1, extended, used | {target}))


def count_mappings(candidates: Mapping[Any, FrozenSet[Any]]) -> int:
    """Number of mappings :func:`iter_mappings` yields (exhausts the search)."""
    return sum(1 for _ in iter_mappings(candidates))
