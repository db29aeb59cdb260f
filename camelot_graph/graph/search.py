"""
Path search over the transition graph

Finds the shortest chains of harmonic transitions between two keys, e.g.
for planning a run of tracks from one key to another.
"""

import heapq
import itertools
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

import structlog

from camelot_graph.graph.builder import ScaleTransitions, get_scale_transitions
from camelot_graph.theory.key import Key
from camelot_graph.theory.transitions import KeyTransition

logger = structlog.get_logger()


@dataclass
class KeyPath:
    """A path through the wheel and the transitions taken along it."""
    keys: List[Key]
    transitions: List[KeyTransition]
    cost: int


@dataclass
class _NodePath:
    cost: int
    node: Hashable
    nodes: List[Hashable]
    transitions: List[KeyTransition]


def multi_path_search(
    transitions: ScaleTransitions,
    source: Hashable,
    target: Hashable,
    n: int,
) -> List[_NodePath]:
    """
    Find up to `n` lowest-cost paths between two nodes.

    Every edge costs 1. Equal-cost paths come out in discovery order.
    A path never visits the same node twice and each node is expanded
    at most `n` times. Edges are followed in the direction their rule was
    applied; the catalog is inverse-closed so every neighbor is reachable.

    Args:
        transitions: Graph to search
        source: Start node
        target: End node
        n: Maximum number of paths to return

    Returns:
        Paths ordered by increasing cost
    """
    graph = transitions.graph
    counter = itertools.count()
    expansions: Dict[Hashable, int] = defaultdict(int)
    found: List[_NodePath] = []

    frontier = [(0, next(counter), _NodePath(0, source, [source], []))]

    while frontier:
        _, _, path = heapq.heappop(frontier)

        if path.node == target:
            found.append(path)
            if len(found) >= n:
                break
            continue

        if expansions[path.node] >= n:
            continue
        expansions[path.node] += 1

        for _, neighbor, data in graph.edges(path.node, data=True):
            # Walk only edges labeled from this end
            if data["source"] != path.node or neighbor in path.nodes:
                continue
            transition = data["transition"]
            heapq.heappush(frontier, (
                path.cost + 1,
                next(counter),
                _NodePath(
                    cost=path.cost + 1,
                    node=neighbor,
                    nodes=path.nodes + [neighbor],
                    transitions=path.transitions + [transition],
                ),
            ))

    return found


def find_paths(
    source: Key,
    target: Key,
    n: int = 1,
    transitions: Optional[ScaleTransitions] = None,
) -> List[KeyPath]:
    """
    Find the `n` shortest transition paths between two keys.

    Args:
        source: Starting key
        target: Destination key
        n: Number of paths wanted
        transitions: Graph to search (defaults to the shared graph)

    Returns:
        List of KeyPath ordered by cost, both endpoints included

    Raises:
        ValueError: If n < 1
        UnknownKeyError: If either key is not in the graph
    """
    if n < 1:
        raise ValueError(f"Path count must be at least 1, got {n}")

    if transitions is None:
        transitions = get_scale_transitions()

    found = multi_path_search(
        transitions,
        transitions.node(source),
        transitions.node(target),
        n,
    )

    paths = [
        KeyPath(
            keys=[transitions.key(node) for node in path.nodes],
            transitions=list(path.transitions),
            cost=path.cost,
        )
        for path in found
    ]

    logger.debug(
        "Paths found",
        source=source,
        target=target,
        requested=n,
        found=len(paths),
    )
    return paths


def shortest_path(source: Key, target: Key) -> List[Key]:
    """
    Get a minimum-transition path between two keys.

    Args:
        source: Starting key
        target: Destination key

    Returns:
        Keys along the path, including both endpoints
    """
    paths = find_paths(source, target, 1)
    if not paths:
        raise AssertionError(f"Transition graph does not connect {source} and {target}")
    return paths[0].keys
