"""
Key clusters

Maximal cliques of the transition graph: groups of keys that can all be
mixed into each other with a single transition.
"""

from typing import FrozenSet, Optional, Set

import networkx as nx
import structlog

from camelot_graph.graph.builder import ScaleTransitions, get_scale_transitions
from camelot_graph.theory.key import Key

logger = structlog.get_logger()


def maximal_cliques(transitions: Optional[ScaleTransitions] = None) -> Set[FrozenSet[Key]]:
    """
    Enumerate all maximal cliques (Bron-Kerbosch), ignoring edge labels.

    Args:
        transitions: Graph to analyze (defaults to the shared graph)

    Returns:
        Set of cliques, each a frozenset of keys
    """
    if transitions is None:
        transitions = get_scale_transitions()

    cliques = {
        frozenset(transitions.key(node) for node in clique)
        for clique in nx.find_cliques(transitions.adjacency_graph())
    }

    logger.debug(
        "Maximal cliques enumerated",
        count=len(cliques),
        largest=max((len(clique) for clique in cliques), default=0),
    )
    return cliques
