"""
Scale transition graph

Builds the 24-node Camelot graph by applying every harmonic transition
to every key. The graph is built once per process and frozen.
"""

import threading
from typing import Dict, Hashable, Optional

import networkx as nx
import structlog

from camelot_graph.theory.key import Key, make_standard_scale
from camelot_graph.theory.transitions import harmonic_transitions, make_transition

logger = structlog.get_logger()


class UnknownKeyError(LookupError):
    """Raised when a key has no node in the transition graph."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key not present in transition graph: {key}")


class ScaleTransitions:
    """
    Undirected multigraph of keys joined by labeled transitions.

    Each node carries a `key` attribute. Each edge carries the `transition`
    that produced it and the `source` node it was applied from, so the
    label only holds when the edge is walked away from `source`.
    """

    def __init__(self, graph: nx.MultiGraph, index: Dict[Key, Hashable]):
        self.graph = graph
        self.index = index

    def node(self, key: Key) -> Hashable:
        """
        Get the node identity for a key.

        Raises:
            UnknownKeyError: If the key is not in the graph
        """
        try:
            return self.index[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def key(self, node: Hashable) -> Key:
        return self.graph.nodes[node]["key"]

    def adjacency_graph(self) -> nx.Graph:
        """Simple graph view with parallel edges collapsed, labels dropped."""
        simple = nx.Graph()
        simple.add_nodes_from(self.graph.nodes)
        simple.add_edges_from(self.graph.edges())
        return simple


def make_scale_transition_graph() -> ScaleTransitions:
    """
    Build the full transition graph.

    Returns:
        ScaleTransitions with 24 nodes and one edge per (key, transition)
    """
    graph = nx.MultiGraph()

    keys = make_standard_scale()
    transitions = harmonic_transitions()

    index = {}
    for node_id, key in enumerate(keys):
        graph.add_node(node_id, key=key)
        index[key] = node_id

    for key in keys:
        source = index[key]
        for transition in transitions:
            target = index[make_transition(key, transition)]
            graph.add_edge(source, target, transition=transition, source=source)

    nx.freeze(graph)

    logger.debug(
        "Scale transition graph built",
        nodes=graph.number_of_nodes(),
        edges=graph.number_of_edges(),
    )
    return ScaleTransitions(graph, index)


_scale_transitions: Optional[ScaleTransitions] = None
_scale_transitions_lock = threading.Lock()


def get_scale_transitions() -> ScaleTransitions:
    """Get the process-wide transition graph, building it on first use."""
    global _scale_transitions

    if _scale_transitions is None:
        with _scale_transitions_lock:
            if _scale_transitions is None:
                _scale_transitions = make_scale_transition_graph()
    return _scale_transitions
