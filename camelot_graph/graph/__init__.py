"""
Transition graph module

Graph construction and queries over the Camelot wheel.
"""

from camelot_graph.graph.builder import (
    ScaleTransitions,
    UnknownKeyError,
    get_scale_transitions,
    make_scale_transition_graph,
)
from camelot_graph.graph.cliques import maximal_cliques
from camelot_graph.graph.neighbors import harmonic_transitions_from
from camelot_graph.graph.search import KeyPath, find_paths, shortest_path

__all__ = [
    "ScaleTransitions",
    "UnknownKeyError",
    "get_scale_transitions",
    "make_scale_transition_graph",
    "maximal_cliques",
    "harmonic_transitions_from",
    "KeyPath",
    "find_paths",
    "shortest_path",
]
