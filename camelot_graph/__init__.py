"""
camelot-graph: harmonic transition graph over the Camelot wheel.
"""

from camelot_graph.graph import (
    KeyPath,
    UnknownKeyError,
    find_paths,
    get_scale_transitions,
    harmonic_transitions_from,
    maximal_cliques,
    shortest_path,
)
from camelot_graph.theory import (
    HARMONIC_TRANSITIONS,
    InvalidScaleString,
    Key,
    KeyTransition,
    Mode,
    ScaleError,
    decode,
    encode,
    make_transition,
)

__all__ = [
    "KeyPath",
    "UnknownKeyError",
    "find_paths",
    "get_scale_transitions",
    "harmonic_transitions_from",
    "maximal_cliques",
    "shortest_path",
    "HARMONIC_TRANSITIONS",
    "InvalidScaleString",
    "Key",
    "KeyTransition",
    "Mode",
    "ScaleError",
    "decode",
    "encode",
    "make_transition",
]
