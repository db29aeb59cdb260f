"""
Neighbor lookup on the Camelot wheel
"""

from typing import List

from camelot_graph.theory.key import Key
from camelot_graph.theory.transitions import harmonic_transitions, make_transition


def harmonic_transitions_from(key: Key) -> List[Key]:
    """
    Get every key one harmonic transition away, plus the key itself.

    Args:
        key: Camelot key

    Returns:
        Sorted, de-duplicated keys (always includes `key`)
    """
    reachable = {make_transition(key, transition) for transition in harmonic_transitions()}
    reachable.add(key)
    return sorted(reachable)
