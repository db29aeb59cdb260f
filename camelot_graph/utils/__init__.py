"""Utility modules"""

from camelot_graph.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
