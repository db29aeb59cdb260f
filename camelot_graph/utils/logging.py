"""
Logging configuration for camelot-graph
"""

import logging
import sys
from typing import Any

import structlog

from camelot_graph.theory.key import Key
from camelot_graph.theory.transitions import KeyTransition


def _render_wheel_types(value: Any) -> Any:
    """Render keys and transitions in Camelot notation for cleaner logs."""
    if isinstance(value, (Key, KeyTransition)):
        return str(value)
    elif isinstance(value, dict):
        return {k: _render_wheel_types(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        rendered = [_render_wheel_types(v) for v in value]
        if isinstance(value, (set, frozenset)):
            return sorted(rendered, key=str)
        return type(value)(rendered)
    return value


def wheel_types_processor(logger, method_name, event_dict):
    """Structlog processor that renders Key/KeyTransition values as text."""
    return {k: _render_wheel_types(v) for k, v in event_dict.items()}


def setup_logging(log_level: str = "INFO", log_file: str = ""):
    """
    Configure structured logging using structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a log file, in addition to stderr
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            wheel_types_processor,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
