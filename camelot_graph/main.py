"""
Main entry point for camelot-graph

Usage:
    camelot-graph decode 8B
    camelot-graph apply 8B Diagonal
    camelot-graph path 8B 3A -n 2
    camelot-graph neighbors 8B
    camelot-graph cliques
"""

import argparse
import sys
from typing import List, Optional

import structlog

from camelot_graph.config import settings
from camelot_graph.graph import (
    find_paths,
    harmonic_transitions_from,
    maximal_cliques,
)
from camelot_graph.theory import KeyTransition, ScaleError, decode, make_transition
from camelot_graph.utils.logging import setup_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _format_keys(keys) -> str:
    return " ".join(str(key) for key in keys)


def _cmd_decode(args) -> None:
    key = decode(args.key)
    print(f"tonic={key.tonic} mode={key.mode.name.lower()}")


def _cmd_apply(args) -> None:
    key = decode(args.key)
    transition = KeyTransition.parse(args.transition)
    print(make_transition(key, transition))


def _cmd_path(args) -> None:
    source = decode(args.source)
    target = decode(args.target)
    for path in find_paths(source, target, args.n):
        keys = " -> ".join(str(key) for key in path.keys)
        transitions = ", ".join(str(t) for t in path.transitions)
        print(f"{keys}  [{transitions}]" if transitions else keys)


def _cmd_neighbors(args) -> None:
    print(_format_keys(harmonic_transitions_from(decode(args.key))))


def _cmd_cliques(args) -> None:
    for clique in sorted(sorted(clique) for clique in maximal_cliques()):
        print(_format_keys(clique))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camelot-graph",
        description="Harmonic transitions on the Camelot wheel",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Show tonic and mode of a key")
    decode_parser.add_argument("key")
    decode_parser.set_defaults(handler=_cmd_decode)

    apply_parser = subparsers.add_parser("apply", help="Apply a transition to a key")
    apply_parser.add_argument("key")
    apply_parser.add_argument("transition", help='e.g. "Vertical", "ChangeIndex(+7)"')
    apply_parser.set_defaults(handler=_cmd_apply)

    path_parser = subparsers.add_parser("path", help="Shortest transition paths")
    path_parser.add_argument("source")
    path_parser.add_argument("target")
    path_parser.add_argument("-n", type=int, default=settings.path_count,
                             help="Number of paths to list")
    path_parser.set_defaults(handler=_cmd_path)

    neighbors_parser = subparsers.add_parser("neighbors", help="Keys one transition away")
    neighbors_parser.add_argument("key")
    neighbors_parser.set_defaults(handler=_cmd_neighbors)

    cliques_parser = subparsers.add_parser("cliques", help="Maximal groups of compatible keys")
    cliques_parser.set_defaults(handler=_cmd_cliques)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a single command"""
    setup_logging(settings.log_level, settings.log_file)

    args = build_parser().parse_args(argv)

    if getattr(args, "n", 1) < 1:
        logger.error("Invalid path count", n=args.n)
        return EXIT_INVALID_INPUT

    try:
        args.handler(args)
    except ScaleError as e:
        logger.error("Invalid input", command=args.command, error=str(e))
        return EXIT_INVALID_INPUT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
