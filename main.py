"""
Entry point: runs diagram requests through the DiagramFactory.

Usage:
    python main.py [--request ELEMENT TYPE COORD ...] [--config PATH]
                   [--strict] [--verbose] [--log-json PATH]

Without --request the fixed demo sequence is run:
    python main.py
    python main.py --request Graph Bar "(1,2)" --request Figure StarColor "(0,0)"
    python main.py --strict --request Shape Bar "(1,2)"   # exit code 1
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from diagram_patterns.context import DiagramContext
from diagram_patterns.errors import DiagramError
from diagram_patterns.factories import DiagramFactory, DiagramResult
from diagram_patterns.logging_config import LogContext, log_timing, setup_logging
from diagram_patterns.project_config import ProjectConfig, load_config

logger = logging.getLogger("diagram_patterns.main")

Request = Tuple[str, str, str]

# Graphs go through the proxy, figures through the flyweight pool.
DEMO_REQUESTS: List[Request] = [
    ("Graph", "Line", "(10,20)"),
    ("Graph", "Bar", "(15,30)"),
    ("Figure", "CircleColor", "(5,5)"),
    ("Figure", "SquareBW", "(2,3)"),
]


def run_requests(factory: DiagramFactory, requests: Sequence[Request]) -> List[DiagramResult]:
    """Run requests in order and collect the results.

    Args:
        factory: factory to route requests through.
        requests: (element, type, coord) triples.

    Returns:
        One result per request (None for ignored requests).

    Raises:
        UnknownDiagramError: in strict mode, on the first unknown name.
    """
    results: List[DiagramResult] = []
    with log_timing(logger, "diagram requests", requests=len(requests)):
        for index, (element, diagram_type, coord) in enumerate(requests, start=1):
            with LogContext(request=index):
                logger.debug("Request %s %s at %s", element, diagram_type, coord)
                results.append(factory.get_diagram(element, diagram_type, coord))
    return results


def _configure(args: argparse.Namespace) -> ProjectConfig:
    config = load_config(explicit_config=args.config)

    if args.strict:
        config.dispatch.strict = True
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.log_json:
        config.logging.json_file = args.log_json

    setup_logging(
        level=config.logging.level_value,
        json_file=config.logging.json_file,
        use_colors=config.logging.use_colors,
    )
    return config


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run diagram requests through the pattern factories.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--request", "-r",
        nargs=3,
        action="append",
        metavar=("ELEMENT", "TYPE", "COORD"),
        dest="requests",
        help="Request to run, e.g. Graph Line '(10,20)'. Repeatable; replaces the demo.",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to a .diagrams.json configuration file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unknown element or graph type instead of ignoring it.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at DEBUG level (stderr).",
    )
    parser.add_argument(
        "--log-json",
        default=None,
        dest="log_json",
        help="Also write JSON log records to this file.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)

    requests = [tuple(r) for r in args.requests] if args.requests else DEMO_REQUESTS

    try:
        config = _configure(args)
        factory = DiagramFactory(DiagramContext.from_config(config))
        run_requests(factory, requests)
    except DiagramError as exc:
        logger.critical("Request rejected: %s", exc)
        sys.exit(1)
    except ValueError as exc:
        logger.critical("Configuration error: %s", exc)
        sys.exit(1)
    except Exception as exc:
        logger.critical("Unexpected error: %s", exc, exc_info=True)
        sys.exit(2)


if __name__ == "__main__":
    main()
