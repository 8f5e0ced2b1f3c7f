"""
diagram_patterns — Proxy, Flyweight, Builder, Singleton and Factory
wired together around a toy diagram domain.

The demo driver is main.py.
"""

from diagram_patterns.context import (
    DiagramContext,
    get_default_context,
    reset_default_context,
)
from diagram_patterns.errors import DiagramError, UnknownDiagramError
from diagram_patterns.factories import DiagramFactory, GraphFactory
from diagram_patterns.flyweight import FigureFactory, FlyweightFactory
from diagram_patterns.kinds import DiagramKind, FigureShade, GraphVariant
from diagram_patterns.logging_config import (
    setup_logging,
    get_logger,
    configure_default_logging,
    log_timing,
    LogContext,
)

__all__ = [
    "DiagramContext",
    "get_default_context",
    "reset_default_context",
    "DiagramError",
    "UnknownDiagramError",
    "DiagramFactory",
    "GraphFactory",
    "FigureFactory",
    "FlyweightFactory",
    "DiagramKind",
    "FigureShade",
    "GraphVariant",
    "setup_logging",
    "get_logger",
    "configure_default_logging",
    "log_timing",
    "LogContext",
]
