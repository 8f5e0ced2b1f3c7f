"""
Process context owning the one-per-variant objects.

Replaces hidden singletons: the Bar and Line builders, the shared
drawing proxy and the figure factory live on a ``DiagramContext``
that callers construct and pass around. ``get_default_context()``
provides a lazily created context for callers that do not inject
one; ``reset_default_context()`` ends its lifetime.

Not thread-safe: a context is meant to be used from one thread.
"""

import logging
from typing import Dict, Optional, TextIO

from diagram_patterns.builders import BUILDER_CLASSES, GraphBuilder
from diagram_patterns.flyweight import FigureFactory, FlyweightFactory
from diagram_patterns.kinds import DEFAULT_COLOR_MARKER, GraphVariant
from diagram_patterns.project_config import ProjectConfig
from diagram_patterns.proxy import DrawGraph

logger = logging.getLogger(__name__)


class DiagramContext:
    """Holds one builder per graph variant and the figure factory.

    Args:
        stream: output stream for every component (stdout if None)
        strict: raise on unknown element/type names instead of ignoring them
        color_marker: substring selecting colored flyweights
        max_figures: flyweight pool bound (None = never evict)
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        strict: bool = False,
        color_marker: str = DEFAULT_COLOR_MARKER,
        max_figures: Optional[int] = None,
    ):
        self.stream = stream
        self.strict = strict
        self.proxy = DrawGraph(stream=stream)
        self.builders: Dict[GraphVariant, GraphBuilder] = {
            variant: cls(self.proxy, stream)
            for variant, cls in BUILDER_CLASSES.items()
        }
        self.flyweights = FlyweightFactory(
            color_marker=color_marker,
            max_size=max_figures,
            stream=stream,
        )
        self.figure_factory = FigureFactory(self.flyweights, stream=stream)

    @classmethod
    def from_config(cls, config: ProjectConfig, stream: Optional[TextIO] = None) -> 'DiagramContext':
        """Create a context from project configuration."""
        return cls(
            stream=stream,
            strict=config.dispatch.strict,
            color_marker=config.flyweight.color_marker,
            max_figures=config.flyweight.max_size,
        )

    def builder(self, variant: GraphVariant) -> GraphBuilder:
        """The builder serving a variant."""
        return self.builders[variant]

    @property
    def bar_builder(self) -> GraphBuilder:
        return self.builders[GraphVariant.BAR]

    @property
    def line_builder(self) -> GraphBuilder:
        return self.builders[GraphVariant.LINE]


_default_context: Optional[DiagramContext] = None


def get_default_context() -> DiagramContext:
    """Return the process default context, creating it on first use."""
    global _default_context
    if _default_context is None:
        _default_context = DiagramContext()
        logger.debug("Default diagram context created")
    return _default_context


def set_default_context(context: Optional[DiagramContext]) -> None:
    """Install ``context`` as the process default (None clears it)."""
    global _default_context
    _default_context = context


def reset_default_context() -> None:
    """Discard the default context; the next use creates a fresh one."""
    set_default_context(None)
