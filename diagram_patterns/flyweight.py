"""
Flyweight figures and their shared pool.

Intrinsic state (the figure type) lives in the flyweight; extrinsic
state (the coordinate) is supplied by the caller on every request.

Pool policy:
  - one shared instance per distinct key
  - ``max_size=None`` (default): the pool only grows, entries are
    never evicted and identity is stable for the pool's lifetime
  - ``max_size=N``: least recently used key is evicted once the pool
    holds N entries; a later request for an evicted key builds a new
    instance
"""

import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, List, Optional, TextIO, Type

from diagram_patterns.kinds import DEFAULT_COLOR_MARKER, FigureShade
from diagram_patterns.output import emit

logger = logging.getLogger(__name__)


class FlyweightFigure(ABC):
    """Shared figure keyed by its type."""

    shade: FigureShade

    def __init__(self, figure_type: str, stream: Optional[TextIO] = None):
        self.figure_type = figure_type
        self.stream = stream

    @abstractmethod
    def draw(self) -> str:
        """Draw the figure."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.figure_type!r})"


class ColoredFigure(FlyweightFigure):
    """Colored flyweight figure."""

    shade = FigureShade.COLORED

    def draw(self) -> str:
        return emit(
            f"[Colored Flyweight] Drawing colored figure of type: {self.figure_type}",
            self.stream,
        )


class BWFigure(FlyweightFigure):
    """Black & white flyweight figure."""

    shade = FigureShade.BW

    def draw(self) -> str:
        return emit(
            f"[B/W Flyweight] Drawing black and white figure of type: {self.figure_type}",
            self.stream,
        )


_FIGURE_CLASSES: Dict[FigureShade, Type[FlyweightFigure]] = {
    FigureShade.COLORED: ColoredFigure,
    FigureShade.BW: BWFigure,
}


class FlyweightFactory:
    """Pool of shared flyweight figures.

    Args:
        color_marker: substring that selects the colored variant
        max_size: eviction bound (None = never evict)
        stream: output stream handed to created figures
    """

    def __init__(
        self,
        color_marker: str = DEFAULT_COLOR_MARKER,
        max_size: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ):
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive or None, got {max_size}")
        self.color_marker = color_marker
        self.max_size = max_size
        self.stream = stream
        self._pool: 'OrderedDict[str, FlyweightFigure]' = OrderedDict()

    def get_figure(self, figure_type: str) -> FlyweightFigure:
        """Return the shared figure for a key, creating it on first use.

        Args:
            figure_type: figure key; any string is accepted

        Returns:
            The cached FlyweightFigure for this key
        """
        figure = self._pool.get(figure_type)
        if figure is not None:
            self._pool.move_to_end(figure_type)
            logger.debug("Flyweight hit for '%s'", figure_type)
            return figure

        shade = FigureShade.classify(figure_type, self.color_marker)
        figure = _FIGURE_CLASSES[shade](figure_type, self.stream)
        self._pool[figure_type] = figure
        logger.debug(
            "Flyweight created for '%s'", figure_type,
            extra={"shade": shade.value, "pool_size": len(self._pool)},
        )

        if self.max_size is not None and len(self._pool) > self.max_size:
            evicted, _ = self._pool.popitem(last=False)
            logger.debug("Flyweight evicted: '%s'", evicted)

        return figure

    def keys(self) -> List[str]:
        """Cached keys, least recently used first."""
        return list(self._pool)

    def clear(self) -> None:
        """Drop every cached figure."""
        self._pool.clear()

    def __len__(self) -> int:
        return len(self._pool)

    def __contains__(self, figure_type: object) -> bool:
        return figure_type in self._pool


class FigureFactory:
    """Hands out flyweight figures and draws them at a coordinate.

    Args:
        flyweights: pool to draw figures from (a private one if omitted)
        stream: output stream (stdout if None)
    """

    def __init__(self, flyweights: Optional[FlyweightFactory] = None, stream: Optional[TextIO] = None):
        self.flyweights = flyweights if flyweights is not None else FlyweightFactory(stream=stream)
        self.stream = stream

    def get_figure(self, figure_type: str, coord: str) -> FlyweightFigure:
        """Fetch the shared figure, print the coordinate and draw it.

        Args:
            figure_type: figure key; any string is accepted
            coord: coordinate printed before drawing

        Returns:
            The shared FlyweightFigure for ``figure_type``
        """
        figure = self.flyweights.get_figure(figure_type)
        emit(f"Coordinates: {coord}", self.stream)
        figure.draw()
        return figure
