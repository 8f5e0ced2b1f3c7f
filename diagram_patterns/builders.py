"""
Graph builders.

Builders:
  - BarBuilder   — bar graphs
  - LineBuilder  — line graphs

One builder per variant is kept by ``DiagramContext``. Every step
receives the coordinate it works on; ``coord`` only records the most
recent request for this variant and is never read back by a step,
so interleaved requests cannot mix up each other's output.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Type

from diagram_patterns.kinds import GraphVariant
from diagram_patterns.output import emit
from diagram_patterns.proxy import DrawGraph, DrawProxy


class Builder(ABC):
    """Abstract graph builder."""

    @abstractmethod
    def set_coord(self, coord: str) -> None:
        """Record the coordinate of the current request."""

    @abstractmethod
    def calc(self, coord: str) -> str:
        """Calculate the graph at a coordinate."""

    @abstractmethod
    def draw(self) -> str:
        """Draw the graph."""

    @abstractmethod
    def drag(self, coord: str) -> str:
        """Drag the graph at a coordinate."""


class GraphBuilder(Builder):
    """Builder shared by both graph variants.

    Drawing is always delegated to the proxy.

    Args:
        proxy: drawing proxy (a private DrawGraph if omitted)
        stream: output stream (stdout if None)
    """

    variant: GraphVariant

    def __init__(self, proxy: Optional[DrawProxy] = None, stream: Optional[TextIO] = None):
        self.proxy = proxy if proxy is not None else DrawGraph(stream=stream)
        self.stream = stream
        self.coord: Optional[str] = None

    @property
    def name(self) -> str:
        return self.variant.value

    def set_coord(self, coord: str) -> None:
        self.coord = coord

    def calc(self, coord: str) -> str:
        return emit(f"{self.name} calc at {coord}", self.stream)

    def draw(self) -> str:
        return self.proxy.draw()

    def drag(self, coord: str) -> str:
        return emit(f"Drag {self.name} at {coord}", self.stream)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(coord={self.coord!r})"


class BarBuilder(GraphBuilder):
    """Bar graph builder."""

    variant = GraphVariant.BAR


class LineBuilder(GraphBuilder):
    """Line graph builder."""

    variant = GraphVariant.LINE


BUILDER_CLASSES: Dict[GraphVariant, Type[GraphBuilder]] = {
    GraphVariant.BAR: BarBuilder,
    GraphVariant.LINE: LineBuilder,
}
