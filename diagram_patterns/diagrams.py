"""
Base diagram interface and the two concrete diagrams.

Every diagram can calculate, draw and drag. ``Graph`` is the real
subject behind the graph proxy; ``Figure`` is the plain textual
diagram that flyweight figures replace.
"""

from abc import ABC, abstractmethod
from typing import Optional, TextIO

from diagram_patterns.output import emit


class Diagram(ABC):
    """Abstract diagram."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    @abstractmethod
    def calc(self) -> str:
        """Calculate the diagram."""

    @abstractmethod
    def draw(self) -> str:
        """Draw the diagram."""

    @abstractmethod
    def drag(self) -> str:
        """Drag the diagram."""


class Graph(Diagram):
    """Graphical diagram."""

    def calc(self) -> str:
        return emit("Calculating Graph", self.stream)

    def draw(self) -> str:
        return emit("[Graph] Drawing graphical representation.", self.stream)

    def drag(self) -> str:
        return emit("Dragging Graph", self.stream)


class Figure(Diagram):
    """Figure with a textual representation."""

    def calc(self) -> str:
        return emit("Calculating Figure", self.stream)

    def draw(self) -> str:
        return emit("[Figure Stub] Drawing textual stub.", self.stream)

    def drag(self) -> str:
        return emit("Dragging Figure", self.stream)
