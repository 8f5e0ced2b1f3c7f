"""
Drawing proxy used by the graph builders.

The proxy stands in for ``Graph.draw()``: it never forwards to its
subject and always prints the combined graphical + textual stub.
"""

from abc import ABC, abstractmethod
from typing import Optional, TextIO

from diagram_patterns.diagrams import Graph
from diagram_patterns.output import emit

GRAPH_PROXY_MESSAGE = "[Graph Proxy] Drawing graphical + textual stub"


class DrawProxy(ABC):
    """Drawing behaviour stand-in."""

    @abstractmethod
    def draw(self) -> str:
        """Draw in place of the real subject."""


class DrawGraph(DrawProxy):
    """Proxy for graph drawing.

    Stateless apart from its output stream, so one instance can be
    shared by every builder.

    Args:
        subject: real graph being stood in for (created if omitted)
        stream: output stream (stdout if None)
    """

    def __init__(self, subject: Optional[Graph] = None, stream: Optional[TextIO] = None):
        self.subject = subject if subject is not None else Graph(stream)
        self.stream = stream

    def draw(self) -> str:
        return emit(GRAPH_PROXY_MESSAGE, self.stream)
