"""
Diagram kinds, graph variants and figure shades.

The string values are the exact names accepted by the factories
("Graph", "Figure", "Bar", "Line"). ``parse()`` returns ``None`` for
anything else so callers decide what an unknown name means.
"""

from enum import Enum
from typing import Optional


DEFAULT_COLOR_MARKER = "Color"


class DiagramKind(Enum):
    """Top-level element kind."""
    GRAPH = "Graph"
    FIGURE = "Figure"

    @classmethod
    def parse(cls, value: str) -> Optional['DiagramKind']:
        """Exact, case-sensitive lookup by value."""
        try:
            return cls(value)
        except ValueError:
            return None


class GraphVariant(Enum):
    """Graph builder variant."""
    BAR = "Bar"
    LINE = "Line"

    @classmethod
    def parse(cls, value: str) -> Optional['GraphVariant']:
        """Exact, case-sensitive lookup by value."""
        try:
            return cls(value)
        except ValueError:
            return None


class FigureShade(Enum):
    """Flyweight figure variant."""
    COLORED = "colored"
    BW = "bw"

    @classmethod
    def classify(cls, key: str, marker: str = DEFAULT_COLOR_MARKER) -> 'FigureShade':
        """Classify a figure key.

        Any key containing ``marker`` is colored, every other key
        (the empty string included) is black/white.

        Args:
            key: figure type key, e.g. "CircleColor"
            marker: substring selecting the colored variant

        Returns:
            FigureShade member
        """
        return cls.COLORED if marker in key else cls.BW


def accepted_values(enum_cls) -> str:
    """Comma-separated list of accepted names, for error messages."""
    return ", ".join(repr(m.value) for m in enum_cls)
