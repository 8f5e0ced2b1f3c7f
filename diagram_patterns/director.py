"""Director: runs a builder through the fixed graph sequence."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from diagram_patterns.builders import Builder

logger = logging.getLogger(__name__)


@dataclass
class GraphBuild:
    """Result of one graph construction."""
    variant: str
    coord: str
    lines: List[str] = field(default_factory=list)


class Director:
    """Sequences a builder: set coordinate, calc, draw, drag."""

    def __init__(self, builder: Optional[Builder] = None):
        self.builder = builder

    def set_builder(self, builder: Builder) -> None:
        self.builder = builder

    def construct(self, variant: str, coord: str) -> GraphBuild:
        """Run the build sequence on the bound builder.

        Args:
            variant: graph type name, carried into the result
            coord: coordinate passed to every step

        Returns:
            GraphBuild with the emitted lines in order

        Raises:
            RuntimeError: if no builder is bound
        """
        if self.builder is None:
            raise RuntimeError("Director has no builder bound")

        logger.debug("Constructing %s graph at %s", variant, coord)
        self.builder.set_coord(coord)
        lines = [
            self.builder.calc(coord),
            self.builder.draw(),
            self.builder.drag(coord),
        ]
        return GraphBuild(variant=variant, coord=coord, lines=lines)
