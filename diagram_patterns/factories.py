"""
Diagram factories.

  - GraphFactory    — picks the Bar/Line builder and drives it via a Director
  - FigureFactory   — flyweight figures (see diagram_patterns.flyweight)
  - DiagramFactory  — top-level dispatch on the element kind

Names are matched exactly against ``DiagramKind`` / ``GraphVariant``.
An unknown name produces no output and returns None; the rejection is
logged at DEBUG. With ``strict`` enabled on the context it raises
``UnknownDiagramError`` instead.
"""

import logging
from typing import Callable, Dict, Optional, Type, Union

from diagram_patterns.context import DiagramContext, get_default_context
from diagram_patterns.director import Director, GraphBuild
from diagram_patterns.errors import UnknownDiagramError
from diagram_patterns.flyweight import FigureFactory, FlyweightFigure
from diagram_patterns.kinds import DiagramKind, GraphVariant, accepted_values

logger = logging.getLogger(__name__)

DiagramResult = Union[GraphBuild, FlyweightFigure, None]


class _ContextBound:
    """Resolves the context on every use unless one was injected."""

    def __init__(self, context: Optional[DiagramContext] = None):
        self._context = context

    @property
    def context(self) -> DiagramContext:
        return self._context if self._context is not None else get_default_context()

    def _reject(self, field: str, value: str, enum_cls: Type) -> None:
        if self.context.strict:
            raise UnknownDiagramError(field, value, accepted_values(enum_cls))
        logger.debug("Ignoring unknown %s '%s'", field, value)
        return None


class GraphFactory(_ContextBound):
    """Builds graphs with the context's one-per-variant builders."""

    def create_graph(self, graph_type: str, coord: str) -> Optional[GraphBuild]:
        """Build a graph: set coordinate, calc, draw (via proxy), drag.

        Args:
            graph_type: "Bar" or "Line"
            coord: coordinate label

        Returns:
            GraphBuild, or None if ``graph_type`` is unknown

        Raises:
            UnknownDiagramError: unknown ``graph_type`` in strict mode
        """
        variant = GraphVariant.parse(graph_type)
        if variant is None:
            return self._reject("graph type", graph_type, GraphVariant)

        director = Director()
        director.set_builder(self.context.builder(variant))
        return director.construct(graph_type, coord)


class DiagramFactory(_ContextBound):
    """Entry point: routes a request by element kind.

    Example:
        factory = DiagramFactory()
        factory.get_diagram("Graph", "Line", "(10,20)")
        factory.get_diagram("Figure", "CircleColor", "(5,5)")
    """

    def __init__(self, context: Optional[DiagramContext] = None):
        super().__init__(context)
        self.graph_factory = GraphFactory(context)
        self._handlers: Dict[DiagramKind, Callable[[str, str], DiagramResult]] = {
            DiagramKind.GRAPH: self.create_graph,
            DiagramKind.FIGURE: self.create_figure,
        }

    @property
    def figure_factory(self) -> FigureFactory:
        return self.context.figure_factory

    def create_graph(self, graph_type: str, coord: str) -> Optional[GraphBuild]:
        return self.graph_factory.create_graph(graph_type, coord)

    def create_figure(self, figure_type: str, coord: str) -> FlyweightFigure:
        return self.figure_factory.get_figure(figure_type, coord)

    def get_diagram(self, element: str, diagram_type: str, coord: str) -> DiagramResult:
        """Route a request to the graph or figure path.

        Args:
            element: "Graph" or "Figure"
            diagram_type: graph variant or figure key
            coord: coordinate label

        Returns:
            GraphBuild for graphs, the shared FlyweightFigure for figures,
            None when the request was ignored

        Raises:
            UnknownDiagramError: unknown element or graph type in strict mode
        """
        kind = DiagramKind.parse(element)
        if kind is None:
            return self._reject("element", element, DiagramKind)
        return self._handlers[kind](diagram_type, coord)
