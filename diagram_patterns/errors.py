"""Exceptions raised by the diagram factories in strict mode."""


class DiagramError(Exception):
    """Base class for diagram errors."""


class UnknownDiagramError(DiagramError):
    """An element kind or type name has no handler."""

    def __init__(self, field: str, value: str, accepted: str):
        self.field = field
        self.value = value
        self.accepted = accepted
        super().__init__(
            f"Unknown {field} {value!r} (accepted: {accepted})"
        )
