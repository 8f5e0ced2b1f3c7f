"""Text output shared by all diagram components."""

from typing import Optional, TextIO


def emit(line: str, stream: Optional[TextIO] = None) -> str:
    """Write one line and return it.

    ``stream=None`` resolves to ``sys.stdout`` at call time, so
    redirected or captured stdout is honoured.
    """
    print(line, file=stream)
    return line
