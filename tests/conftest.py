"""
Pytest configuration and fixtures for diagram_patterns.

Provides:
- Fresh DiagramContext / DiagramFactory fixtures
- Cleanup of the process default context and package logger
- Output helper for captured stdout
"""

import logging
from typing import List

import pytest

from diagram_patterns.context import DiagramContext, reset_default_context
from diagram_patterns.factories import DiagramFactory
from diagram_patterns.logging_config import PACKAGE_LOGGER


# ============================================================================
# Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Reset the default context and package logger around every test."""
    reset_default_context()
    yield
    reset_default_context()
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


# ============================================================================
# Factory Fixtures
# ============================================================================

@pytest.fixture
def context() -> DiagramContext:
    """Context writing to stdout."""
    return DiagramContext()


@pytest.fixture
def strict_context() -> DiagramContext:
    """Context that raises on unknown names."""
    return DiagramContext(strict=True)


@pytest.fixture
def factory(context: DiagramContext) -> DiagramFactory:
    """DiagramFactory bound to a fresh context."""
    return DiagramFactory(context)


@pytest.fixture
def stdout_lines(capsys):
    """Return captured stdout as a list of lines, consuming it."""
    def _read() -> List[str]:
        return capsys.readouterr().out.splitlines()
    return _read
