from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for structure files and logging isolation.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treescaffold.infra.logging import (  # noqa: E402
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_structure(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Return a helper that writes a structure description file.

    The file is placed in a dedicated 'input' folder so that it never
    appears inside the output tree under test.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)

    def _write(content: str, name: str = "structure.txt") -> Path:
        path = input_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reset_logging():
    """Remove handlers and listeners installed by configure_logging."""

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener is not None and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, "_treescaffold_handler", False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
