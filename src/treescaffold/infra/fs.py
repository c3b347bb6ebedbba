from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem adapter consumed by the materializers, together
with path normalization and guarded input/output helpers. All OS-level
failures are translated into the domain error taxonomy here so the core
never handles raw OSError instances.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from treescaffold.domain.errors import (
    CreateFailedError,
    InputNotFoundError,
    InputUnreadableError,
    OutputNotWritableError,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ADAPTER INTERFACE
# -----------------------------------------------------------------------------

class FileSystemAdapter(ABC):
    """
    Abstract sink for the two mutations a scaffold run issues.
    """

    @abstractmethod
    def ensure_directory(self, path: str) -> None:
        """
        Create a directory and any missing parents. Idempotent.

        Raises:
            CreateFailedError: On permission or I/O failure.
        """
        pass

    @abstractmethod
    def write_file(self, path: str, contents: str) -> None:
        """
        Create or truncate a file with the given contents, written verbatim
        (no newline translation).

        Raises:
            CreateFailedError: On permission or I/O failure.
        """
        pass


class LocalFileSystem(FileSystemAdapter):
    """Adapter writing to the local disk."""

    def ensure_directory(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise CreateFailedError(path, str(e)) from e
        logger.debug(f"Directory ensured: {path}")

    def write_file(self, path: str, contents: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(contents)
        except OSError as e:
            raise CreateFailedError(path, str(e)) from e
        logger.debug(f"File written: {path} ({len(contents)} chars)")


class DryRunFileSystem(FileSystemAdapter):
    """
    Adapter that records planned operations without touching the disk.

    Attributes:
        operations: Ordered (action, path) pairs, action being 'mkdir' or 'write'.
    """

    def __init__(self) -> None:
        self.operations: List[Tuple[str, str]] = []

    def ensure_directory(self, path: str) -> None:
        self.operations.append(("mkdir", path))

    def write_file(self, path: str, contents: str) -> None:
        self.operations.append(("write", path))

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# GUARDED IO API
# -----------------------------------------------------------------------------

def read_structure_file(path: str) -> str:
    """
    Read a structure description file as UTF-8 text.

    A leading byte order mark is dropped so it never reaches an entry name
    or the JSON decoder.

    Args:
        path: Absolute path to the description file.

    Returns:
        str: Raw file content.

    Raises:
        InputNotFoundError: The path does not exist.
        InputUnreadableError: The path is not a regular readable text file.
    """
    if not os.path.exists(path):
        raise InputNotFoundError(path)
    if not os.path.isfile(path):
        raise InputUnreadableError(path, "not a regular file")

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InputUnreadableError(path, f"not valid UTF-8 text: {e.reason}") from e
    except OSError as e:
        raise InputUnreadableError(path, str(e)) from e


def ensure_output_root(path: str) -> None:
    """
    Create the output root if absent and check it accepts new entries.

    Args:
        path: Absolute output directory.

    Raises:
        OutputNotWritableError: The directory cannot be created or written.
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise OutputNotWritableError(path, str(e)) from e

    if not os.access(path, os.W_OK):
        raise OutputNotWritableError(path, "permission denied")
