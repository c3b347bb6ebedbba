from __future__ import annotations

"""
Build Error Taxonomy.

Every failure that aborts a scaffold run is a StructureError subclass.
Each class exposes a stable 'kind' identifier used by the JSON output and
a human-readable message used by the console reporter.
"""

from typing import Optional


class StructureError(Exception):
    """Base class for all fatal scaffold failures."""

    kind: str = "StructureError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputNotFoundError(StructureError):
    kind = "InputNotFound"

    def __init__(self, path: str) -> None:
        super().__init__(f"Structure file not found: {path}")
        self.path = path


class InputUnreadableError(StructureError):
    kind = "InputUnreadable"

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"Structure file cannot be read: {path} ({cause})")
        self.path = path
        self.cause = cause


class InvalidJsonError(StructureError):
    kind = "InvalidJson"

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"Invalid JSON structure in {path}: {cause}")
        self.path = path
        self.cause = cause


class EmptyStructureError(StructureError):
    kind = "EmptyStructure"

    def __init__(self, message: str = "Structure description is empty.") -> None:
        super().__init__(message)


class OrphanEntryError(StructureError):
    """Raised when no ancestor directory can be determined for a line."""

    kind = "OrphanEntry"

    def __init__(self, line_number: int, name: Optional[str] = None) -> None:
        # line_number is 0-based; diagnostics are 1-based
        label = f" '{name}'" if name else ""
        super().__init__(
            f"Line {line_number + 1}: entry{label} has no parent directory."
        )
        self.line_number = line_number
        self.name = name


class CreateFailedError(StructureError):
    kind = "CreateFailed"

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"Failed to create '{path}': {cause}")
        self.path = path
        self.cause = cause


class OutputNotWritableError(StructureError):
    kind = "OutputNotWritable"

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"Output directory is not writable: {path} ({cause})")
        self.path = path
        self.cause = cause
