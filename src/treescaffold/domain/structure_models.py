from __future__ import annotations

"""
Structure Description Data Models.

Provides the immutable value objects that flow through the tree-text
parser and the materializers: raw source lines, parsed entries, stack
frames and the format selector.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

# -----------------------------------------------------------------------------
# FORMAT SELECTION
# -----------------------------------------------------------------------------

class StructureFormat(str, Enum):
    """Supported encodings of a structure description."""
    OBJECT = "object"
    TREE_TEXT = "tree_text"

# -----------------------------------------------------------------------------
# TREE-TEXT COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceLine:
    """
    One line of the description text.

    Attributes:
        line_number: 0-based index in the original text, assigned before
                     blank lines are discarded.
        content: Raw line content without the line terminator.
    """
    line_number: int
    content: str

    @property
    def display_number(self) -> int:
        """1-based line number for user-facing diagnostics."""
        return self.line_number + 1


@dataclass(frozen=True)
class ParsedEntry:
    """
    A decoration-free entry derived from a SourceLine.

    Attributes:
        line_number: 0-based index of the originating line.
        depth: Relative indentation measure, only ever compared to other depths.
        name: Entry name, still carrying its trailing directory marker.
        is_directory: Whether the entry names a directory.
    """
    line_number: int
    depth: int
    name: str
    is_directory: bool


@dataclass(frozen=True)
class Frame:
    """An open ancestor directory on the materialization stack."""
    depth: int
    path: str

# -----------------------------------------------------------------------------
# NESTED-OBJECT COMPONENTS
# -----------------------------------------------------------------------------

# String values are file contents, mapping values are subdirectories
StructureObject = Dict[str, Union["StructureObject", str, Any]]
