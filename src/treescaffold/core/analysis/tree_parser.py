from __future__ import annotations

"""
Tree-Text Line Parser.

Turns the raw lines of an indented tree listing into decoration-free
entries. Decoration glyphs are only recognized inside the leading
indentation run of a line, so names that legitimately contain
box-drawing characters survive untouched.
"""

from typing import Iterable, List, Optional, Tuple

from treescaffold.domain.constants import DECORATION_GLYPHS, DIRECTORY_MARKER
from treescaffold.domain.structure_models import ParsedEntry, SourceLine

# Names that denote the output root itself ('tree' prints '.' as its root)
CURRENT_DIR_NAMES = (".", "./")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_source_lines(lines: Iterable[str]) -> List[SourceLine]:
    """
    Pair raw lines with their original index and drop blank ones.

    Line numbers are assigned before blank lines are dropped so that
    diagnostics point at the line the user actually wrote.

    Args:
        lines: Raw lines in file order.

    Returns:
        List[SourceLine]: Non-blank lines in original order.
    """
    return [
        SourceLine(line_number=index, content=content.rstrip("\r\n"))
        for index, content in enumerate(lines)
        if content.strip()
    ]


def split_source_lines(text: str) -> List[SourceLine]:
    """Split full description text into non-blank SourceLines."""
    return to_source_lines(text.split("\n"))


def strip_decoration(content: str) -> Tuple[int, str]:
    """
    Separate the indentation run of a line from the entry name.

    The run is the longest prefix made of whitespace and decoration glyphs.
    Glyphs in the run are dropped; the whitespace left over is the depth.

    Args:
        content: Raw line content.

    Returns:
        Tuple[int, str]: (depth, name). The name is empty for lines that
                         hold only decoration.
    """
    depth = 0
    index = 0
    for ch in content:
        if ch.isspace():
            depth += 1
        elif ch not in DECORATION_GLYPHS:
            break
        index += 1

    return depth, content[index:].strip()


def parse_line(line: SourceLine) -> Optional[ParsedEntry]:
    """
    Parse one SourceLine into a ParsedEntry.

    Args:
        line: Line to parse.

    Returns:
        Optional[ParsedEntry]: None when the line carries no name.
    """
    depth, name = strip_decoration(line.content)
    if not name:
        return None

    return ParsedEntry(
        line_number=line.line_number,
        depth=depth,
        name=name,
        is_directory=name.endswith(DIRECTORY_MARKER),
    )


def root_folder_name(line: SourceLine) -> Optional[str]:
    """
    Return the wrapper directory named by a leading root line.

    Args:
        line: The first non-blank line of the description.

    Returns:
        Optional[str]: The directory name without its marker, '' when the
                       line names the current directory, or None when the
                       line is an ordinary entry.
    """
    _, name = strip_decoration(line.content)
    if name in CURRENT_DIR_NAMES:
        return ""
    if not name.endswith(DIRECTORY_MARKER):
        return None
    return strip_directory_marker(name)


def strip_directory_marker(name: str) -> str:
    """Remove trailing directory markers from an entry name."""
    return name.rstrip(DIRECTORY_MARKER)
