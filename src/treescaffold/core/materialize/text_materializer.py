from __future__ import annotations

"""
Tree-Text Materializer.

Reconstructs a directory hierarchy from an indented tree listing and
issues the matching create operations. Indentation is the only structural
signal: each line's depth is compared against the depths of the currently
open ancestor directories (the frame stack), never against a fixed
indentation unit, so irregular widths are tolerated as long as they are
monotonic along each branch.
"""

import logging
import os
from typing import Iterable, List, Optional

from treescaffold.core.analysis.tree_parser import (
    parse_line,
    root_folder_name,
    strip_directory_marker,
    to_source_lines,
)
from treescaffold.domain.build_models import MaterializeReport
from treescaffold.domain.constants import ROOT_FRAME_DEPTH
from treescaffold.domain.errors import (
    CreateFailedError,
    EmptyStructureError,
    OrphanEntryError,
)
from treescaffold.domain.structure_models import Frame, ParsedEntry
from treescaffold.infra.fs import FileSystemAdapter, LocalFileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize_tree_text(
        lines: Iterable[str],
        output_root: str,
        fs: Optional[FileSystemAdapter] = None,
) -> MaterializeReport:
    """
    Create the directories and empty files described by a tree listing.

    Args:
        lines: Raw description lines in file order.
        output_root: Absolute directory the tree is created under.
        fs: Filesystem adapter; defaults to the local disk.

    Returns:
        MaterializeReport: Operations issued and lines skipped.

    Raises:
        EmptyStructureError: No non-blank line was supplied.
        OrphanEntryError: A line found no ancestor on the frame stack.
        CreateFailedError: A filesystem operation failed, or an entry
                           name points outside its parent directory.
    """
    fs = fs or LocalFileSystem()
    report = MaterializeReport()

    source_lines = to_source_lines(lines)
    if not source_lines:
        raise EmptyStructureError()

    # 1. Root folder: consumed before the general algorithm runs
    stack: List[Frame] = [Frame(depth=ROOT_FRAME_DEPTH, path=output_root)]
    first_line = source_lines[0]
    root_name = root_folder_name(first_line)
    if root_name is not None:
        source_lines = source_lines[1:]
        if root_name:
            root_path = _join_entry(output_root, root_name, first_line.line_number)
            fs.ensure_directory(root_path)
            report.directories.append(root_path)
            stack = [Frame(depth=ROOT_FRAME_DEPTH, path=root_path)]
            logger.debug(f"Root folder resolved: {root_path}")

    # 2. One stack update per remaining line
    for line in source_lines:
        entry = parse_line(line)
        if entry is None:
            msg = f"Line {line.display_number}: no entry name after decoration, skipped."
            logger.warning(msg)
            report.warnings.append(msg)
            continue

        _materialize_entry(entry, stack, fs, report)

    logger.info(
        f"Tree materialized under {output_root}: "
        f"{len(report.directories)} directories, {len(report.files)} files."
    )
    return report

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _materialize_entry(
        entry: ParsedEntry,
        stack: List[Frame],
        fs: FileSystemAdapter,
        report: MaterializeReport,
) -> None:
    """
    Reparent one entry against the frame stack and create it.

    Siblings and re-dents share the same rule: every frame at the same or
    a deeper depth is closed before the entry is attached.
    """
    while stack and stack[-1].depth >= entry.depth:
        stack.pop()

    if not stack:
        raise OrphanEntryError(entry.line_number, entry.name)

    target = _join_entry(stack[-1].path, strip_directory_marker(entry.name), entry.line_number)

    if entry.is_directory:
        fs.ensure_directory(target)
        report.directories.append(target)
        stack.append(Frame(depth=entry.depth, path=target))
        return

    fs.ensure_directory(os.path.dirname(target))
    fs.write_file(target, "")
    report.files.append(target)


def _join_entry(parent: str, name: str, line_number: int) -> str:
    """
    Join an entry name onto its parent, refusing names that escape it.

    Args:
        parent: Absolute parent directory.
        name: Entry name without its trailing directory marker.
        line_number: 0-based line the name came from.

    Raises:
        CreateFailedError: The name is absolute or climbs above the parent.
    """
    target = os.path.join(parent, name)
    segments = name.replace("\\", "/").split("/")
    if os.path.isabs(name) or ".." in segments:
        raise CreateFailedError(
            target, f"line {line_number + 1}: entry escapes its parent directory"
        )
    return target
