from __future__ import annotations

"""
Tree Scanner and Renderer.

Reads an existing directory into the recursive Tree model and renders it
with box-drawing connectors. Directories carry the trailing marker, so the
rendered listing is itself a valid tree-text description.
"""

import logging
import os
from typing import List

from treescaffold.domain.constants import DIRECTORY_MARKER
from treescaffold.domain.tree_models import Tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_directory_tree(input_path: str) -> List[str]:
    """
    Scan a directory and render it as tree-text lines.

    The first line names the scanned directory itself, as a root folder.

    Args:
        input_path: Directory to describe.

    Returns:
        List[str]: Rendered lines.
    """
    input_path = os.path.abspath(input_path)
    tree_structure = scan_directory(input_path)

    lines: List[str] = [os.path.basename(input_path) + DIRECTORY_MARKER]
    render_tree_structure(tree_structure, lines, prefix="")
    logger.debug(f"Rendered {len(lines)} tree lines for {input_path}")

    return lines


def scan_directory(input_path: str) -> Tree:
    """
    Build the recursive Tree model of a directory.

    Empty directories are kept since they are meaningful scaffold output.

    Args:
        input_path: Absolute directory to walk.

    Returns:
        Tree: Nested mapping of names to subtrees, or to None for files.
    """
    tree_structure: Tree = {}

    for root, dirs, files in os.walk(input_path):
        dirs.sort()
        files.sort()

        rel_root = os.path.relpath(root, input_path)
        current_node_level: Tree = tree_structure
        if rel_root != ".":
            for p in rel_root.split(os.sep):
                next_level = current_node_level.setdefault(p, {})
                if isinstance(next_level, dict):
                    current_node_level = next_level

        for d in dirs:
            current_node_level.setdefault(d, {})

        for file_name in files:
            current_node_level[file_name] = None

    return tree_structure


def render_tree_structure(tree_structure: Tree, lines: List[str], prefix: str = "") -> None:
    """
    Recursively transform the Tree model into a list of strings.

    Uses standard connectors (├──, └──) and continuation bars (│) for
    nested directories.

    Args:
        tree_structure: Current Tree node to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries = sorted(tree_structure.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        node = tree_structure[entry]

        if isinstance(node, dict):
            lines.append(f"{prefix}{connector}{entry}{DIRECTORY_MARKER}")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node, lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector}{entry}")
