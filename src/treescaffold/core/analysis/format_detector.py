from __future__ import annotations

"""
Structure Format Detector.

Chooses between the nested-object and tree-text interpretations of a
description file. Validity is never checked here; the chosen
materializer reports malformed input.
"""

from treescaffold.domain.constants import JSON_EXTENSION, OBJECT_OPENING_CHAR
from treescaffold.domain.structure_models import StructureFormat


def detect_format(content: str, file_name: str) -> StructureFormat:
    """
    Decide which encoding a description uses.

    Args:
        content: File content (trimmed or raw).
        file_name: Name or path of the description file.

    Returns:
        StructureFormat: OBJECT for '.json' files or content opening with '{',
                         TREE_TEXT otherwise.
    """
    if (file_name or "").lower().endswith(JSON_EXTENSION):
        return StructureFormat.OBJECT
    if content.strip().startswith(OBJECT_OPENING_CHAR):
        return StructureFormat.OBJECT
    return StructureFormat.TREE_TEXT
