from __future__ import annotations

"""
Nested-Object Materializer.

Walks a mapping-of-mappings description: string values become files with
that exact content, mapping values become subdirectories. The hierarchy
is explicit, so no depth inference is involved. The first failure aborts
the walk.
"""

import logging
import os
from typing import Mapping, Optional

from treescaffold.domain.build_models import MaterializeReport
from treescaffold.domain.errors import CreateFailedError
from treescaffold.domain.structure_models import StructureObject
from treescaffold.infra.fs import FileSystemAdapter, LocalFileSystem

logger = logging.getLogger(__name__)


def materialize_object(
        structure: StructureObject,
        base_path: str,
        fs: Optional[FileSystemAdapter] = None,
) -> MaterializeReport:
    """
    Create one directory or file per key, in mapping order.

    The base directory is ensured first; it is not listed in the report.

    Args:
        structure: Parsed description object.
        base_path: Absolute directory the entries are created under.
        fs: Filesystem adapter; defaults to the local disk.

    Returns:
        MaterializeReport: Operations issued, in order.

    Raises:
        CreateFailedError: A value has an unsupported type, a key escapes
                           its parent, or a filesystem operation failed.
    """
    fs = fs or LocalFileSystem()
    report = MaterializeReport()

    if not isinstance(structure, Mapping):
        raise CreateFailedError(
            base_path, f"expected an object, received {type(structure).__name__}"
        )

    # The base may not exist yet when a description is the only input
    fs.ensure_directory(base_path)
    _walk(structure, base_path, fs, report)

    logger.info(
        f"Object structure materialized under {base_path}: "
        f"{len(report.directories)} directories, {len(report.files)} files."
    )
    return report


def _walk(
        structure: StructureObject,
        base_path: str,
        fs: FileSystemAdapter,
        report: MaterializeReport,
) -> None:
    for name, value in structure.items():
        full_path = os.path.join(base_path, name)

        if not name or os.path.isabs(name) or ".." in name.replace("\\", "/").split("/"):
            raise CreateFailedError(full_path, "invalid entry name")

        if isinstance(value, str):
            fs.write_file(full_path, value)
            report.files.append(full_path)
        elif isinstance(value, Mapping):
            fs.ensure_directory(full_path)
            report.directories.append(full_path)
            _walk(value, full_path, fs, report)
        else:
            raise CreateFailedError(
                full_path,
                f"unsupported value type '{type(value).__name__}' "
                "(expected string contents or nested object)",
            )
