from __future__ import annotations

"""
Core build orchestration.

Coordinates a complete scaffold run:
1. Validates configuration and normalizes paths.
2. Reads the description and rejects empty or malformed input before any
   filesystem mutation.
3. Detects the description format and dispatches to its materializer.
4. Optionally renders the resulting tree for preview.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from treescaffold.core.analysis.format_detector import detect_format
from treescaffold.core.analysis.tree_renderer import render_directory_tree
from treescaffold.core.materialize.object_materializer import materialize_object
from treescaffold.core.materialize.text_materializer import materialize_tree_text
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.domain.build_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from treescaffold.domain.errors import (
    EmptyStructureError,
    InputNotFoundError,
    InvalidJsonError,
    StructureError,
)
from treescaffold.domain.structure_models import StructureFormat, StructureObject
from treescaffold.infra.fs import (
    DryRunFileSystem,
    FileSystemAdapter,
    LocalFileSystem,
    ensure_output_root,
    normalize_path,
    read_structure_file,
)

logger = logging.getLogger(__name__)


def run_build(
        config: Optional[Dict[str, Any]],
        *,
        fs: Optional[FileSystemAdapter] = None,
) -> BuildResult:
    """
    Execute a full scaffold run.

    Args:
        config: The configuration dictionary (raw or partial).
        fs: Optional filesystem adapter override. When omitted, a dry-run
            configuration plans on a DryRunFileSystem and any other run
            writes to the local disk.

    Returns:
        BuildResult: Object containing status, operations and diagnostics.
    """
    logger.info("Build execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cfg["output_dir"] = normalize_path(cfg.get("output_dir", ""), os.getcwd())
    if cfg["structure_path"]:
        cfg["structure_path"] = normalize_path(cfg["structure_path"], os.getcwd())

    dry_run = bool(cfg["dry_run"])
    structure_format = ""

    try:
        # ---------------------------------------------------------------------
        # 2) Input Validation (no mutation yet)
        # ---------------------------------------------------------------------
        if not cfg["structure_path"]:
            raise InputNotFoundError("<no structure file given>")

        content = read_structure_file(cfg["structure_path"])
        if not content.strip():
            raise EmptyStructureError()

        fmt = detect_format(content, os.path.basename(cfg["structure_path"]))
        structure_format = fmt.value
        logger.info(f"Structure format detected: {structure_format}")

        structure_object = None
        if fmt is StructureFormat.OBJECT:
            structure_object = _parse_object(content, cfg["structure_path"])

        # ---------------------------------------------------------------------
        # 3) Materialization
        # ---------------------------------------------------------------------
        if fs is None:
            fs = DryRunFileSystem() if dry_run else LocalFileSystem()
        if not dry_run:
            ensure_output_root(cfg["output_dir"])

        if structure_object is not None:
            report = materialize_object(structure_object, cfg["output_dir"], fs=fs)
        else:
            report = materialize_tree_text(content.split("\n"), cfg["output_dir"], fs=fs)

    except StructureError as e:
        logger.error(f"Build failed ({e.kind}): {e.message}")
        return create_error_result(e.message, e.kind, cfg, structure_format)

    # -------------------------------------------------------------------------
    # 4) Preview & Finalize
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    if cfg["print_tree"] and not dry_run:
        tree_lines = render_directory_tree(cfg["output_dir"])

    if dry_run:
        logger.info("Dry run: no filesystem changes were made.")

    logger.info("Build completed successfully.")
    return create_success_result(cfg, structure_format, report, tree_lines)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_object(content: str, path: str) -> StructureObject:
    """Decode a nested-object description, enforcing a top-level object."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(path, str(e)) from e

    if not isinstance(data, dict):
        raise InvalidJsonError(
            path, f"top-level value must be an object, received {type(data).__name__}"
        )
    return data