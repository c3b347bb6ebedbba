from __future__ import annotations

"""
Build Domain Data Models.

Defines the report accumulated by the materializers and the unified
result object exchanged between the build engine and the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# MATERIALIZATION REPORT
# -----------------------------------------------------------------------------

@dataclass
class MaterializeReport:
    """
    Ordered record of the operations issued by one materialization pass.

    Attributes:
        directories: Absolute paths of directories ensured, in issue order.
        files: Absolute paths of files written, in issue order.
        warnings: Non-fatal diagnostics (skipped malformed lines).
    """
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# BUILD RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result of a complete scaffold run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Stable identifier of the failure class.
        structure_path: Normalized path of the description file.
        output_dir: Normalized output root.
        structure_format: Encoding chosen by the format detector.
        dry_run: Whether the run only planned operations.
        directories: Directories ensured (or planned).
        files: Files written (or planned).
        warnings: Non-fatal diagnostics emitted during the run.
        tree_lines: Rendered preview of the output root, when requested.
    """
    ok: bool
    error: str
    error_kind: str

    structure_path: str
    output_dir: str
    structure_format: str = ""
    dry_run: bool = False

    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)

    @property
    def summary(self) -> Dict[str, Any]:
        return {
            "directories": len(self.directories),
            "files": len(self.files),
            "warnings": len(self.warnings),
            "dry_run": self.dry_run,
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        structure_format: str = "",
) -> BuildResult:
    """
    Create a failed build result.

    Operations issued before the failure stay on disk but are not listed:
    the result only describes the failure.

    Args:
        error: Human-readable failure description.
        error_kind: Stable failure identifier.
        cfg: Configuration used during the run.
        structure_format: Detected encoding, if detection happened.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        structure_path=cfg.get("structure_path", ""),
        output_dir=cfg.get("output_dir", ""),
        structure_format=structure_format,
        dry_run=bool(cfg.get("dry_run", False)),
    )


def create_success_result(
        cfg: Dict[str, Any],
        structure_format: str,
        report: MaterializeReport,
        tree_lines: Optional[List[str]] = None,
) -> BuildResult:
    """
    Create a successful build result.

    Args:
        cfg: Configuration used during the run.
        structure_format: Detected encoding.
        report: Materialization report of the run.
        tree_lines: Optional rendered preview of the output root.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        error_kind="",
        structure_path=cfg.get("structure_path", ""),
        output_dir=cfg.get("output_dir", ""),
        structure_format=structure_format,
        dry_run=bool(cfg.get("dry_run", False)),
        directories=list(report.directories),
        files=list(report.files),
        warnings=list(report.warnings),
        tree_lines=tree_lines or [],
    )
