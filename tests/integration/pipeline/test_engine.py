from __future__ import annotations

"""
Integration tests for the Build Engine.

Drives run_build end-to-end against real structure files on disk:
format dispatch, error classification, dry runs and tree preview.
"""

import json
from pathlib import Path

from treescaffold.core.pipeline.engine import run_build
from treescaffold.infra.fs import DryRunFileSystem


def _config(structure: Path, output: Path, **overrides):
    cfg = {"structure_path": str(structure), "output_dir": str(output)}
    cfg.update(overrides)
    return cfg

# -----------------------------------------------------------------------------
# SUCCESS PATHS
# -----------------------------------------------------------------------------

def test_tree_text_build(tmp_path, write_structure):
    structure = write_structure("src/\n  index.js\n  utils/\n    helper.js\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.ok is True
    assert result.structure_format == "tree_text"
    assert (out / "src" / "utils" / "helper.js").is_file()
    assert result.summary["directories"] == 2
    assert result.summary["files"] == 2
    assert result.error == ""


def test_json_build_by_extension(tmp_path, write_structure):
    structure = write_structure(
        json.dumps({"src": {"index.js": "console.log(1)"}}), name="layout.json"
    )
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.ok is True
    assert result.structure_format == "object"
    assert (out / "src" / "index.js").read_text(encoding="utf-8") == "console.log(1)"


def test_json_build_by_content(tmp_path, write_structure):
    structure = write_structure('\n  {"a.txt": "hello"}\n', name="layout.txt")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.structure_format == "object"
    assert (out / "a.txt").read_text(encoding="utf-8") == "hello"


def test_warnings_are_reported(tmp_path, write_structure):
    structure = write_structure("src/\n│\n  main.py\n")
    result = run_build(_config(structure, tmp_path / "out"))

    assert result.ok is True
    assert len(result.warnings) == 1
    assert "Line 2" in result.warnings[0]


def test_print_tree_renders_output_root(tmp_path, write_structure):
    structure = write_structure("src/\n  main.py\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out, print_tree=True))

    assert result.tree_lines == ["out/", "└── src/", "    └── main.py"]


def test_output_dir_is_created_when_missing(tmp_path, write_structure):
    structure = write_structure("a.txt\n")
    out = tmp_path / "missing" / "nested"

    result = run_build(_config(structure, out))

    assert result.ok is True
    assert (out / "a.txt").is_file()

# -----------------------------------------------------------------------------
# DRY RUN
# -----------------------------------------------------------------------------

def test_dry_run_leaves_disk_untouched(tmp_path, write_structure):
    structure = write_structure("src/\n  main.py\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out, dry_run=True, print_tree=True))

    assert result.ok is True
    assert result.dry_run is True
    assert result.files == [str(out / "src" / "main.py")]
    assert result.tree_lines == []
    assert not out.exists()


def test_explicit_adapter_is_used(tmp_path, write_structure):
    structure = write_structure('{"a": {"b.txt": ""}}', name="s.json")
    fs = DryRunFileSystem()

    run_build(_config(structure, tmp_path / "out", dry_run=True), fs=fs)

    assert fs.operations == [
        ("mkdir", str(tmp_path / "out")),
        ("mkdir", str(tmp_path / "out" / "a")),
        ("write", str(tmp_path / "out" / "a" / "b.txt")),
    ]

# -----------------------------------------------------------------------------
# FAILURE PATHS
# -----------------------------------------------------------------------------

def test_missing_structure_file(tmp_path):
    out = tmp_path / "out"
    result = run_build(_config(tmp_path / "nope.txt", out))

    assert result.ok is False
    assert result.error_kind == "InputNotFound"
    assert not out.exists()


def test_no_structure_path_given(tmp_path):
    result = run_build({"output_dir": str(tmp_path)})
    assert result.ok is False
    assert result.error_kind == "InputNotFound"


def test_empty_structure_does_not_mutate(tmp_path, write_structure):
    structure = write_structure("  \n\n\t\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.error_kind == "EmptyStructure"
    assert not out.exists()


def test_invalid_json_does_not_mutate(tmp_path, write_structure):
    structure = write_structure('{"src": {', name="broken.json")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.ok is False
    assert result.error_kind == "InvalidJson"
    assert result.structure_format == "object"
    assert not out.exists()


def test_non_object_json_is_rejected(tmp_path, write_structure):
    structure = write_structure('["a", "b"]', name="list.json")
    result = run_build(_config(structure, tmp_path / "out"))

    assert result.error_kind == "InvalidJson"
    assert "list" in result.error


def test_create_failure_is_reported(tmp_path, write_structure):
    structure = write_structure("src/\n  main.py\n")
    out = tmp_path / "out"
    out.mkdir()
    (out / "src").write_text("blocker", encoding="utf-8")

    result = run_build(_config(structure, out))

    assert result.ok is False
    assert result.error_kind == "CreateFailed"
    assert str(out / "src") in result.error


def test_output_dir_over_file_is_not_writable(tmp_path, write_structure):
    structure = write_structure("a.txt\n")
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    result = run_build(_config(structure, blocker))

    assert result.error_kind == "OutputNotWritable"

# -----------------------------------------------------------------------------
# INPUT DECODING
# -----------------------------------------------------------------------------

def test_only_newline_separates_lines(tmp_path, write_structure):
    """Form feeds and other Unicode breaks stay inside the entry name."""
    structure = write_structure("src/\n  a\x0cb.py\n│\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.ok is True
    assert result.files == [str(out / "src" / "a\x0cb.py")]
    assert result.warnings[0].startswith("Line 3:")


def test_crlf_description(tmp_path, write_structure):
    structure = write_structure("src/\r\n  main.py\r\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.files == [str(out / "src" / "main.py")]


def test_byte_order_mark_is_ignored_for_tree_text(tmp_path, write_structure):
    structure = write_structure("\ufeffsrc/\n  a.py\n")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.directories == [str(out / "src")]
    assert (out / "src" / "a.py").is_file()


def test_byte_order_mark_is_ignored_for_objects(tmp_path, write_structure):
    structure = write_structure('\ufeff{"a.txt": "hi"}', name="layout.txt")
    out = tmp_path / "out"

    result = run_build(_config(structure, out))

    assert result.ok is True
    assert result.structure_format == "object"
    assert (out / "a.txt").read_text(encoding="utf-8") == "hi"
