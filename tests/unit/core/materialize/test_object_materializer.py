from __future__ import annotations

"""
Unit tests for the Nested-Object Materializer.
"""

from unittest.mock import patch

import pytest

from treescaffold.core.materialize.object_materializer import materialize_object
from treescaffold.domain.errors import CreateFailedError
from treescaffold.infra.fs import DryRunFileSystem


def test_object_example_writes_contents_verbatim(tmp_path):
    report = materialize_object({"src": {"index.js": "console.log(1)"}}, str(tmp_path))

    assert (tmp_path / "src").is_dir()
    assert (tmp_path / "src" / "index.js").read_text(encoding="utf-8") == "console.log(1)"
    assert report.directories == [str(tmp_path / "src")]
    assert report.files == [str(tmp_path / "src" / "index.js")]


def test_missing_base_directory_is_created(tmp_path):
    base = tmp_path / "fresh" / "root"

    report = materialize_object({"a.txt": "x", "d": {}}, str(base))

    assert (base / "a.txt").read_text(encoding="utf-8") == "x"
    assert (base / "d").is_dir()
    assert str(base) not in report.directories


def test_object_iteration_order_is_preserved(tmp_path):
    fs = DryRunFileSystem()
    structure = {"b.txt": "", "a": {"z.txt": "z", "y": {}}, "c.txt": "c"}

    materialize_object(structure, str(tmp_path), fs=fs)

    assert fs.operations == [
        ("mkdir", str(tmp_path)),
        ("write", str(tmp_path / "b.txt")),
        ("mkdir", str(tmp_path / "a")),
        ("write", str(tmp_path / "a" / "z.txt")),
        ("mkdir", str(tmp_path / "a" / "y")),
        ("write", str(tmp_path / "c.txt")),
    ]


def test_empty_object_creates_nothing(tmp_path):
    report = materialize_object({}, str(tmp_path))
    assert report.directories == []
    assert report.files == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("bad_value", [42, None, ["a"], True])
def test_unsupported_value_type_fails(tmp_path, bad_value):
    with pytest.raises(CreateFailedError) as exc_info:
        materialize_object({"bad": bad_value}, str(tmp_path))
    assert exc_info.value.path == str(tmp_path / "bad")


def test_fail_fast_stops_at_first_failure(tmp_path):
    structure = {"first.txt": "1", "broken": 3, "never.txt": "n"}

    with pytest.raises(CreateFailedError):
        materialize_object(structure, str(tmp_path))

    assert (tmp_path / "first.txt").is_file()
    assert not (tmp_path / "never.txt").exists()


def test_escaping_key_is_rejected(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    with pytest.raises(CreateFailedError):
        materialize_object({"../escape.txt": "x"}, str(out))
    assert not (tmp_path / "escape.txt").exists()


def test_filesystem_error_is_wrapped(tmp_path):
    with patch("builtins.open", side_effect=PermissionError("Permission Denied")):
        with pytest.raises(CreateFailedError) as exc_info:
            materialize_object({"a.txt": "x"}, str(tmp_path))
    assert "Permission Denied" in exc_info.value.cause


def test_non_mapping_structure_fails(tmp_path):
    with pytest.raises(CreateFailedError):
        materialize_object(["not", "an", "object"], str(tmp_path))
