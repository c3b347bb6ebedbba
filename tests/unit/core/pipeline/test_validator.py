from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies default injection, type coercion warnings and strict mode.
"""

import pytest

from treescaffold.core.pipeline.validator import validate_config


def test_validate_config_fills_defaults():
    cfg, warnings = validate_config({"structure_path": "tree.txt"})

    assert cfg["structure_path"] == "tree.txt"
    assert cfg["dry_run"] is False
    assert cfg["print_tree"] is False
    assert cfg["output_dir"]
    assert warnings == []


def test_validate_config_invalid_type_uses_defaults():
    cfg, warnings = validate_config(["not", "a", "dict"])
    assert cfg["structure_path"] == ""
    assert any("Invalid config type" in w for w in warnings)


def test_validate_config_coerces_booleans():
    cfg, warnings = validate_config({"dry_run": "yes", "print_tree": 0})

    assert cfg["dry_run"] is True
    assert cfg["print_tree"] is False
    assert len(warnings) == 2


def test_validate_config_blank_string_falls_back():
    cfg, _ = validate_config({"structure_path": "   "})
    assert cfg["structure_path"] == ""


def test_validate_config_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"dry_run": "maybe"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"output_dir": 42}, strict=True)
    with pytest.raises(TypeError):
        validate_config("config", strict=True)
