from __future__ import annotations

"""
Configuration Domain Defaults.

The runtime configuration is a flat dictionary (session state) that drives
the build engine. Interfaces start from these defaults and merge their own
overrides on top.
"""

import os
from typing import Any, Dict, List

# Keys an interface layer is allowed to override
CONFIG_KEYS: List[str] = [
    "structure_path",
    "output_dir",
    "dry_run",
    "print_tree",
]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "structure_path": "",
        "output_dir": os.getcwd(),

        # Execution
        "dry_run": False,
        "print_tree": False,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override values into a base configuration.

    None values are ignored so unset CLI flags never mask defaults.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
