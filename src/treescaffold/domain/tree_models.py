from __future__ import annotations

"""
Directory Tree Structure Data Models.

Recursive type definitions used to describe an existing directory on
disk, for previews and for checking a scaffold against its description.
"""

from typing import Dict, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

# Directories map to their subtree, files map to None
Tree = Dict[str, Optional["Tree"]]
