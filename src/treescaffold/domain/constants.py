from __future__ import annotations

"""
Domain Constants.

Centralizes the lexical vocabulary of structure descriptions: decoration
glyphs, directory markers, recognized file extensions and process exit
codes shared by the CLI and the build engine.
"""

from typing import FrozenSet

# -----------------------------------------------------------------------------
# TREE-TEXT VOCABULARY
# -----------------------------------------------------------------------------

# Box-drawing characters rendered by `tree`-like tools. They only mark
# indentation and carry no structural meaning of their own.
DECORATION_GLYPHS: FrozenSet[str] = frozenset(
    "│├└─┬┼┌┐┘┤╰╭┃┣┗━╠╚═║"
)

# Trailing marker that turns an entry into a directory
DIRECTORY_MARKER = "/"

# Depth assigned to the bottom frame of every materialization stack
ROOT_FRAME_DEPTH = -1

# -----------------------------------------------------------------------------
# FORMAT DETECTION
# -----------------------------------------------------------------------------

JSON_EXTENSION = ".json"
OBJECT_OPENING_CHAR = "{"

# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
