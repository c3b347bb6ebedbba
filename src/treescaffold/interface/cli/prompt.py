from __future__ import annotations

"""
Missing-Parameter Resolution.

A resolver is a callable asked for a required parameter the command line
did not provide. It returns the value, or None when it cannot supply one.
The CLI receives its resolver as a collaborator, so tests and
non-interactive callers can swap in their own.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

logger = logging.getLogger(__name__)

# (parameter name, prompt text) -> value or None
ParameterResolver = Callable[[str, str], Optional[str]]


class InteractivePrompt:
    """
    Resolver that asks the user on the terminal.

    Declines (returns None) when the input stream is not interactive, so
    scripted invocations fail fast instead of blocking.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def __call__(self, name: str, message: str) -> Optional[str]:
        stream = self._stream or sys.stdin
        if not stream.isatty():
            logger.debug(f"Non-interactive input; cannot prompt for '{name}'.")
            return None

        try:
            value = input(message)
        except EOFError:
            return None

        value = value.strip()
        return value or None


def decline_prompt(name: str, message: str) -> Optional[str]:
    """Resolver that never supplies a value."""
    logger.debug(f"Prompting disabled; '{name}' left unresolved.")
    return None
