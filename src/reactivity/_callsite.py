"""Call-site identities for refs and ids declared without an explicit key."""

from __future__ import annotations

import sys


def caller_identity(stacklevel: int = 1) -> str:
    """Location ("<filename>:<lineno>") stacklevel frames above our caller.

    With the default, a hook function calling this gets the location of
    whoever called the hook.
    """
    frame = sys._getframe(stacklevel + 1)
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"
