"""Preflight checks run before any file is written."""

from __future__ import annotations

import shutil
from collections.abc import Iterable

from .errors import MissingToolError


def tool_exists(name: str) -> bool:
    """Return ``True`` if an executable called *name* is resolvable on ``PATH``."""
    return shutil.which(name) is not None


def check_available(tool_names: Iterable[str]) -> None:
    """Verify each tool in order and stop at the first one that is missing.

    Raises:
        MissingToolError: For the first tool that cannot be found.
    """
    for name in tool_names:
        if not tool_exists(name):
            raise MissingToolError(name)
