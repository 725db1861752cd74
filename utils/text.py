"""Text clean-up applied before any schedule pattern is matched."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[,;]+")


def normalize_input(value: str | None) -> str:
    """Lowercase, trim and collapse whitespace and ``,``/``;`` runs.

    The result is stable: normalizing an already normalized string returns it
    unchanged.
    """

    if not value:
        return ""
    collapsed = _WHITESPACE.sub(" ", str(value).lower().strip())
    return _SEPARATORS.sub(",", collapsed)
