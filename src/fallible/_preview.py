"""Bounded ``repr`` for payloads shown in diagnostic messages."""

from __future__ import annotations

import logging
from typing import Any

from fallible.config import Settings, resolve_settings
from fallible.errors import ConfigurationError

__all__ = ["preview"]

log = logging.getLogger(__name__)

_MARKER = "... [TRUNCATED]"


def _truncate(s: str, limit: int) -> str:
    return s if len(s) <= limit else s[:limit] + _MARKER


def _preview_limit() -> int:
    """Read ``preview_chars`` from ``os.environ`` only, never from ``.env``.

    An invalid value falls back to the default so that building an unwrap
    error can only ever raise the unwrap error itself.
    """
    try:
        return resolve_settings(dotenv=False).preview_chars
    except ConfigurationError as e:
        log.debug("Ignoring invalid preview setting: %s", e)
        return Settings().preview_chars


def preview(payload: Any, *, limit: int | None = None) -> str:
    """Return ``repr(payload)`` cut to ``limit`` characters.

    ``limit`` defaults to the ``preview_chars`` setting. A payload whose
    ``__repr__`` raises is rendered by type name instead.
    """
    if limit is None:
        limit = _preview_limit()
    try:
        text = repr(payload)
    except Exception:  # a broken __repr__ must not mask the unwrap error
        text = f"<unrepresentable {type(payload).__name__}>"
    return _truncate(text, limit)
