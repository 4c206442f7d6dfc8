"""Settings schema and environment resolution for fallible.

The library has very little to configure: everything here only shapes the
diagnostics produced when an outcome is unwrapped on the wrong variant.
Resolution precedence is defaults < environment (``FALLIBLE_*``, including
a project ``.env`` when ``resolve_settings`` is called directly) < explicit
overrides. Unwrap diagnostics read ``os.environ`` only and never load ``.env``.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from fallible.errors import HINTS, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "FALLIBLE_"

_DOTENV_LOADED = False


class Settings(BaseModel):
    """Validated, immutable library settings."""

    #: Maximum length of a payload ``repr`` inside unwrap error messages.
    preview_chars: int = Field(default=200, ge=8)

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("preview_chars", mode="before")
    @classmethod
    def strip_preview_chars(cls, v: Any) -> Any:
        """Trim whitespace from string inputs coming from the environment."""
        if isinstance(v, str):
            return v.strip()
        return v


def _try_load_dotenv() -> None:
    """Load a project ``.env`` once, without overriding the real environment.

    Tolerant: an unreadable or malformed ``.env`` is logged and skipped so
    settings still resolve from the process environment.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    try:
        from dotenv import load_dotenv

        load_dotenv(override=False)
    except Exception as e:
        log.debug("Skipping .env: %s: %s", type(e).__name__, e)


def load_env() -> dict[str, Any]:
    """Return ``FALLIBLE_*`` variables keyed by lower-cased field name."""
    fields = Settings.model_fields
    values: dict[str, Any] = {}
    for key, raw in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key.removeprefix(ENV_PREFIX).lower()
        if name in fields:
            values[name] = raw
    return values


def resolve_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    preview_chars: int | None = None,
    dotenv: bool = True,
) -> Settings:
    """Resolve settings from defaults, the environment and overrides.

    Args:
        overrides: Programmatic field overrides.
        preview_chars: Shortcut override for ``preview_chars``; wins over
            ``overrides`` and the environment.
        dotenv: Load a project ``.env`` (once per process) before reading
            the environment. Pass False to read ``os.environ`` only.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    if dotenv:
        _try_load_dotenv()

    merged: dict[str, Any] = {**load_env(), **(overrides or {})}
    if preview_chars is not None:
        merged["preview_chars"] = preview_chars

    try:
        return Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ()))
        hint = HINTS["preview_chars"] if field == "preview_chars" else None
        raise ConfigurationError(
            f"Invalid setting {field or '<root>'}: {err.get('msg')}", hint=hint
        ) from e


__all__ = ["ENV_PREFIX", "Settings", "load_env", "resolve_settings"]
