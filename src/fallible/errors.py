"""Exception hierarchy for fallible.

Domain errors are whatever callers put inside a ``Failure``; the library
never inspects them. The exceptions below only signal misuse of the
abstraction itself (unwrapping the wrong variant) or bad configuration.
"""

from __future__ import annotations

from typing import Any

# --- Actionable Hints ---

HINTS = {
    "unwrap_on_failure": (
        "Check .is_success (or match on Success/Failure) first, "
        "or use unwrap_or()/unwrap_or_else() to supply a fallback."
    ),
    "unwrap_error_on_success": (
        "Check .is_failure (or match on Success/Failure) before calling unwrap_error()."
    ),
    "preview_chars": "Set FALLIBLE_PREVIEW_CHARS to an integer of at least 8.",
}


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(FallibleError):
    """Settings could not be resolved from overrides or the environment."""


class UnwrapError(FallibleError):
    """An unwrap accessor was called on the wrong variant.

    This is a programming error, comparable to a failed assertion. Code that
    may legitimately see either variant should branch on the discriminant
    instead of catching this.
    """


class UnwrapOnFailure(UnwrapError):
    """``unwrap()`` was called on a ``Failure``."""

    def __init__(self, message: str, *, error: Any, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.error = error


class UnwrapErrorOnSuccess(UnwrapError):
    """``unwrap_error()`` was called on a ``Success``."""

    def __init__(self, message: str, *, value: Any, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.value = value


__all__ = [
    "HINTS",
    "ConfigurationError",
    "FallibleError",
    "UnwrapError",
    "UnwrapErrorOnSuccess",
    "UnwrapOnFailure",
]
