"""Outcome type for explicit error handling.

An ``Outcome`` is either a ``Success`` holding a value or a ``Failure``
holding an error. Fallible operations return one instead of raising, and
callers branch on it with the ``is_success``/``is_failure`` discriminants or
a ``match`` statement::

    match load(path):
        case Success(value):
            use(value)
        case Failure(error):
            report(error)

Both variants are frozen, so no method mutates an instance: transformations
build a new outcome, or return ``self`` when they do not apply to the
variant at hand.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import dataclasses
import logging
from typing import Any, ClassVar, Literal, NoReturn, TypeIs
from warnings import deprecated

from fallible._preview import preview
from fallible.errors import HINTS, UnwrapErrorOnSuccess, UnwrapOnFailure

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """The successful variant, holding ``value``."""

    tag: ClassVar[Literal["success"]] = "success"

    value: T

    @property
    def is_success(self) -> Literal[True]:
        return True

    @property
    def is_failure(self) -> Literal[False]:
        return False

    def map[U](self, fn: Callable[[T], U]) -> Success[U]:
        """Apply ``fn`` to the value and wrap the result in a new Success."""
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> Success[T]:
        """Return self; there is no error to map."""
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Raise ``UnwrapErrorOnSuccess``; a Success holds no error."""
        shown = preview(self.value)
        log.debug("unwrap_error() called on Success: %s", shown)
        raise UnwrapErrorOnSuccess(
            f"Called unwrap_error() on a Success: {shown}",
            value=self.value,
            hint=HINTS["unwrap_error_on_success"],
        )

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def and_then[U, E](self, fn: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """Pass the value to ``fn`` and return its outcome as-is."""
        return fn(self.value)

    def or_else(self, fn: Callable[[Any], Any]) -> Success[T]:
        """Return self; only a Failure is recovered."""
        return self

    def contains(self, value: object) -> bool:
        return bool(self.value == value)

    def contains_error(self, error: object) -> Literal[False]:
        return False


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """The failed variant, holding ``error``.

    ``error`` is any value the caller chooses to describe the failure; it
    need not be an exception.
    """

    tag: ClassVar[Literal["failure"]] = "failure"

    error: E

    @property
    def is_success(self) -> Literal[False]:
        return False

    @property
    def is_failure(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        """Return self; there is no value to map."""
        return self

    def map_error[F](self, fn: Callable[[E], F]) -> Failure[F]:
        """Apply ``fn`` to the error and wrap the result in a new Failure."""
        return Failure(fn(self.error))

    def unwrap(self) -> NoReturn:
        """Raise ``UnwrapOnFailure`` carrying the held error.

        When the error is an exception it is also chained as ``__cause__``
        so the original traceback survives.
        """
        shown = preview(self.error)
        log.debug("unwrap() called on Failure: %s", shown)
        exc = UnwrapOnFailure(
            f"Called unwrap() on a Failure: {shown}",
            error=self.error,
            hint=HINTS["unwrap_on_failure"],
        )
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_error(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def and_then(self, fn: Callable[[Any], Any]) -> Failure[E]:
        """Return self without calling ``fn``; the chain stops here."""
        return self

    def or_else[T, F](self, fn: Callable[[E], Outcome[T, F]]) -> Outcome[T, F]:
        """Pass the error to ``fn`` and return its outcome as-is."""
        return fn(self.error)

    def contains(self, value: object) -> Literal[False]:
        return False

    def contains_error(self, error: object) -> bool:
        return bool(self.error == error)


type Outcome[T, E] = Success[T] | Failure[E]
"""Either a Success[T] or a Failure[E]."""

type AsyncOutcome[T, E] = Awaitable[Outcome[T, E]]
"""An awaitable that resolves to an Outcome[T, E]."""


def success[T](value: T) -> Success[T]:
    """Wrap ``value`` in a Success. Any value is accepted, including None."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Wrap ``error`` in a Failure. Any value is accepted, including None."""
    return Failure(error)


@deprecated("is_success_outcome() is deprecated; read the .is_success property instead")
def is_success_outcome[T, E](outcome: Outcome[T, E]) -> TypeIs[Success[T]]:
    return outcome.is_success


@deprecated("is_failure_outcome() is deprecated; read the .is_failure property instead")
def is_failure_outcome[T, E](outcome: Outcome[T, E]) -> TypeIs[Failure[E]]:
    return outcome.is_failure


__all__ = [
    "AsyncOutcome",
    "Failure",
    "Outcome",
    "Success",
    "failure",
    "is_failure_outcome",
    "is_success_outcome",
    "success",
]
