"""Bridges from exception-raising code into outcomes, and aggregation.

``attempt`` and ``attempt_async`` are the boundary helpers: wrap a call to
code you do not control and get an Outcome back instead of an exception.
``collect`` folds many outcomes into one, stopping at the first Failure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fallible.outcome import Failure, Outcome, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

log = logging.getLogger(__name__)

_DEFAULT_CATCH: tuple[type[BaseException], ...] = (Exception,)


def attempt[T](
    fn: Callable[..., T],
    /,
    *args: Any,
    catch: tuple[type[BaseException], ...] = _DEFAULT_CATCH,
    **kwargs: Any,
) -> Outcome[T, BaseException]:
    """Call ``fn(*args, **kwargs)`` and capture listed exceptions as a Failure.

    Args:
        fn: The callable to invoke.
        *args: Positional arguments for ``fn``.
        catch: Exception types to capture. Anything else propagates.
        **kwargs: Keyword arguments for ``fn``.

    Returns:
        ``Success(result)``, or ``Failure(exc)`` when ``fn`` raised one of
        the ``catch`` types.

    Example:
        attempt(int, "42")    # Success(value=42)
        attempt(int, "x")     # Failure(error=ValueError(...))
    """
    try:
        return Success(fn(*args, **kwargs))
    except catch as e:
        log.debug(
            "attempt(%s) captured %s: %s",
            getattr(fn, "__qualname__", repr(fn)),
            type(e).__name__,
            e,
        )
        return Failure(e)


async def attempt_async[T](
    awaitable: Awaitable[T],
    /,
    *,
    catch: tuple[type[BaseException], ...] = _DEFAULT_CATCH,
) -> Outcome[T, BaseException]:
    """Await ``awaitable`` and capture listed exceptions as a Failure.

    Calling this returns a coroutine, i.e. an ``AsyncOutcome``. Nothing is
    scheduled here: the awaitable is awaited once, in the caller's task.
    ``asyncio.CancelledError`` is not an ``Exception`` and therefore still
    propagates with the default ``catch``.
    """
    try:
        return Success(await awaitable)
    except catch as e:
        log.debug("attempt_async captured %s: %s", type(e).__name__, e)
        return Failure(e)


def collect[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Combine outcomes into a Success of all values, or the first Failure.

    Iteration stops at the first Failure, so a lazy iterable is not
    consumed past it. The Failure returned is the same instance that was
    encountered.
    """
    values: list[T] = []
    for outcome in outcomes:
        match outcome:
            case Success(value):
                values.append(value)
            case Failure():
                return outcome
    return Success(values)


__all__ = ["attempt", "attempt_async", "collect"]
