"""fallible: explicit success/failure values instead of exceptions.

Public API:
    - success() / failure(): Build an Outcome
    - Success / Failure: The two variants (usable in ``match``)
    - Outcome / AsyncOutcome: Type aliases for annotations
    - attempt() / attempt_async(): Capture exceptions as a Failure
    - collect(): Fold many outcomes into one
    - resolve_settings(): Inspect the active diagnostic settings
"""

from __future__ import annotations

import logging

from fallible.combinators import attempt, attempt_async, collect
from fallible.config import Settings, resolve_settings
from fallible.errors import (
    ConfigurationError,
    FallibleError,
    UnwrapError,
    UnwrapErrorOnSuccess,
    UnwrapOnFailure,
)
from fallible.outcome import (
    AsyncOutcome,
    Failure,
    Outcome,
    Success,
    failure,
    is_failure_outcome,
    is_success_outcome,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "AsyncOutcome",
    "ConfigurationError",
    "Failure",
    "FallibleError",
    "Outcome",
    "Settings",
    "Success",
    "UnwrapError",
    "UnwrapErrorOnSuccess",
    "UnwrapOnFailure",
    "__version__",
    "attempt",
    "attempt_async",
    "collect",
    "failure",
    "is_failure_outcome",
    "is_success_outcome",
    "resolve_settings",
    "success",
]
