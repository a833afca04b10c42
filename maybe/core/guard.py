"""Fault guard: run a callback and turn any raised fault into an error value.

`guarded_call` is the single place where caller-supplied code executes.
It never re-raises an `Exception`; instead it returns a `(result, error)`
pair where exactly one side is meaningful. Process-control exceptions
(`KeyboardInterrupt`, `SystemExit`, ...) are not absorbed.

Absorbed faults can be observed by installing a `FaultSink`, e.g. the
console-backed `maybe.output.faults.FaultReporter`.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from typing import Protocol

from .errors import Fault, Panic

__all__ = [
    "FaultSink",
    "as_error",
    "guarded_call",
    "get_fault_reporter",
    "set_fault_reporter",
]


class FaultSink(Protocol):
    """Receives every fault absorbed by the guard."""

    def report(self, error: BaseException) -> None: ...


_reporter: FaultSink | None = None


def set_fault_reporter(reporter: FaultSink | None) -> FaultSink | None:
    """Install a fault reporter (or remove it with None).

    Returns:
        The previously installed reporter, so callers can restore it.
    """
    global _reporter
    previous = _reporter
    _reporter = reporter
    return previous


def get_fault_reporter() -> FaultSink | None:
    """Return the installed fault reporter, if any."""
    return _reporter


def as_error(exc: Exception) -> BaseException:
    """Convert a raised fault into the error value a failed container holds.

    A `Panic` is unwrapped: an exception payload is used as-is, any other
    payload becomes `Fault(str(payload))`. Every other exception is its own
    error value.
    """
    if isinstance(exc, Panic):
        payload = exc.payload
        if isinstance(payload, BaseException):
            return payload
        return Fault(str(payload))
    return exc


def _notify(error: BaseException) -> None:
    # Reporting is best-effort: a broken sink must not undo the absorption.
    if _reporter is None:
        return
    with contextlib.suppress(Exception):
        _reporter.report(error)


def guarded_call[T](fn: Callable[[], T]) -> tuple[T, None] | tuple[None, BaseException]:
    """Run `fn` and capture any fault it raises.

    Returns:
        `(result, None)` when `fn` returns normally,
        `(None, error)` when it raises.
    """
    try:
        return fn(), None
    except Exception as e:
        error = as_error(e)
    _notify(error)
    return None, error
