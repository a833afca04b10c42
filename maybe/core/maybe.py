"""Maybe type: a value, a deliberate absence, or a failure.

A `Maybe[T]` is exactly one of:

- `Some(value)`: a value is present,
- `Nothing()`: intentionally nothing, not an error,
- `Failure(error)`: the computation failed with `error`.

Every operation that runs caller-supplied code goes through the fault
guard, so a callback that raises turns the chain into a `Failure`
instead of propagating the exception.

Usage:
    result = (
        just(10)
        .transform(lambda x: x * 2)
        .filter(lambda x: x > 15)
        .transform(lambda x: x + 5)
    )
    value, present, error = result.extract()  # (25, True, None)

    # Or with pattern matching
    match parse_port(raw):
        case Some(port):
            print(f"Port: {port}")
        case Nothing():
            print("No port configured")
        case Failure(error):
            print(f"Invalid port: {error}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeGuard, cast

from .guard import guarded_call

__all__ = [
    "Maybe",
    "Some",
    "Nothing",
    "Failure",
    "just",
    "empty",
    "failed",
    "guard",
    "is_some",
    "is_nothing",
    "is_failure",
]

type Recovery[T] = tuple[T, BaseException | None]


def guard[T](fn: Callable[[], Maybe[T]]) -> Maybe[T]:
    """Run a container-producing computation under the fault guard.

    Args:
        fn: Zero-argument computation producing a Maybe.

    Returns:
        The container `fn` produced, or a Failure holding the fault it raised.
        A result that is not a Maybe becomes Failure(TypeError).
    """
    result, error = guarded_call(fn)
    if error is not None:
        return Failure(error)
    if not isinstance(result, (Some, Nothing, Failure)):
        return Failure(TypeError(f"expected a Maybe, got {type(result).__name__}"))
    return cast("Maybe[T]", result)


def _settle[T](value: T, error: BaseException | None) -> Maybe[T]:
    if error is not None:
        return Failure(error)
    return Some(value)


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A container holding a value.

    Attributes:
        value: The held value, exactly as supplied.
    """

    value: T

    def is_some(self) -> bool:
        """Returns True."""
        return True

    def is_nothing(self) -> bool:
        """Returns False."""
        return False

    def is_failure(self) -> bool:
        """Returns False."""
        return False

    def get_value(self) -> T:
        """Returns the held value."""
        return self.value

    def transform[U](self, f: Callable[[T], U]) -> Maybe[U]:
        """Applies a function to the held value.

        Args:
            f: Function to apply. It may return a different type.

        Returns:
            Some with the new value, or Failure if `f` raised.
        """
        return guard(lambda: Some(f(self.value)))

    def flat_transform[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Applies a function that itself returns a Maybe.

        The container produced by `f` is returned as-is (no nesting).

        Args:
            f: Function taking the value and returning a Maybe.

        Returns:
            The Maybe returned by `f`, or Failure if `f` raised.
        """
        return guard(lambda: f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keeps the value only if the predicate accepts it.

        Args:
            predicate: Test applied to the value.

        Returns:
            Self if the predicate is true, Nothing if it is false,
            Failure if it raised.
        """

        def run() -> Maybe[T]:
            if predicate(self.value):
                return self
            return Nothing()

        return guard(run)

    def side_effect(self, f: Callable[[T], object]) -> Maybe[T]:
        """Calls `f` with the value for its effect and returns self.

        Useful for logging or debugging in the middle of a chain. The
        return value of `f` is ignored; if it raises, Failure is returned.
        """

        def run() -> Maybe[T]:
            f(self.value)
            return self

        return guard(run)

    def extract(self) -> tuple[T, bool, None]:
        """Returns `(value, True, None)`."""
        return self.value, True, None

    def or_else(self, default: T) -> T:
        """Returns the held value; `default` is ignored."""
        return self.value

    def or_else_compute(self, f: Callable[[BaseException | None], T]) -> T:
        """Returns the held value; `f` is never called."""
        return self.value

    def recover_from_absence(self, f: Callable[[], Recovery[T]]) -> Maybe[T]:
        """Returns self unchanged (nothing to recover from)."""
        return self

    def recover_from_failure(self, f: Callable[[BaseException], Recovery[T]]) -> Maybe[T]:
        """Returns self unchanged (nothing to recover from)."""
        return self

    def fail_if_empty(self, f: Callable[[], BaseException | None]) -> Maybe[T]:
        """Returns self unchanged; the value is present."""
        return self

    def match(
        self,
        on_some: Callable[[T], object],
        on_nothing: Callable[[], object],
        on_failure: Callable[[BaseException], object],
    ) -> Maybe[T]:
        """Calls `on_some(value)` for its effect and returns self.

        Args:
            on_some: Called with the held value.
            on_nothing: Not called.
            on_failure: Not called.

        Returns:
            Self, or Failure if `on_some` raised.
        """
        return self.side_effect(on_some)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing[T]:
    """A container deliberately holding nothing.

    Nothing is not an error: it carries no diagnostic payload. All value
    operations pass it through untouched, and only `recover_from_absence`
    or `fail_if_empty` turn it into something else.
    """

    def is_some(self) -> bool:
        """Returns False."""
        return False

    def is_nothing(self) -> bool:
        """Returns True."""
        return True

    def is_failure(self) -> bool:
        """Returns False."""
        return False

    def transform[U](self, f: Callable[[T], U]) -> Maybe[U]:
        """Returns Nothing; `f` is never called."""
        return cast("Nothing[U]", self)

    def flat_transform[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Returns Nothing; `f` is never called."""
        return cast("Nothing[U]", self)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Returns self; `predicate` is never called."""
        return self

    def side_effect(self, f: Callable[[T], object]) -> Maybe[T]:
        """Returns self; `f` is never called."""
        return self

    def extract(self) -> tuple[None, bool, None]:
        """Returns `(None, False, None)`."""
        return None, False, None

    def or_else(self, default: T) -> T:
        """Returns the default value."""
        return default

    def or_else_compute(self, f: Callable[[BaseException | None], T]) -> T:
        """Returns `f(None)`.

        The None argument tells `f` the container is empty rather than failed.
        """
        return f(None)

    def recover_from_absence(self, f: Callable[[], Recovery[T]]) -> Maybe[T]:
        """Replaces the absence with the outcome of `f`.

        Args:
            f: Returns a `(value, error)` pair.

        Returns:
            Some(value) if error is None, Failure(error) otherwise,
            Failure if `f` raised.
        """

        def run() -> Maybe[T]:
            value, error = f()
            return _settle(value, error)

        return guard(run)

    def recover_from_failure(self, f: Callable[[BaseException], Recovery[T]]) -> Maybe[T]:
        """Returns self unchanged (nothing to recover from)."""
        return self

    def fail_if_empty(self, f: Callable[[], BaseException | None]) -> Maybe[T]:
        """Turns the absence into a Failure with the error `f` returns.

        If `f` returns None the container stays Nothing. If `f` raises,
        the raised fault becomes the error.
        """

        def run() -> Maybe[T]:
            error = f()
            if error is None:
                return self
            return Failure(error)

        return guard(run)

    def match(
        self,
        on_some: Callable[[T], object],
        on_nothing: Callable[[], object],
        on_failure: Callable[[BaseException], object],
    ) -> Maybe[T]:
        """Calls `on_nothing()` for its effect and returns self (or Failure if it raised)."""

        def run() -> Maybe[T]:
            on_nothing()
            return self

        return guard(run)

    def __repr__(self) -> str:
        return "Nothing()"


@dataclass(frozen=True, slots=True)
class Failure[T]:
    """A container holding the error of a failed computation.

    Attributes:
        error: The error value. It is the only carrier of failure information
            and is passed through every later operation untouched.
    """

    error: BaseException

    def is_some(self) -> bool:
        """Returns False."""
        return False

    def is_nothing(self) -> bool:
        """Returns False."""
        return False

    def is_failure(self) -> bool:
        """Returns True."""
        return True

    def get_error(self) -> BaseException:
        """Returns the held error."""
        return self.error

    def transform[U](self, f: Callable[[T], U]) -> Maybe[U]:
        """Returns self (same error); `f` is never called."""
        return cast("Failure[U]", self)

    def flat_transform[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Returns self (same error); `f` is never called."""
        return cast("Failure[U]", self)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self

    def side_effect(self, f: Callable[[T], object]) -> Maybe[T]:
        return self

    def extract(self) -> tuple[None, bool, BaseException]:
        """Returns `(None, False, error)`."""
        return None, False, self.error

    def or_else(self, default: T) -> T:
        """Returns the default value."""
        return default

    def or_else_compute(self, f: Callable[[BaseException | None], T]) -> T:
        """Returns `f(error)`, letting the fallback depend on the failure.

        `f` is not guarded: a fault raised here propagates to the caller.
        """
        return f(self.error)

    def recover_from_absence(self, f: Callable[[], Recovery[T]]) -> Maybe[T]:
        return self

    def recover_from_failure(self, f: Callable[[BaseException], Recovery[T]]) -> Maybe[T]:
        """Gives `f` a chance to turn the error into a value or another error.

        Args:
            f: Receives the held error and returns a `(value, error)` pair.

        Returns:
            Some(value) if the returned error is None (recovered),
            Failure(new_error) otherwise, Failure if `f` raised.
        """

        def run() -> Maybe[T]:
            value, error = f(self.error)
            return _settle(value, error)

        return guard(run)

    def fail_if_empty(self, f: Callable[[], BaseException | None]) -> Maybe[T]:
        """Returns self; the original error is kept and `f` is never called."""
        return self

    def match(
        self,
        on_some: Callable[[T], object],
        on_nothing: Callable[[], object],
        on_failure: Callable[[BaseException], object],
    ) -> Maybe[T]:
        """Calls `on_failure(error)` for its effect and returns self (or Failure if it raised)."""

        def run() -> Maybe[T]:
            on_failure(self.error)
            return self

        return guard(run)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for Maybe
type Maybe[T] = Some[T] | Nothing[T] | Failure[T]


def just[T](value: T) -> Maybe[T]:
    """Wrap a present value."""
    return Some(value)


def empty() -> Maybe[Any]:
    """Create an empty container."""
    return Nothing()


def failed(error: BaseException) -> Maybe[Any]:
    """Wrap an error in a failed container."""
    return Failure(error)


def is_some[T](m: Maybe[T]) -> TypeGuard[Some[T]]:
    """Type guard that checks if a Maybe is Some.

    Example:
        m: Maybe[int] = just(42)
        if is_some(m):
            # Type checker knows m is Some[int] here
            print(m.value)
    """
    return isinstance(m, Some)


def is_nothing[T](m: Maybe[T]) -> TypeGuard[Nothing[T]]:
    """Type guard that checks if a Maybe is Nothing."""
    return isinstance(m, Nothing)


def is_failure[T](m: Maybe[T]) -> TypeGuard[Failure[T]]:
    """Type guard that checks if a Maybe is Failure."""
    return isinstance(m, Failure)
