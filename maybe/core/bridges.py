"""Bridges between containers and conventional `(value, error)` pairs.

Code at the edges of a program often returns a value and an error side by
side. These helpers move such pairs into a Maybe chain and back out again.
"""

from __future__ import annotations

from collections.abc import Callable

from .maybe import Failure, Maybe, Some, guard

__all__ = ["from_pair", "try_compute", "to_pair"]


def from_pair[T](value: T, error: BaseException | None) -> Maybe[T]:
    """Build a container from a `(value, error)` pair.

    Returns:
        Failure(error) if error is not None, otherwise Some(value).
    """
    if error is not None:
        return Failure(error)
    return Some(value)


def try_compute[T](f: Callable[[], tuple[T, BaseException | None]]) -> Maybe[T]:
    """Run `f` under the fault guard and convert its pair into a container.

    Example:
        def read_port(path: Path) -> tuple[int, Exception | None]:
            try:
                return int(path.read_text()), None
            except (OSError, ValueError) as e:
                return 0, e

        port = try_compute(lambda: read_port(path)).or_else(8000)
    """

    def run() -> Maybe[T]:
        value, error = f()
        return from_pair(value, error)

    return guard(run)


def to_pair[T](m: Maybe[T]) -> tuple[T | None, BaseException | None]:
    """Return `(value, error)` for the container, dropping the presence flag.

    An empty container gives `(None, None)`.
    """
    value, _present, error = m.extract()
    return value, error
