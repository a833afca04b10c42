"""Type-changing adapters.

`Some.transform` and `Some.flat_transform` already accept functions that
change the carried type. These free functions express the same thing from
the outside of a chain, dispatching on the extracted state rather than on
the variant's own method, so they also work where only the extraction
triple is trusted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import cast

from .maybe import Failure, Maybe, Nothing, Some, guard

__all__ = ["map_across", "flat_map_across"]


def map_across[T, R](m: Maybe[T], f: Callable[[T], R]) -> Maybe[R]:
    """Apply `f` to the value of `m`, producing a container of the result type.

    Args:
        m: Input container.
        f: Function from the carried type to the result type.

    Returns:
        Failure(error) if `m` failed, Nothing if `m` is empty (in both cases
        `f` is never called), otherwise Some(f(value)), or Failure if `f`
        raised.
    """
    value, present, error = m.extract()
    if error is not None:
        return Failure(error)
    if not present:
        return Nothing()
    held = cast(T, value)
    return guard(lambda: Some(f(held)))


def flat_map_across[T, R](m: Maybe[T], f: Callable[[T], Maybe[R]]) -> Maybe[R]:
    """Like `map_across`, but `f` returns a container which is used directly."""
    value, present, error = m.extract()
    if error is not None:
        return Failure(error)
    if not present:
        return Nothing()
    held = cast(T, value)
    return guard(lambda: f(held))
