"""Tests for maybe.core.adapters module."""

from __future__ import annotations

import pytest

from maybe.core.adapters import flat_map_across, map_across
from maybe.core.errors import Fault, panic
from maybe.core.maybe import Failure, Maybe, Nothing, Some


def never(_value: object) -> object:
    pytest.fail("adapter function must not be called")


class TestMapAcross:
    """Test map_across type-changing adapter."""

    def test_some(self) -> None:
        assert map_across(Some(42), str) == Some("42")

    def test_nothing(self) -> None:
        m: Maybe[int] = Nothing()
        assert map_across(m, never) == Nothing()

    def test_failure_keeps_error(self) -> None:
        err = ValueError("bad")
        result = map_across(Failure(err), never)
        assert isinstance(result, Failure)
        assert result.error is err

    def test_fault_in_function(self) -> None:
        assert map_across(Some(1), lambda x: panic("boom")) == Failure(Fault("boom"))

    def test_present_none_is_still_mapped(self) -> None:
        assert map_across(Some(None), lambda x: x is None) == Some(True)


class TestFlatMapAcross:
    """Test flat_map_across type-changing adapter."""

    @staticmethod
    def parse(text: str) -> Maybe[int]:
        if not text:
            return Nothing()
        if not text.isdigit():
            return Failure(ValueError(f"not a number: {text}"))
        return Some(int(text))

    def test_some_to_some(self) -> None:
        assert flat_map_across(Some("42"), self.parse) == Some(42)

    def test_some_to_nothing(self) -> None:
        assert flat_map_across(Some(""), self.parse) == Nothing()

    def test_some_to_failure(self) -> None:
        result = flat_map_across(Some("x"), self.parse)
        assert isinstance(result, Failure)
        assert str(result.error) == "not a number: x"

    def test_nothing(self) -> None:
        m: Maybe[str] = Nothing()
        assert flat_map_across(m, never) == Nothing()

    def test_failure(self) -> None:
        err = KeyError("k")
        assert flat_map_across(Failure(err), never) == Failure(err)

    def test_fault_in_function(self) -> None:
        result = flat_map_across(Some("1"), lambda s: Some(1 // 0))
        assert isinstance(result, Failure)
        assert isinstance(result.error, ZeroDivisionError)
