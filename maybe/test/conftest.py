from __future__ import annotations

from collections.abc import Iterator

import pytest

from maybe.core.guard import set_fault_reporter


@pytest.fixture(autouse=True)
def _no_fault_reporter() -> Iterator[None]:
    """Every test starts and ends without an installed fault reporter."""
    previous = set_fault_reporter(None)
    yield
    set_fault_reporter(previous)
