"""Error values carried by failed containers.

Python can only raise exceptions, so arbitrary "panic" payloads travel
inside a `Panic` carrier. The fault guard unwraps them: exception payloads
are kept as-is, anything else becomes a `Fault` built from its display text.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

__all__ = ["Fault", "Panic", "panic", "ConfigError"]


class Fault(Exception):
    """Error synthesized from a non-exception fault payload.

    Two faults are equal when they have the same type and message, so
    containers holding them compare structurally.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fault):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"Fault({self.message!r})"


class Panic(Exception):
    """Carrier for an arbitrary payload raised through `panic()`."""

    def __init__(self, payload: object) -> None:
        super().__init__(payload)
        self.payload = payload


def panic(payload: object) -> NoReturn:
    """Abort the current computation with an arbitrary payload.

    Inside a guarded callback this turns into a failed container:

        try_compute(lambda: panic("boom"))  # Failure(Fault("boom"))
    """
    raise Panic(payload)


class ConfigError(Exception):
    """Error when settings cannot be loaded or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigError):
            return NotImplemented
        return self.message == other.message and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.message, self.path))
