"""Reporting of faults absorbed by the guard.

Absorbed faults never propagate, which can hide bugs in callbacks. A
FaultReporter makes them visible without changing any result:

    from maybe.core.guard import set_fault_reporter
    from maybe.output import FaultReporter, RichConsole

    set_fault_reporter(FaultReporter(RichConsole()))
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import TYPE_CHECKING

from maybe.output.console import Style

if TYPE_CHECKING:
    from maybe.output.console import ConsoleProtocol

__all__ = ["FaultReporter", "describe_fault"]


def describe_fault(error: BaseException) -> str:
    """One-line description of an error: `TypeName: message`."""
    name = type(error).__name__
    text = str(error)
    if not text:
        return name
    return f"{name}: {text}"


@dataclass(frozen=True, slots=True)
class FaultReporter:
    """Prints each absorbed fault as a warning.

    Attributes:
        console: Where to print.
        show_traceback: Also print the traceback, dimmed, when one exists.
    """

    console: ConsoleProtocol
    show_traceback: bool = False

    def report(self, error: BaseException) -> None:
        self.console.warning(f"absorbed fault: {describe_fault(error)}")
        if self.show_traceback and error.__traceback__ is not None:
            lines = traceback.format_exception(error)
            self.console.print("".join(lines).rstrip(), Style.DIM)
