"""Diagnostic output layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .faults import FaultReporter, describe_fault

__all__ = [
    "ConsoleProtocol",
    "FaultReporter",
    "MockConsole",
    "RichConsole",
    "Style",
    "describe_fault",
]
