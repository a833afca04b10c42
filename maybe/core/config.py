"""Typed settings loading.

Settings live in a small TOML file:

    [guard]
    report_faults = true
    show_traceback = false

Missing keys fall back to defaults. Loading returns a Maybe so callers can
chain on it like any other computation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import ConfigError
from .guard import set_fault_reporter
from .maybe import Failure, Maybe, Some
from .structured import StrDict, as_str_dict, get_bool, get_table

if TYPE_CHECKING:
    from maybe.output.console import ConsoleProtocol

__all__ = [
    "Settings",
    "GuardSettings",
    "configure",
    "load_settings",
    "load_settings_or_default",
]


@dataclass(frozen=True, slots=True)
class GuardSettings:
    """How the fault guard reports the faults it absorbs."""

    report_faults: bool = False
    show_traceback: bool = False


@dataclass(frozen=True, slots=True)
class Settings:
    """Main settings container."""

    guard: GuardSettings = field(default_factory=GuardSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a mapping (parsed TOML)."""
        guard: StrDict = get_table(data, "guard") or {}

        report_faults = get_bool(guard, "report_faults")
        show_traceback = get_bool(guard, "show_traceback")
        return cls(
            guard=GuardSettings(
                report_faults=False if report_faults is None else report_faults,
                show_traceback=False if show_traceback is None else show_traceback,
            ),
        )


def _parse_toml(path: Path) -> Maybe[StrDict]:
    """Parse a TOML file, turning I/O and syntax problems into Failure."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Failure(ConfigError("Settings root must be a TOML table", path=path))
        return Some(data)
    except FileNotFoundError:
        return Failure(ConfigError(f"Settings file not found: {path}", path=path))
    except PermissionError:
        return Failure(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Failure(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Failure(ConfigError(f"Error reading settings: {e}", path=path))


def _build(data: StrDict, path: Path) -> Maybe[Settings]:
    try:
        return Some(Settings.from_dict(data))
    except (KeyError, TypeError, ValueError) as e:
        return Failure(ConfigError(f"Invalid settings structure: {e}", path=path))


def load_settings(path: Path) -> Maybe[Settings]:
    """Load and parse settings from a TOML file.

    Args:
        path: Path to the settings file

    Returns:
        Some(Settings) on success, Failure(ConfigError) on failure
    """
    return _parse_toml(path).flat_transform(lambda data: _build(data, path))


def load_settings_or_default(path: Path) -> Settings:
    """Load settings from file, or return defaults if it can't be loaded."""
    return load_settings(path).or_else(Settings())


def configure(settings: Settings, console: ConsoleProtocol | None = None) -> None:
    """Apply settings to the process-wide fault guard.

    When `report_faults` is on, a FaultReporter writing to `console` (a
    RichConsole by default) is installed; otherwise any reporter is removed.
    """
    if not settings.guard.report_faults:
        set_fault_reporter(None)
        return

    from maybe.output.console import RichConsole
    from maybe.output.faults import FaultReporter

    set_fault_reporter(
        FaultReporter(
            console=console if console is not None else RichConsole(),
            show_traceback=settings.guard.show_traceback,
        )
    )
