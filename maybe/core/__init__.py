"""Core container types and logic."""

from .adapters import flat_map_across, map_across
from .bridges import from_pair, to_pair, try_compute
from .config import GuardSettings, Settings, configure, load_settings, load_settings_or_default
from .errors import ConfigError, Fault, Panic, panic
from .guard import get_fault_reporter, guarded_call, set_fault_reporter
from .maybe import (
    Failure,
    Maybe,
    Nothing,
    Some,
    empty,
    failed,
    guard,
    is_failure,
    is_nothing,
    is_some,
    just,
)

__all__ = [
    # adapters
    "flat_map_across",
    "map_across",
    # bridges
    "from_pair",
    "to_pair",
    "try_compute",
    # config
    "GuardSettings",
    "Settings",
    "configure",
    "load_settings",
    "load_settings_or_default",
    # errors
    "ConfigError",
    "Fault",
    "Panic",
    "panic",
    # guard
    "get_fault_reporter",
    "guarded_call",
    "set_fault_reporter",
    # maybe
    "Failure",
    "Maybe",
    "Nothing",
    "Some",
    "empty",
    "failed",
    "guard",
    "is_failure",
    "is_nothing",
    "is_some",
    "just",
]
