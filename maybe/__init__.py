"""Maybe: a value, a deliberate absence, or a failure, with fault-safe chaining."""

from maybe.core import (
    ConfigError,
    Failure,
    Fault,
    Maybe,
    Nothing,
    Panic,
    Settings,
    Some,
    configure,
    empty,
    failed,
    flat_map_across,
    from_pair,
    guard,
    is_failure,
    is_nothing,
    is_some,
    just,
    load_settings,
    map_across,
    panic,
    to_pair,
    try_compute,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Failure",
    "Fault",
    "Maybe",
    "Nothing",
    "Panic",
    "Settings",
    "Some",
    "configure",
    "empty",
    "failed",
    "flat_map_across",
    "from_pair",
    "guard",
    "is_failure",
    "is_nothing",
    "is_some",
    "just",
    "load_settings",
    "map_across",
    "panic",
    "to_pair",
    "try_compute",
]
