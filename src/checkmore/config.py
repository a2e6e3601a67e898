"""Runtime configuration for checkmore."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class CheckConfig:
    """Registry configuration.

    Attributes:
        autoload_builtins: Register the builtin predicates when checkmore is imported
        warn_on_duplicate: Log ignored duplicate registrations as warnings
            instead of debug messages
    """

    autoload_builtins: bool = True
    warn_on_duplicate: bool = False

    @classmethod
    def from_env(cls) -> CheckConfig:
        """Create config from environment variables.

        Reads:
        1. CHECKMORE_AUTOLOAD_BUILTINS (default: on)
        2. CHECKMORE_WARN_ON_DUPLICATE (default: off)
        """
        return cls(
            autoload_builtins=_env_flag("CHECKMORE_AUTOLOAD_BUILTINS", True),
            warn_on_duplicate=_env_flag("CHECKMORE_WARN_ON_DUPLICATE", False),
        )
