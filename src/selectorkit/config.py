from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    strict_combinators: bool = False  # reject tokens other than " ", ">", "+", "~"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}, expected one of: "
                f"{', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, log_level: str | None = None) -> SelectorkitConfig:
        """Build a config from SELECTORKIT_* environment variables.

        An explicit *log_level* takes precedence over SELECTORKIT_LOG_LEVEL.
        Raises ValueError for an unknown log level.
        """
        if log_level is None:
            log_level = os.environ.get("SELECTORKIT_LOG_LEVEL", cls.log_level)
        return cls(
            log_level=log_level.upper(),
            strict_combinators=os.environ.get(
                "SELECTORKIT_STRICT_COMBINATORS", ""
            ).lower() in _TRUTHY,
        )
