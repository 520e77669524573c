"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

ENV_LOG_LEVEL: Final[str] = "CORE_EXTRA_LOG_LEVEL"
ENV_VECTORIZED: Final[str] = "CORE_EXTRA_VECTORIZED"
ENV_ENABLE_X64: Final[str] = "CORE_EXTRA_ENABLE_X64"

_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, default: bool, environ: dict[str, str]) -> bool:
    raw = environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSE_VALUES


@dataclass(frozen=True)
class Settings:
    """Runtime knobs.

    - `log_level`: level name for the `core_extra` logger.
    - `vectorized`: register the jax-backed strategies in the catalog.
    - `enable_x64`: build vectorized arrays in 64-bit mode, scoped to each
      call, so wide ints and doubles convert exactly.
    """

    log_level: str = "WARNING"
    vectorized: bool = True
    enable_x64: bool = True

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = dict(os.environ) if environ is None else environ
        return cls(
            log_level=env.get(ENV_LOG_LEVEL, "").strip().upper() or cls.log_level,
            vectorized=_env_flag(ENV_VECTORIZED, cls.vectorized, env),
            enable_x64=_env_flag(ENV_ENABLE_X64, cls.enable_x64, env),
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings.from_env()
