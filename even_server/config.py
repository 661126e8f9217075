"""Environment-driven settings.

Recognised variables:
  EVEN_HOST           bind address (default 0.0.0.0)
  EVEN_PORT           listening port (default 8080)
  EVEN_LOG_LEVEL      log level for the app and uvicorn (default info)
  EVEN_IDENTITY       name used in the greeting (default Python+FastAPI)
  EVEN_INITIAL_COUNT  starting counter value (default 2)
  EVEN_DEBUG          truthy value adds X-Even-* headers to /info responses
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError
from .state import DEFAULT_INITIAL_COUNT


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"
DEFAULT_IDENTITY = "Python+FastAPI"

# uvicorn accepts "trace" on top of the stdlib level names.
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


TRUTHY = frozenset({"1", "true", "yes", "y", "on"})


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    identity: str = DEFAULT_IDENTITY
    initial_count: int = DEFAULT_INITIAL_COUNT
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerSettings:
        env = os.environ if environ is None else environ

        port = _int(env, "EVEN_PORT", DEFAULT_PORT)
        if not 1 <= port <= 65535:
            raise ConfigError(f"EVEN_PORT must be in 1..65535, got {port}")

        log_level = (env.get("EVEN_LOG_LEVEL") or "").strip().lower() or DEFAULT_LOG_LEVEL
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"EVEN_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            host=(env.get("EVEN_HOST") or "").strip() or DEFAULT_HOST,
            port=port,
            log_level=log_level,
            identity=(env.get("EVEN_IDENTITY") or "").strip() or DEFAULT_IDENTITY,
            initial_count=_int(env, "EVEN_INITIAL_COUNT", DEFAULT_INITIAL_COUNT),
            debug=(env.get("EVEN_DEBUG") or "").strip().lower() in TRUTHY,
        )

    @property
    def greeting(self) -> str:
        return f"Hi! {self.identity} server"
