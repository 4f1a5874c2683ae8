"""Service configuration.

ServiceConfig is a frozen dataclass, immutable after creation and read once
from the environment at startup.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from siteredirect.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Listener and logging configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServiceConfig(port=10000, log_level="debug")
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    workers: int = 1  # 0 = auto-detect from CPU count
    reload: bool = False

    # Logging
    log_level: str = "info"
    log_format: str = "text"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Build a config from ``PORT``, ``HOST``, ``WORKERS``, ``LOG_LEVEL``, ``LOG_FORMAT``.

        Unset or empty variables keep their defaults.

        Raises:
            ConfigurationError: If a variable is set to a value that
                cannot be used (non-numeric port, unknown log level, ...).
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        port = _parse_int(env, "PORT", defaults.port)
        if not 0 < port < 65536:
            msg = f"PORT must be between 1 and 65535, got {port}"
            raise ConfigurationError(msg)

        workers = _parse_int(env, "WORKERS", defaults.workers)
        if workers < 0:
            msg = f"WORKERS must be 0 (auto) or a positive integer, got {workers}"
            raise ConfigurationError(msg)

        log_level = _parse_choice(env, "LOG_LEVEL", defaults.log_level, LOG_LEVELS)
        log_format = _parse_choice(env, "LOG_FORMAT", defaults.log_format, LOG_FORMATS)

        return cls(
            host=env.get("HOST") or defaults.host,
            port=port,
            workers=workers,
            log_level=log_level,
            log_format=log_format,
        )


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None


def _parse_choice(
    env: Mapping[str, str],
    name: str,
    default: str,
    choices: tuple[str, ...],
) -> str:
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw not in choices:
        msg = f"{name} must be one of {', '.join(choices)}, got {raw!r}"
        raise ConfigurationError(msg)
    return raw
