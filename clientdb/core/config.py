"""
clientdb Configuration: loads and merges config from multiple sources.

Precedence (highest to lowest):
1. Explicit overrides (passed in code)
2. Environment variables (CLIENTDB_*)
3. Project config (./clientdb.toml)
4. User config (~/.clientdb/config.toml)
5. Defaults (hardcoded)

Environment variable mapping:
    CLIENTDB_REDIS_URL → redis.url
    CLIENTDB_REDIS_SOCKET_TIMEOUT → redis.socket_timeout
    CLIENTDB_REDIS_CLIENT_NAME → redis.client_name
    CLIENTDB_LOG_LEVEL → logging.level
    CLIENTDB_LOG_DIR → logging.log_dir
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from clientdb.core.errors import ConfigError

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Config Sub-Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class RedisConfig(BaseModel):
    """Connection settings for the backing Redis server."""

    url: str = "redis://127.0.0.1:6379/0"
    decode_responses: bool = True
    socket_timeout: float | None = None
    socket_connect_timeout: float | None = None
    health_check_interval: int = 0
    client_name: str | None = None

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not value.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(f"Unsupported Redis URL: {value!r}")
        return value

    def client_options(self) -> dict[str, Any]:
        """Keyword arguments for redis.asyncio.from_url (unset values omitted)."""
        options: dict[str, Any] = {
            "decode_responses": self.decode_responses,
            "health_check_interval": self.health_check_interval,
        }
        if self.socket_timeout is not None:
            options["socket_timeout"] = self.socket_timeout
        if self.socket_connect_timeout is not None:
            options["socket_connect_timeout"] = self.socket_connect_timeout
        if self.client_name:
            options["client_name"] = self.client_name
        return options


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file_level: str = "DEBUG"
    log_dir: str | None = None


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Main Config
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class ClientDBConfig(BaseModel):
    """Root configuration for clientdb."""

    redis: RedisConfig = Field(default_factory=RedisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def load(
        overrides: dict[str, Any] | None = None,
        project_path: Path | None = None,
        user_path: Path | None = None,
    ) -> ClientDBConfig:
        """
        Load configuration from all sources and merge.

        Precedence: overrides > env vars > project toml > user toml > defaults
        """
        layers: list[dict[str, Any]] = []

        # Layer 1: User config (~/.clientdb/config.toml)
        user_config_path = user_path or Path.home() / ".clientdb" / "config.toml"
        if user_config_path.exists():
            layers.append(_load_toml(user_config_path))

        # Layer 2: Project config (./clientdb.toml)
        project_config_path = project_path or Path.cwd() / "clientdb.toml"
        if project_config_path.exists():
            layers.append(_load_toml(project_config_path))

        # Layer 3: Environment variables
        layers.append(_load_from_env())

        # Layer 4: Explicit overrides
        if overrides:
            layers.append(overrides)

        merged: dict[str, Any] = {}
        for layer in layers:
            merged = _merge(merged, layer)

        try:
            return ClientDBConfig(**_expand_env(merged))
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Internal Helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e


_ENV_MAPPING = {
    "CLIENTDB_REDIS_URL": ("redis", "url"),
    "CLIENTDB_REDIS_SOCKET_TIMEOUT": ("redis", "socket_timeout"),
    "CLIENTDB_REDIS_CLIENT_NAME": ("redis", "client_name"),
    "CLIENTDB_LOG_LEVEL": ("logging", "level"),
    "CLIENTDB_LOG_DIR": ("logging", "log_dir"),
}


def _load_from_env() -> dict[str, Any]:
    """
    CLIENTDB_* variables as a nested dict of raw strings.

    Values stay strings; pydantic coerces them to each field's type.
    """
    result: dict[str, Any] = {}
    for env_var, (section, key) in _ENV_MAPPING.items():
        value = os.environ.get(env_var)
        if value is not None:
            result.setdefault(section, {})[key] = value
    return result


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """New dict with override layered onto base. Neither input is modified."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict):
            current = result.get(key)
            result[key] = _merge(current if isinstance(current, dict) else {}, value)
        else:
            result[key] = value
    return result


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _expand_env(value: Any) -> Any:
    """Copy of value with ${ENV_VAR} in every string replaced (unset → "")."""
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), ""), value)
    return value
