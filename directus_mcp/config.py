"""Startup configuration for the Directus MCP server.

Each field is resolved independently, highest precedence first:
    1. Environment variable (DIRECTUS_URL, ...)
    2. Process argument (--directus-url=..., ...)
    3. JSON config file with the environment variable names as keys
    4. Built-in default

The result is computed once at startup and never mutated.
"""

import json
import logging
import os
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from directus_mcp.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

CONFIG_PATH_ENV = "DIRECTUS_MCP_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"


class ConfigSource(str, Enum):
    """Tier a configuration value was taken from."""

    ENV = "env"
    ARGS = "args"
    FILE = "file"
    DEFAULT = "default"


class FieldSpec(BaseModel):
    """Where one configuration field may be found."""

    model_config = ConfigDict(frozen=True)

    field: str
    env_var: str
    arg_prefix: str
    default: str
    secret: bool = False


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(
        field="base_url",
        env_var="DIRECTUS_URL",
        arg_prefix="--directus-url=",
        default="https://example.com",
    ),
    FieldSpec(
        field="access_token",
        env_var="DIRECTUS_ACCESS_TOKEN",
        arg_prefix="--directus-token=",
        default="default-token-for-dev",
        secret=True,
    ),
    FieldSpec(
        field="email",
        env_var="DIRECTUS_EMAIL",
        arg_prefix="--directus-email=",
        default="user@example.com",
    ),
    FieldSpec(
        field="password",
        env_var="DIRECTUS_PASSWORD",
        arg_prefix="--directus-password=",
        default="default-password-for-dev",
        secret=True,
    ),
)

SECRET_ARG_PREFIXES: tuple[str, ...] = tuple(spec.arg_prefix for spec in FIELDS if spec.secret)

# =============================================================================
# Effective configuration
# =============================================================================


class EffectiveConfig(BaseModel):
    """Resolved connection and credential values.

    Secrets are excluded from repr so the model can be logged safely.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    access_token: str = Field(repr=False)
    email: str
    password: str = Field(repr=False)
    sources: Mapping[str, ConfigSource] = Field(default_factory=dict)
    server_args: tuple[str, ...] = ()

    @field_validator("sources", mode="after")
    @classmethod
    def sources_read_only(cls, v: Mapping[str, ConfigSource]) -> Mapping[str, ConfigSource]:
        return MappingProxyType(dict(v))

    def from_env(self, field: str) -> bool:
        """Whether `field` was supplied by an environment variable."""
        return self.sources.get(field) == ConfigSource.ENV


# =============================================================================
# Resolution
# =============================================================================

Lookup = Callable[[FieldSpec], str | None]


def _present(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _env_lookup(env: Mapping[str, str]) -> Lookup:
    return lambda spec: _present(env.get(spec.env_var))


def _args_lookup(args: Sequence[str]) -> Lookup:
    def lookup(spec: FieldSpec) -> str | None:
        found: str | None = None
        for arg in args:
            if arg.startswith(spec.arg_prefix):
                # Last non-empty occurrence wins
                value = _present(arg[len(spec.arg_prefix) :])
                if value is not None:
                    found = value
        return found

    return lookup


def _file_lookup(file_config: Mapping[str, Any] | None) -> Lookup:
    if not file_config:
        return lambda spec: None
    return lambda spec: _present(file_config.get(spec.env_var))


def _first_present(
    spec: FieldSpec, tiers: Sequence[tuple[ConfigSource, Lookup]]
) -> tuple[str, ConfigSource]:
    for source, lookup in tiers:
        value = lookup(spec)
        if value is not None:
            return value, source
    return spec.default, ConfigSource.DEFAULT


def resolve_config(
    env: Mapping[str, str],
    args: Sequence[str],
    file_config: Mapping[str, Any] | None = None,
) -> EffectiveConfig:
    """Merge the four configuration tiers into one EffectiveConfig.

    Args:
        env: Environment mapping (usually os.environ).
        args: Process arguments, without the program name.
        file_config: Parsed config file content, or None if absent.

    Returns:
        The immutable effective configuration.
    """
    tiers: list[tuple[ConfigSource, Lookup]] = [
        (ConfigSource.ENV, _env_lookup(env)),
        (ConfigSource.ARGS, _args_lookup(args)),
        (ConfigSource.FILE, _file_lookup(file_config)),
    ]
    values: dict[str, str] = {}
    sources: dict[str, ConfigSource] = {}
    for spec in FIELDS:
        values[spec.field], sources[spec.field] = _first_present(spec, tiers)

    return EffectiveConfig(**values, sources=sources, server_args=tuple(args))


def read_config_file(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON config file.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not valid JSON,
            or not a JSON object.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigLoadError(f"Config file not found: {path}", path=str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Error reading config file {path}: {e}", path=str(path)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Error parsing config file {path}: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Config file {path} must contain a JSON object", path=str(path)
        )
    return data


def load_config(
    env: Mapping[str, str] | None = None,
    args: Sequence[str] | None = None,
    config_path: str | Path | None = None,
) -> EffectiveConfig:
    """Resolve the startup configuration, reading the config file at most once.

    The file is only read when some field is not already supplied by the
    environment or the process arguments. A missing or malformed file is
    logged and treated as absent.

    Args:
        env: Environment mapping. Defaults to os.environ.
        args: Process arguments. Defaults to no arguments.
        config_path: Config file location. Defaults to DIRECTUS_MCP_CONFIG,
            then config.json next to the installed package.
    """
    env = os.environ if env is None else env
    args = list(args or [])

    env_lookup, args_lookup = _env_lookup(env), _args_lookup(args)
    needs_file = any(env_lookup(spec) is None and args_lookup(spec) is None for spec in FIELDS)

    file_config: dict[str, Any] | None = None
    if needs_file:
        path = config_path or env.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
        try:
            file_config = read_config_file(path)
            logger.debug("Loaded config file %s", path)
        except ConfigLoadError as e:
            logger.warning("%s. Using environment variables or default values.", e)

    return resolve_config(env, args, file_config)


def describe_config(config: EffectiveConfig) -> list[str]:
    """Summary lines for startup logging, with secrets masked."""
    return [
        f"Using Directus URL: {config.base_url}",
        f"Auth token: {'********' if config.access_token else 'not provided'}",
        f"Email: {config.email or 'not provided'}",
        f"Password: {'********' if config.password else 'not provided'}",
    ]
