"""
Configuration for pyjoplin.

Values are layered, lowest to highest precedence:
  - built-in defaults
  - ~/.config/pyjoplin/config.json (PYJOPLIN_CONFIG_DIR overrides the directory)
  - PYJOPLIN_* environment variables
  - keyword overrides passed to ``ClientConfig.load``
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from pyjoplin.exceptions import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_HOST = "http://localhost"
MIN_PORT = 41184
MAX_PORT = 41194
TOKEN_FILE_NAME = ".joplin-auth-token"
RETRIES_GET_API_TOKEN = 20

_ENV_VARS = {
    "host": "PYJOPLIN_HOST",
    "port_min": "PYJOPLIN_PORT_MIN",
    "port_max": "PYJOPLIN_PORT_MAX",
    "token_path": "PYJOPLIN_TOKEN_PATH",
}


def get_config_dir() -> str:
    """Directory holding config.json."""
    return os.environ.get("PYJOPLIN_CONFIG_DIR") or os.path.expanduser(
        "~/.config/pyjoplin"
    )


def get_config_path() -> str:
    return os.path.join(get_config_dir(), "config.json")


def default_token_path() -> str:
    return os.path.join(os.path.expanduser("~"), TOKEN_FILE_NAME)


def load_config() -> Dict[str, Any]:
    """Load the config file, or an empty mapping when there is none."""
    config_path = get_config_path()
    if not os.path.exists(config_path):
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, OSError) as exc:
        raise ConfigError(f"Could not load config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must hold a JSON object")
    return data


def save_config(config: Mapping[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    try:
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(dict(config), f, indent=2)
        # Ensure file has restrictive permissions
        os.chmod(config_path, 0o600)
    except OSError as exc:
        raise ConfigError(f"Could not save config file {config_path}: {exc}") from exc


@dataclass(frozen=True)
class ClientConfig:
    """Everything needed to find the service and authenticate against it."""

    host: str = DEFAULT_HOST
    port_min: int = MIN_PORT
    port_max: int = MAX_PORT
    token_path: str = ""
    probe_timeout: float = 1.0
    request_timeout: float = 10.0
    poll_interval: float = 1.0
    max_retries: int = RETRIES_GET_API_TOKEN

    def __post_init__(self):
        if not self.token_path:
            object.__setattr__(self, "token_path", default_token_path())
        if self.port_min > self.port_max:
            raise ConfigError(
                f"Empty port range: {self.port_min} > {self.port_max}"
            )
        if self.max_retries < 1:
            raise ConfigError("max_retries must be at least 1")
        if self.poll_interval < 0:
            raise ConfigError("poll_interval must not be negative")

    @property
    def ports(self) -> range:
        return range(self.port_min, self.port_max + 1)

    @classmethod
    def load(
        cls,
        file_values: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "ClientConfig":
        """Build a config from the file, the environment and ``overrides``."""
        if file_values is None:
            file_values = load_config()
        if environ is None:
            environ = os.environ

        values: Dict[str, Any] = {}
        values.update(_pick_known(file_values))
        for name, var in _ENV_VARS.items():
            if environ.get(var):
                values[name] = environ[var]
        values.update(
            _pick_known({k: v for k, v in overrides.items() if v is not None})
        )

        config = cls(**_coerce(values))
        LOGGER.debug(
            "Loaded config: host=%s ports=%d-%d token_path=%s",
            config.host,
            config.port_min,
            config.port_max,
            config.token_path,
        )
        return config


def _pick_known(values: Mapping[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(ClientConfig)}
    return {k: v for k, v in values.items() if k in known}


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    types = {f.name: f.type for f in fields(ClientConfig)}
    out: Dict[str, Any] = {}
    for name, value in values.items():
        kind = types[name]
        try:
            if kind == "int":
                out[name] = int(value)
            elif kind == "float":
                out[name] = float(value)
            elif name == "token_path":
                out[name] = os.path.expanduser(str(value))
            else:
                out[name] = str(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid value for {name}: {value!r}") from exc
    return out
