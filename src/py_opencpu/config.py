"""Runtime configuration for reaching an OpenCPU server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from py_opencpu.errors import ConfigurationError

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 9999
DEFAULT_ROOT_PATH = "/ocpu"

SUPPORTED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class RuntimeConfig:
    """Base address of an OpenCPU server.

    Immutable once constructed. Validation happens here so that a
    malformed address fails at configuration time, never at call time.

    Attributes:
        scheme: "http" or "https".
        host: Server host name or address.
        port: TCP port, or None for the scheme default.
        root_path: Path prefix the OpenCPU API is mounted under.
        user_info: Optional "user:password" credentials embedded in the URI.
        timeout: Per-request timeout in seconds. None means block until
                 the transport returns or raises.
    """

    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    port: int | None = DEFAULT_PORT
    root_path: str = DEFAULT_ROOT_PATH
    user_info: str | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        for name in ("scheme", "host", "root_path"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.user_info is not None and not isinstance(self.user_info, str):
            raise ConfigurationError(f"user_info must be a string, got {self.user_info!r}")
        if self.port is not None and (
            isinstance(self.port, bool) or not isinstance(self.port, int)
        ):
            raise ConfigurationError(f"Invalid port: {self.port!r}")
        if self.timeout is not None and (
            isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float))
        ):
            raise ConfigurationError(f"Invalid timeout: {self.timeout!r}")
        if self.scheme not in SUPPORTED_SCHEMES:
            raise ConfigurationError(
                f"Unsupported scheme: {self.scheme!r}. Supported: {', '.join(SUPPORTED_SCHEMES)}"
            )
        if not self.host or any(c in self.host for c in "/?#@ "):
            raise ConfigurationError(f"Invalid host: {self.host!r}")
        if self.port is not None and not (0 < self.port < 65536):
            raise ConfigurationError(f"Invalid port: {self.port}")
        if self.root_path and not self.root_path.startswith("/"):
            raise ConfigurationError(f"Root path must be absolute: {self.root_path!r}")
        if any(c in self.root_path for c in "?# "):
            raise ConfigurationError(f"Invalid root path: {self.root_path!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive: {self.timeout}")

    @property
    def base_url(self) -> str:
        """Absolute URI of the API root, without a trailing slash."""
        netloc = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        if self.user_info:
            netloc = f"{self.user_info}@{netloc}"
        return f"{self.scheme}://{netloc}{self.root_path.rstrip('/')}"

    @classmethod
    def from_url(cls, url: str, timeout: float | None = None) -> RuntimeConfig:
        """Build configuration from an absolute URI.

        Raises:
            ConfigurationError: If the URI is relative or malformed.
        """
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise ConfigurationError(f"Malformed base address {url!r}: {e}") from e

        if not parts.scheme or not parts.hostname:
            raise ConfigurationError(f"Base address must be an absolute URI: {url!r}")
        if parts.query or parts.fragment:
            raise ConfigurationError(f"Base address cannot carry a query or fragment: {url!r}")

        user_info = None
        if "@" in parts.netloc:
            user_info = parts.netloc.rsplit("@", 1)[0]

        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=port,
            root_path=parts.path.rstrip("/"),
            user_info=user_info,
            timeout=timeout,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> RuntimeConfig:
        """Load configuration from a YAML file.

        Either a single ``url`` key or the discrete fields are accepted:

            url: http://localhost:9999/ocpu
            timeout: 30

            scheme: https
            host: cloud.opencpu.org
            port: 443
            root_path: /ocpu
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a mapping")
        return cls._from_dict(data)

    @classmethod
    def from_env(cls) -> RuntimeConfig:
        """Load configuration from environment variables.

        OPENCPU_URL overrides the default base address and
        OPENCPU_TIMEOUT sets the request timeout in seconds.
        """
        timeout = None
        if timeout_str := os.environ.get("OPENCPU_TIMEOUT"):
            timeout = _parse_timeout(timeout_str)

        if url := os.environ.get("OPENCPU_URL"):
            return cls.from_url(url, timeout=timeout)
        return cls(timeout=timeout)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> RuntimeConfig:
        timeout = data.get("timeout")
        if timeout is not None:
            timeout = _parse_timeout(timeout)

        if url := data.get("url"):
            return cls.from_url(str(url), timeout=timeout)

        port = data.get("port", DEFAULT_PORT)
        if isinstance(port, bool):
            raise ConfigurationError(f"Invalid port: {port!r}")
        try:
            port = int(port) if port is not None else None
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid port: {port!r}") from e

        return cls(
            scheme=data.get("scheme", DEFAULT_SCHEME),
            host=data.get("host", DEFAULT_HOST),
            port=port,
            root_path=data.get("root_path", DEFAULT_ROOT_PATH),
            user_info=data.get("user_info"),
            timeout=timeout,
        )


def _parse_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid timeout: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid timeout: {value!r}") from e
