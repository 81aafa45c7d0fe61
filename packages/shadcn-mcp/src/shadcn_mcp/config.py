"""Server configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from shadcn_registry import DEFAULT_STYLE, REGISTRY_BASE_URL, STYLES, ConfigurationError
from shadcn_runner.facade import DEFAULT_EXECUTABLE, DEFAULT_PACKAGE


@dataclass
class ServerConfig:
    registry_url: str = REGISTRY_BASE_URL
    style: str = DEFAULT_STYLE
    executable: str = DEFAULT_EXECUTABLE
    package: str = DEFAULT_PACKAGE
    http_timeout: float = 30.0
    working_dir: str | None = None

    def __post_init__(self) -> None:
        if self.style not in STYLES:
            raise ConfigurationError(
                f"Unknown style {self.style!r}. Available: {list(STYLES)}"
            )
        if self.http_timeout <= 0:
            raise ConfigurationError("http_timeout must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Read overrides from SHADCN_* environment variables."""
        env = os.environ if environ is None else environ
        timeout_raw = env.get("SHADCN_HTTP_TIMEOUT")
        try:
            http_timeout = float(timeout_raw) if timeout_raw else 30.0
        except ValueError:
            raise ConfigurationError(
                f"SHADCN_HTTP_TIMEOUT must be a number, got {timeout_raw!r}"
            ) from None
        return cls(
            registry_url=env.get("SHADCN_REGISTRY_URL") or REGISTRY_BASE_URL,
            style=env.get("SHADCN_STYLE") or DEFAULT_STYLE,
            executable=env.get("SHADCN_CLI_EXECUTABLE") or DEFAULT_EXECUTABLE,
            package=env.get("SHADCN_CLI_PACKAGE") or DEFAULT_PACKAGE,
            http_timeout=http_timeout,
            working_dir=env.get("SHADCN_WORKING_DIR") or None,
        )
