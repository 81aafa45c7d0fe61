"""Error hierarchy for the registry client."""

from __future__ import annotations


class RegistryError(Exception):
    """Base error for all registry errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class RegistryFetchError(RegistryError):
    """A registry request failed: transport, HTTP status, or payload shape."""

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        name: str,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.kind = kind
        self.name = name
        self.url = url
        self.status_code = status_code


class EmptyRegistryItemError(RegistryError):
    """A registry item that should carry source files has none."""

    def __init__(self, name: str):
        super().__init__(f"No files found in registry item {name!r}")
        self.name = name


class ConfigurationError(RegistryError):
    pass
