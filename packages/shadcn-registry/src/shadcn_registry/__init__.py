"""Client for the shadcn/ui JSON registry."""

from shadcn_registry.client import DEFAULT_STYLE, REGISTRY_BASE_URL, RegistryClient
from shadcn_registry.errors import (
    ConfigurationError,
    EmptyRegistryItemError,
    RegistryError,
    RegistryFetchError,
)
from shadcn_registry.types import (
    STYLES,
    CssVars,
    EntityKind,
    IndexEntry,
    RegistryFile,
    RegistryItem,
)

__all__ = [
    "ConfigurationError",
    "CssVars",
    "DEFAULT_STYLE",
    "EmptyRegistryItemError",
    "EntityKind",
    "IndexEntry",
    "REGISTRY_BASE_URL",
    "RegistryClient",
    "RegistryError",
    "RegistryFetchError",
    "RegistryFile",
    "RegistryItem",
    "STYLES",
]
