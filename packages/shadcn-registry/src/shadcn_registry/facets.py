"""Pure projections over a RegistryItem. No I/O."""

from __future__ import annotations

from typing import Any

from shadcn_registry.errors import EmptyRegistryItemError
from shadcn_registry.types import CssVars, RegistryFile, RegistryItem


def dependencies(item: RegistryItem) -> list[str]:
    return list(item.dependencies)


def dev_dependencies(item: RegistryItem) -> list[str]:
    return list(item.dev_dependencies)


def registry_dependencies(item: RegistryItem) -> list[str]:
    """Other registry components this item pulls in."""
    return list(item.registry_dependencies)


def all_files(item: RegistryItem) -> list[RegistryFile]:
    return list(item.files)


def file_names(item: RegistryItem) -> list[str]:
    return [f.name for f in item.files]


def require_files(item: RegistryItem) -> list[RegistryFile]:
    """Return the item's files, raising if there are none."""
    if not item.files:
        raise EmptyRegistryItemError(item.name)
    return list(item.files)


def primary_source(item: RegistryItem) -> str:
    """Content of the main file (the first one listed)."""
    return require_files(item)[0].content


def tailwind_config(item: RegistryItem) -> dict[str, Any] | None:
    return item.tailwind_config


def css_vars(item: RegistryItem) -> CssVars | None:
    return item.css_vars


def css_vars_dict(item: RegistryItem) -> dict[str, dict[str, str]] | None:
    """Theme variables as a plain mapping, omitting absent modes."""
    if item.css_vars is None:
        return None
    out: dict[str, dict[str, str]] = {}
    if item.css_vars.light is not None:
        out["light"] = dict(item.css_vars.light)
    if item.css_vars.dark is not None:
        out["dark"] = dict(item.css_vars.dark)
    return out
