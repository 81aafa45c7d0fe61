"""Registry payload types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Registry subtree an item is fetched from."""

    COMPONENT = "ui"
    BLOCK = "block"
    EXAMPLE = "example"


STYLES = ("default", "new-york")


@dataclass
class RegistryFile:
    name: str = ""
    content: str = ""


@dataclass
class CssVars:
    light: dict[str, str] | None = None
    dark: dict[str, str] | None = None


@dataclass
class RegistryItem:
    name: str = ""
    type: str = ""
    dependencies: list[str] = field(default_factory=list)
    dev_dependencies: list[str] = field(default_factory=list)
    registry_dependencies: list[str] = field(default_factory=list)
    files: list[RegistryFile] = field(default_factory=list)
    tailwind_config: dict[str, Any] | None = None
    css_vars: CssVars | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RegistryItem:
        """Build an item from a decoded JSON body.

        Raises ValueError when the body does not have the registry item shape.
        Optional lists may be absent; present fields must have the right type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("missing item name")

        files: list[RegistryFile] = []
        raw_files = data.get("files") or []
        if not isinstance(raw_files, list):
            raise ValueError("'files' must be a list")
        for i, entry in enumerate(raw_files):
            if not isinstance(entry, dict):
                raise ValueError(f"files[{i}] must be an object")
            # Newer registry payloads key files by "path" instead of "name"
            file_name = entry.get("name", entry.get("path", ""))
            content = entry.get("content", "")
            if not isinstance(file_name, str) or not isinstance(content, str):
                raise ValueError(f"files[{i}] has non-string name or content")
            files.append(RegistryFile(name=file_name, content=content))

        tailwind = data.get("tailwind") or {}
        if not isinstance(tailwind, dict):
            raise ValueError("'tailwind' must be an object")
        tailwind_config = tailwind.get("config")
        if tailwind_config is not None and not isinstance(tailwind_config, dict):
            raise ValueError("'tailwind.config' must be an object")

        css_vars = None
        raw_vars = data.get("cssVars")
        if raw_vars is not None:
            if not isinstance(raw_vars, dict):
                raise ValueError("'cssVars' must be an object")
            css_vars = CssVars(
                light=_str_map(raw_vars, "light"),
                dark=_str_map(raw_vars, "dark"),
            )

        return cls(
            name=name,
            type=str(data.get("type", "")),
            dependencies=_str_list(data, "dependencies"),
            dev_dependencies=_str_list(data, "devDependencies"),
            registry_dependencies=_str_list(data, "registryDependencies"),
            files=files,
            tailwind_config=tailwind_config,
            css_vars=css_vars,
        )


@dataclass
class IndexEntry:
    name: str = ""
    type: str = ""
    registry_dependencies: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> IndexEntry:
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ValueError("index entry must be an object with a name")
        return cls(
            name=data["name"],
            type=str(data.get("type", "")),
            registry_dependencies=_str_list(data, "registryDependencies"),
        )


def _str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key!r} must be a list of strings")
    return list(value)


def _str_map(data: dict[str, Any], key: str) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"cssVars.{key} must be an object")
    return {str(k): str(v) for k, v in value.items()}
