"""Argument models for each tool.

Fields are snake_case; the camelCase spelling is accepted too.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Style = Literal["default", "new-york"]


class ToolArgs(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListComponentsArgs(ToolArgs):
    category: str | None = Field(
        default=None,
        description="Filter by category (form, layout, navigation, overlay, feedback, "
        "data-display, disclosure, data-entry, typography)",
    )


class ComponentArgs(ToolArgs):
    name: str = Field(min_length=1, description="The name of the component")
    style: Style | None = Field(default=None, description="Registry style to read from")


class ComponentDemoArgs(ToolArgs):
    name: str = Field(min_length=1, description="The name of the component")
    demo_index: int = Field(default=0, description="Index of the demo to retrieve (defaults to 0)")


class InstallComponentArgs(ToolArgs):
    components: list[str] = Field(min_length=1, description="Component names to install")
    force: bool = Field(default=False, description="Force overwrite existing files")
    cwd: str | None = Field(default=None, description="Working directory for the command")


class DiffComponentArgs(ToolArgs):
    name: str = Field(min_length=1, description="The name of the component to diff")
    cwd: str | None = Field(default=None, description="Working directory for the command")


class ListBlocksArgs(ToolArgs):
    category: str | None = Field(
        default=None,
        description="Filter by category (authentication, dashboard, layout, charts, forms, "
        "ecommerce, marketing, application)",
    )


class BlockArgs(ToolArgs):
    name: str = Field(min_length=1, description="The name of the block")
    style: Style | None = Field(default=None, description="Registry style to read from")


class InstallBlockArgs(ToolArgs):
    name: str = Field(min_length=1, description="The name of the block to install")
    force: bool = Field(default=False, description="Force overwrite existing files")
    cwd: str | None = Field(default=None, description="Working directory for the command")


class BrowseRepositoryArgs(ToolArgs):
    path: str | None = Field(
        default=None, description='Repository path to browse (e.g., "apps/www/components")'
    )


class SearchRepositoryArgs(ToolArgs):
    query: str = Field(description="Search query")
    file_type: str | None = Field(
        default=None, description='Filter by file type (e.g., "tsx", "ts", "css")'
    )


class InitProjectArgs(ToolArgs):
    style: Style | None = Field(default=None, description="Which style to use")
    typescript: bool | None = Field(default=None, description="Use TypeScript")
    tailwind_config: str | None = Field(default=None, description="Path to tailwind config")
    tailwind_css: str | None = Field(default=None, description="Path to the global CSS file")
    components_path: str | None = Field(default=None, description="Path to components directory")
    force: bool = Field(default=False, description="Force init (skip checks)")
    cwd: str | None = Field(default=None, description="Working directory")


class ProjectStatusArgs(ToolArgs):
    cwd: str | None = Field(default=None, description="Working directory to check")
