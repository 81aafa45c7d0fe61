"""Tool operations over the catalog, the registry, and the CLI.

Metadata reads fall back to the local catalog when the registry is
unreachable. Source reads and anything that runs the CLI report failures
instead of substituting local data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from shadcn_mcp import catalog, demos
from shadcn_mcp.catalog import BlockMeta, ComponentMeta
from shadcn_mcp.errors import InternalError, NotFoundError
from shadcn_registry import RegistryClient, RegistryError, RegistryFetchError, RegistryItem
from shadcn_registry import facets
from shadcn_runner import CliOptions, CommandResult, ShadcnCli

logger = logging.getLogger(__name__)

_UI_DIR = "apps/www/components/ui"
_BLOCKS_DIR = "apps/www/components/blocks"

# Where installed components usually live, relative to the project root
_COMPONENT_DIRS = ("components/ui", "src/components/ui")
_COMPONENT_SUFFIXES = (".tsx", ".jsx")


class Orchestrator:
    """Implements each tool against a RegistryClient and a ShadcnCli."""

    def __init__(self, registry: RegistryClient, cli: ShadcnCli) -> None:
        self._registry = registry
        self._cli = cli

    @property
    def registry(self) -> RegistryClient:
        return self._registry

    @property
    def cli(self) -> ShadcnCli:
        return self._cli

    # -- Components --

    async def list_components(self, category: str | None = None) -> dict[str, Any]:
        found = (
            catalog.components_by_category(category) if category else catalog.all_components()
        )
        return {"count": len(found), "components": [c.to_dict() for c in found]}

    async def get_component_source(self, name: str, style: str | None = None) -> str:
        self._require_component(name)
        try:
            item = await self._registry.fetch_component(name, style)
            return facets.primary_source(item)
        except RegistryError as e:
            raise InternalError(f"Failed to fetch component source: {e}", cause=e) from e

    async def get_component_metadata(
        self, name: str, style: str | None = None
    ) -> dict[str, Any]:
        component = self._require_component(name)
        try:
            item = await self._registry.fetch_component(name, style)
        except RegistryFetchError as e:
            logger.warning("Using local metadata for component %s: %s", name, e)
            return _degraded(component, e)

        return {
            "name": component.name,
            "description": component.description,
            "category": component.category,
            **_item_facets(item),
            "degraded": False,
        }

    async def get_component_demo(self, name: str, demo_index: int = 0) -> dict[str, Any]:
        self._require_component(name)
        demo = demos.get_demo(name, demo_index)
        all_demos = demos.demos_for(name)
        return {
            "component": name,
            "currentDemo": demo.to_dict(),
            "formattedCode": demos.format_demo_code(demo),
            "availableDemos": len(all_demos),
            "allDemos": [{"name": d.name, "description": d.description} for d in all_demos],
        }

    async def install_component(
        self, components: list[str], force: bool = False, cwd: str | None = None
    ) -> dict[str, Any]:
        for name in components:
            self._require_component(name)

        result = await self._cli.add(components, CliOptions(cwd=cwd, yes=True, force=force))
        classified = result.classified
        success = result.raw_success
        if classified.installed is not None:
            installed = classified.installed
        else:
            installed = list(components) if success else []
        if classified.errored is not None:
            errors = classified.errored
        else:
            errors = [result.raw.error] if not success and result.raw.error else []

        return {
            "success": success,
            "installed": installed,
            "skipped": classified.skipped or [],
            "errors": errors,
            "output": result.raw.output,
            "command": result.command_line,
        }

    async def diff_component(self, name: str, cwd: str | None = None) -> dict[str, Any]:
        self._require_component(name)
        result = await self._cli.diff(name, CliOptions(cwd=cwd))
        return _command_payload(result)

    # -- Blocks --

    async def list_blocks(self, category: str | None = None) -> dict[str, Any]:
        found = catalog.blocks_by_category(category) if category else catalog.all_blocks()
        return {"count": len(found), "blocks": [b.to_dict() for b in found]}

    async def get_block_source(self, name: str, style: str | None = None) -> dict[str, Any]:
        block = self._require_block(name)
        try:
            item = await self._registry.fetch_block(name, style)
            files = facets.require_files(item)
        except RegistryError as e:
            raise InternalError(f"Failed to fetch block source: {e}", cause=e) from e

        return {
            "name": name,
            "description": block.description,
            "files": [{"name": f.name, "content": f.content} for f in files],
            "dependencies": facets.dependencies(item),
            "registryDependencies": facets.registry_dependencies(item),
            "components": list(block.components),
        }

    async def get_block_metadata(self, name: str, style: str | None = None) -> dict[str, Any]:
        block = self._require_block(name)
        try:
            item = await self._registry.fetch_block(name, style)
        except RegistryFetchError as e:
            logger.warning("Using local metadata for block %s: %s", name, e)
            payload = _degraded(block, e)
            payload["components"] = list(block.components)
            return payload

        return {
            "name": block.name,
            "description": block.description,
            "category": block.category,
            "components": list(block.components),
            **_item_facets(item),
            "degraded": False,
        }

    async def install_block(
        self, name: str, force: bool = False, cwd: str | None = None
    ) -> dict[str, Any]:
        block = self._require_block(name)
        result = await self._cli.add_block(
            name, list(block.components), CliOptions(cwd=cwd, yes=True, force=force)
        )

        if result.components_result is not None and not result.components_result.raw_success:
            raise InternalError(f"Failed to install required components: {result.error}")

        block_result = result.block_result
        return {
            "success": result.success,
            "block": name,
            "installedComponents": list(block.components),
            "output": block_result.raw.output if block_result else "",
            "error": result.error,
            "command": block_result.command_line if block_result else "",
        }

    # -- Repository --

    async def browse_repository(self, path: str | None = None) -> dict[str, Any]:
        tree = _repository_tree()
        key = (path or "").strip("/")
        if key not in tree:
            raise NotFoundError(f'Path "{path}" not found in repository')
        return {"path": path or "/", "contents": tree[key], "type": "directory"}

    async def search_repository(
        self, query: str, file_type: str | None = None
    ) -> dict[str, Any]:
        results: list[dict[str, str]] = [
            {
                "path": f"{_UI_DIR}/{c.name}.tsx",
                "type": "component",
                "name": c.name,
                "description": c.description,
            }
            for c in catalog.search_components(query)
        ]
        results.extend(
            {
                "path": f"{_BLOCKS_DIR}/{b.name}/",
                "type": "block",
                "name": b.name,
                "description": b.description,
            }
            for b in catalog.search_blocks(query)
        )
        if file_type:
            suffix = "." + file_type.lstrip(".")
            results = [r for r in results if r["path"].endswith(suffix)]
        return {"query": query, "fileType": file_type, "count": len(results), "results": results}

    # -- Project --

    async def init_project(
        self,
        style: str | None = None,
        typescript: bool | None = None,
        tailwind_config: str | None = None,
        tailwind_css: str | None = None,
        components_path: str | None = None,
        force: bool = False,
        cwd: str | None = None,
    ) -> dict[str, Any]:
        options = CliOptions(
            cwd=cwd,
            yes=True,
            defaults=True,
            force=force,
            typescript=typescript,
            style=style,
            tailwind_config=tailwind_config,
            tailwind_css=tailwind_css,
            components_path=components_path,
        )
        result = await self._cli.init(options)
        return _command_payload(result)

    async def check_project_status(self, cwd: str | None = None) -> dict[str, Any]:
        root = self._cli.project_root(cwd)
        info = await self._cli.project_info(cwd)
        components_json = _read_components_json(root)
        tailwind = (components_json or {}).get("tailwind") or {}

        status = {
            "initialized": components_json is not None,
            "framework": info.framework,
            "tailwindInstalled": info.has_tailwind,
            "typescript": info.has_typescript,
            "componentsInstalled": _installed_components(root),
            "blocksInstalled": [],
            "style": (components_json or {}).get("style") or "default",
            "tailwindConfig": tailwind.get("config"),
            "tailwindCss": tailwind.get("css"),
            "aliases": (components_json or {}).get("aliases"),
        }
        return {
            "status": status,
            "projectInfo": {
                "hasTailwind": info.has_tailwind,
                "hasTypeScript": info.has_typescript,
                "framework": info.framework,
            },
            "componentsJson": components_json,
            "recommendation": (
                "Project is ready for shadcn/ui components"
                if status["initialized"]
                else "Run init_project to initialize shadcn/ui in this project"
            ),
        }

    # -- Helpers --

    def _require_component(self, name: str) -> ComponentMeta:
        component = catalog.get_component(name)
        if component is None:
            raise NotFoundError(f'Component "{name}" not found')
        return component

    def _require_block(self, name: str) -> BlockMeta:
        block = catalog.get_block(name)
        if block is None:
            raise NotFoundError(f'Block "{name}" not found')
        return block


def _item_facets(item: RegistryItem) -> dict[str, Any]:
    return {
        "dependencies": facets.dependencies(item),
        "devDependencies": facets.dev_dependencies(item),
        "registryDependencies": facets.registry_dependencies(item),
        "files": facets.file_names(item),
        "tailwindConfig": facets.tailwind_config(item),
        "cssVars": facets.css_vars_dict(item),
    }


def _degraded(meta: ComponentMeta | BlockMeta, error: RegistryFetchError) -> dict[str, Any]:
    return {
        "name": meta.name,
        "description": meta.description,
        "category": meta.category,
        "dependencies": list(meta.dependencies),
        "registryUrl": meta.registry_url,
        "degraded": True,
        "degradedReason": str(error),
    }


def _command_payload(result: CommandResult) -> dict[str, Any]:
    return {
        "success": result.raw_success,
        "output": result.raw.output,
        "error": result.raw.error,
        "command": result.command_line,
    }


def _repository_tree() -> dict[str, list[str]]:
    return {
        "": ["apps/"],
        "apps": ["www/"],
        "apps/www": ["components/", "registry/"],
        "apps/www/components": ["ui/", "examples/", "blocks/", "docs/", "layouts/", "lib/"],
        _UI_DIR: [f"{c.name}.tsx" for c in catalog.all_components()],
        _BLOCKS_DIR: [f"{b.name}/" for b in catalog.all_blocks()],
        "apps/www/registry": ["default/", "new-york/", "index.json"],
    }


def _read_components_json(root: Path) -> dict[str, Any] | None:
    path = root / "components.json"
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable %s: %s", path, e)
        return None
    return data if isinstance(data, dict) else None


def _installed_components(root: Path) -> list[str]:
    found: set[str] = set()
    for rel in _COMPONENT_DIRS:
        ui_dir = root / rel
        if not ui_dir.is_dir():
            continue
        for entry in ui_dir.iterdir():
            if entry.suffix in _COMPONENT_SUFFIXES and catalog.get_component(entry.stem):
                found.add(entry.stem)
    return sorted(found)
