"""Tool registry: named tools, argument validation, and dispatch."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import ValidationError

from shadcn_mcp import schemas
from shadcn_mcp.config import ServerConfig
from shadcn_mcp.errors import ErrorCode, InvalidParamsError, NotFoundError, ToolError
from shadcn_mcp.orchestrator import Orchestrator
from shadcn_registry import RegistryClient
from shadcn_runner import LocalProcessRunner, ShadcnCli

logger = logging.getLogger(__name__)

# Lazy-initialized module-level default registry
_default_registry: ToolRegistry | None = None


@dataclass
class ToolDefinition:
    name: str = ""
    description: str = ""
    args_model: type[schemas.ToolArgs] = schemas.ToolArgs
    execute: Callable[..., Any] | None = None

    @property
    def parameters(self) -> dict[str, Any]:
        """JSON schema of the tool's arguments."""
        return self.args_model.model_json_schema(by_alias=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }


@dataclass
class ToolResult:
    content: Any = ""
    is_error: bool = False
    error_code: ErrorCode | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"content": self.content, "isError": self.is_error}
        if self.error_code is not None:
            out["errorCode"] = self.error_code.value
        return out


@dataclass
class ToolRegistry:
    """Registry for tool definitions.

    ``execute`` is the one place unexpected exceptions are turned into an
    internal-error result; nothing a tool raises escapes it.
    """

    _tools: dict[str, ToolDefinition] = field(default_factory=dict)

    def register(self, definition: ToolDefinition) -> None:
        """Register a tool. Latest registration wins on name collision."""
        self._tools[definition.name] = definition

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools.keys())

    async def execute(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Validate arguments and run a tool by name."""
        try:
            return ToolResult(content=await self._dispatch(name, arguments or {}))
        except ToolError as e:
            logger.debug("Tool %s failed (%s): %s", name, e.code.value, e.message)
            return ToolResult(content=e.message, is_error=True, error_code=e.code)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return ToolResult(
                content=f"Internal error: {e}",
                is_error=True,
                error_code=ErrorCode.INTERNAL_ERROR,
            )

    async def _dispatch(self, name: str, arguments: dict[str, Any]) -> Any:
        tool = self._tools.get(name)
        if tool is None or tool.execute is None:
            raise NotFoundError(f"Unknown tool: {name}")
        if not isinstance(arguments, dict):
            raise InvalidParamsError("Invalid parameters: arguments must be an object")
        try:
            args = tool.args_model.model_validate(arguments)
        except ValidationError as e:
            raise InvalidParamsError(f"Invalid parameters: {_format_validation(e)}") from e

        result = tool.execute(**args.model_dump())
        if inspect.isawaitable(result):
            result = await result
        return result

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def _format_validation(error: ValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def build_tools(orchestrator: Orchestrator) -> list[ToolDefinition]:
    """Create all tool definitions bound to an orchestrator."""
    o = orchestrator
    return [
        ToolDefinition(
            name="list_components",
            description="List all available shadcn/ui components with optional category filtering",
            args_model=schemas.ListComponentsArgs,
            execute=o.list_components,
        ),
        ToolDefinition(
            name="get_component_source",
            description="Get the source code for a specific shadcn/ui component",
            args_model=schemas.ComponentArgs,
            execute=o.get_component_source,
        ),
        ToolDefinition(
            name="get_component_metadata",
            description="Get metadata for a specific component including dependencies and description",
            args_model=schemas.ComponentArgs,
            execute=o.get_component_metadata,
        ),
        ToolDefinition(
            name="get_component_demo",
            description="Get demo code and usage examples for a specific component",
            args_model=schemas.ComponentDemoArgs,
            execute=o.get_component_demo,
        ),
        ToolDefinition(
            name="install_component",
            description="Install one or more shadcn/ui components using the CLI",
            args_model=schemas.InstallComponentArgs,
            execute=o.install_component,
        ),
        ToolDefinition(
            name="diff_component",
            description="Show differences between a local component and the registry version",
            args_model=schemas.DiffComponentArgs,
            execute=o.diff_component,
        ),
        ToolDefinition(
            name="list_blocks",
            description="List all available shadcn/ui blocks with optional category filtering",
            args_model=schemas.ListBlocksArgs,
            execute=o.list_blocks,
        ),
        ToolDefinition(
            name="get_block_source",
            description="Get the complete source code for a shadcn/ui block",
            args_model=schemas.BlockArgs,
            execute=o.get_block_source,
        ),
        ToolDefinition(
            name="get_block_metadata",
            description="Get metadata for a block including its member components",
            args_model=schemas.BlockArgs,
            execute=o.get_block_metadata,
        ),
        ToolDefinition(
            name="install_block",
            description="Install a shadcn/ui block with all its dependencies",
            args_model=schemas.InstallBlockArgs,
            execute=o.install_block,
        ),
        ToolDefinition(
            name="browse_repository",
            description="Browse the shadcn/ui repository structure",
            args_model=schemas.BrowseRepositoryArgs,
            execute=o.browse_repository,
        ),
        ToolDefinition(
            name="search_repository",
            description="Search for files or content in the shadcn/ui repository",
            args_model=schemas.SearchRepositoryArgs,
            execute=o.search_repository,
        ),
        ToolDefinition(
            name="init_project",
            description="Initialize shadcn/ui in a project",
            args_model=schemas.InitProjectArgs,
            execute=o.init_project,
        ),
        ToolDefinition(
            name="check_project_status",
            description="Check the current project status and shadcn/ui configuration",
            args_model=schemas.ProjectStatusArgs,
            execute=o.check_project_status,
        ),
    ]


def build_orchestrator(config: ServerConfig) -> Orchestrator:
    registry = RegistryClient(
        base_url=config.registry_url, style=config.style, timeout=config.http_timeout
    )
    cli = ShadcnCli(
        LocalProcessRunner(working_dir=config.working_dir),
        executable=config.executable,
        package=config.package,
    )
    return Orchestrator(registry, cli)


def build_registry(orchestrator: Orchestrator) -> ToolRegistry:
    registry = ToolRegistry()
    for definition in build_tools(orchestrator):
        registry.register(definition)
    return registry


def get_default_registry() -> ToolRegistry:
    """Get or lazily build the module-level registry from the environment."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_registry(build_orchestrator(ServerConfig.from_env()))
    return _default_registry


def set_default_registry(registry: ToolRegistry | None) -> None:
    """Override the module-level default registry."""
    global _default_registry
    _default_registry = registry
