"""shadcn/ui tool server."""

from shadcn_mcp.config import ServerConfig
from shadcn_mcp.errors import (
    ErrorCode,
    InternalError,
    InvalidParamsError,
    NotFoundError,
    ToolError,
)
from shadcn_mcp.orchestrator import Orchestrator
from shadcn_mcp.tools import (
    ToolDefinition,
    ToolRegistry,
    ToolResult,
    build_orchestrator,
    build_registry,
    get_default_registry,
    set_default_registry,
)

__all__ = [
    "ErrorCode",
    "InternalError",
    "InvalidParamsError",
    "NotFoundError",
    "Orchestrator",
    "ServerConfig",
    "ToolDefinition",
    "ToolError",
    "ToolRegistry",
    "ToolResult",
    "build_orchestrator",
    "build_registry",
    "get_default_registry",
    "set_default_registry",
]
