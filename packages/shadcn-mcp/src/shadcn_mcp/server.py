"""HTTP server exposing the tools."""

from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI, HTTPException

from shadcn_mcp.errors import ErrorCode
from shadcn_mcp.tools import get_default_registry

app = FastAPI(title="shadcn/ui Tool Server")

_STATUS_FOR_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INVALID_PARAMS: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


@app.get("/tools")
async def list_tools():
    """List the available tools and their argument schemas."""
    registry = get_default_registry()
    return {"tools": [d.to_dict() for d in registry.definitions()]}


@app.post("/tools/{name}")
async def call_tool(name: str, arguments: Any = Body(default=None)):
    """Run a tool. The request body is the tool's argument object."""
    result = await get_default_registry().execute(name, arguments)
    if result.is_error:
        code = result.error_code or ErrorCode.INTERNAL_ERROR
        raise HTTPException(
            status_code=_STATUS_FOR_CODE[code],
            detail={"code": code.value, "message": result.content},
        )
    return result.to_dict()
