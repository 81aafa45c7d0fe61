"""CLI entry point for the shadcn/ui tool server."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from shadcn_mcp.tools import get_default_registry


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """shadcn/ui component catalog, registry, and CLI tools."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")


@main.command("tools")
def list_tools():
    """List the available tools."""
    for definition in get_default_registry().definitions():
        click.echo(f"{definition.name}: {definition.description}")


@main.command()
@click.argument("name")
@click.option("--args", "args_json", default="{}", help="Tool arguments as a JSON object")
def call(name: str, args_json: str):
    """Run a tool and print its result as JSON."""
    try:
        arguments = json.loads(args_json)
    except ValueError as e:
        click.echo(f"Invalid --args JSON: {e}", err=True)
        sys.exit(2)

    result = asyncio.run(get_default_registry().execute(name, arguments))
    if result.is_error:
        code = result.error_code.value if result.error_code else "internal_error"
        click.echo(f"Error [{code}]: {result.content}", err=True)
        sys.exit(1)

    if isinstance(result.content, str):
        click.echo(result.content)
    else:
        click.echo(json.dumps(result.content, indent=2))


@main.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", default=8000, type=int, help="Port to bind")
def serve(host: str, port: int):
    """Start the HTTP server."""
    import uvicorn

    from shadcn_mcp.server import app

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
