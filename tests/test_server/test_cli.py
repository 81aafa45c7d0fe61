"""Tests for the CLI entry point."""

import json

import pytest
from click.testing import CliRunner

from shadcn_mcp import Orchestrator, build_registry, set_default_registry
from shadcn_mcp.cli import main
from shadcn_runner import ShadcnCli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def tool_registry(fake_registry, fake_runner):
    set_default_registry(build_registry(Orchestrator(fake_registry, ShadcnCli(fake_runner))))
    yield
    set_default_registry(None)


class TestToolsCommand:
    def test_lists_tools(self, runner):
        result = runner.invoke(main, ["tools"])
        assert result.exit_code == 0
        assert "install_component:" in result.output
        assert len(result.output.strip().splitlines()) == 14


class TestCallCommand:
    def test_call_json(self, runner):
        result = runner.invoke(main, ["call", "list_blocks", "--args", '{"category": "layout"}'])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["count"] == 7

    def test_call_default_args(self, runner):
        result = runner.invoke(main, ["call", "list_components"])
        assert result.exit_code == 0
        assert json.loads(result.output)["count"] == 50

    def test_tool_error(self, runner):
        result = runner.invoke(main, ["call", "get_component_demo", "--args", '{"name": "nope"}'])
        assert result.exit_code == 1
        assert "not_found" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(main, ["call", "list_components", "--args", "{not json"])
        assert result.exit_code == 2

    def test_debug_flag(self, runner):
        result = runner.invoke(main, ["--debug", "call", "browse_repository"])
        assert result.exit_code == 0
