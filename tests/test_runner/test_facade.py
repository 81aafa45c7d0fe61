"""Tests for ShadcnCli."""

import json

import pytest

from shadcn_runner import CliOptions, RawCommandResult, ShadcnCli
from shadcn_runner.facade import (
    ADD_TIMEOUT_MS,
    DIFF_TIMEOUT_MS,
    INIT_TIMEOUT_MS,
    add_args,
    init_args,
)


@pytest.fixture
def cli(fake_runner) -> ShadcnCli:
    return ShadcnCli(fake_runner)


class TestArgBuilders:
    def test_init_defaults_have_no_flags(self):
        assert init_args(CliOptions()) == []

    def test_init_all_flags(self):
        args = init_args(
            CliOptions(
                yes=True,
                defaults=True,
                force=True,
                silent=True,
                typescript=True,
                style="new-york",
                tailwind_config="tailwind.config.ts",
                tailwind_css="app/globals.css",
                components_path="@/components",
            )
        )
        assert args == [
            "--yes",
            "--defaults",
            "--force",
            "--silent",
            "--typescript",
            "--style",
            "new-york",
            "--tailwind-config",
            "tailwind.config.ts",
            "--tailwind-css",
            "app/globals.css",
            "--components",
            "@/components",
        ]

    def test_typescript_false(self):
        assert init_args(CliOptions(typescript=False)) == ["--no-typescript"]

    def test_empty_strings_are_unset(self):
        assert init_args(CliOptions(style="", tailwind_css="")) == []

    def test_add_ignores_init_only_options(self):
        assert add_args(CliOptions(yes=True, style="default", defaults=True)) == ["--yes"]


class TestAdd:
    @pytest.mark.asyncio
    async def test_command_shape(self, cli, fake_runner):
        await cli.add(["button", "card"], CliOptions(yes=True, force=True, cwd="/proj"))
        call = fake_runner.calls[0]
        assert call["command"] == "npx"
        assert call["args"] == ["shadcn@latest", "add", "--yes", "--force", "button", "card"]
        assert call["working_dir"] == "/proj"
        assert call["timeout_ms"] == ADD_TIMEOUT_MS

    @pytest.mark.asyncio
    async def test_classifies_output(self, cli, fake_runner):
        fake_runner.results.append(
            RawCommandResult(succeeded=True, output="Installing\n - button\n", exit_code=0)
        )
        result = await cli.add(["button"])
        assert result.raw_success
        assert result.classified.installed == ["button"]
        assert result.command_line == "npx shadcn@latest add button"

    @pytest.mark.asyncio
    async def test_failure_is_data(self, cli, fake_runner):
        fake_runner.results.append(RawCommandResult(succeeded=False, error="boom", exit_code=1))
        result = await cli.add(["button"])
        assert not result.raw_success
        assert result.raw.error == "boom"

    @pytest.mark.asyncio
    async def test_empty_names_rejected(self, cli, fake_runner):
        with pytest.raises(ValueError):
            await cli.add([])
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    async def test_string_names_rejected(self, cli):
        with pytest.raises(TypeError):
            await cli.add("button")

    @pytest.mark.asyncio
    async def test_custom_executable(self, fake_runner):
        cli = ShadcnCli(fake_runner, executable="pnpm", package="dlx shadcn")
        await cli.add(["badge"])
        assert fake_runner.calls[0]["command"] == "pnpm"
        assert fake_runner.calls[0]["args"][0] == "dlx shadcn"


class TestInitAndDiff:
    @pytest.mark.asyncio
    async def test_init(self, cli, fake_runner):
        await cli.init(CliOptions(yes=True, defaults=True))
        call = fake_runner.calls[0]
        assert call["args"] == ["shadcn@latest", "init", "--yes", "--defaults"]
        assert call["timeout_ms"] == INIT_TIMEOUT_MS

    @pytest.mark.asyncio
    async def test_diff(self, cli, fake_runner):
        await cli.diff("button")
        call = fake_runner.calls[0]
        assert call["args"] == ["shadcn@latest", "diff", "button"]
        assert call["timeout_ms"] == DIFF_TIMEOUT_MS


class TestAddBlock:
    @pytest.mark.asyncio
    async def test_components_then_block(self, cli, fake_runner):
        result = await cli.add_block("dashboard-01", ["card", "tabs"], CliOptions(yes=True))
        assert len(fake_runner.calls) == 2
        assert fake_runner.calls[0]["args"][-2:] == ["card", "tabs"]
        assert fake_runner.calls[1]["args"][-1] == "dashboard-01"
        assert result.success
        assert result.error is None

    @pytest.mark.asyncio
    async def test_component_failure_skips_block(self, cli, fake_runner):
        fake_runner.results.append(RawCommandResult(succeeded=False, error="npm ERR!"))
        result = await cli.add_block("dashboard-01", ["card"])
        assert len(fake_runner.calls) == 1
        assert not result.success
        assert result.block_result is None
        assert result.error == "npm ERR!"

    @pytest.mark.asyncio
    async def test_no_components(self, cli, fake_runner):
        result = await cli.add_block("sidebar-01", [])
        assert len(fake_runner.calls) == 1
        assert result.components_result is None
        assert result.success


class TestProjectInspection:
    @pytest.mark.asyncio
    async def test_check_dependencies_without_package_json(self, cli, fake_runner, tmp_path):
        result = await cli.check_dependencies(str(tmp_path))
        assert not result.raw_success
        assert "No package.json found" in result.raw.error
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    async def test_check_dependencies_runs_npm_list(self, cli, fake_runner, tmp_path):
        (tmp_path / "package.json").write_text("{}")
        await cli.check_dependencies(str(tmp_path))
        assert fake_runner.calls[0]["command"] == "npm"
        assert fake_runner.calls[0]["args"] == ["list", "tailwindcss", "--json"]

    @pytest.mark.asyncio
    async def test_project_info(self, cli, fake_runner, tmp_path):
        (tmp_path / "package.json").write_text(
            json.dumps({"dependencies": {"next": "14.0.0", "react": "18.0.0"}})
        )
        (tmp_path / "tsconfig.json").write_text("{}")
        fake_runner.results.append(
            RawCommandResult(
                succeeded=True, output=json.dumps({"dependencies": {"tailwindcss": {}}})
            )
        )
        info = await cli.project_info(str(tmp_path))
        assert info.framework == "next"
        assert info.has_typescript
        assert info.has_tailwind

    @pytest.mark.asyncio
    async def test_project_info_empty_dir(self, cli, fake_runner, tmp_path):
        info = await cli.project_info(str(tmp_path))
        assert info.framework is None
        assert not info.has_tailwind
        assert not info.has_typescript
        assert fake_runner.calls == []

    def test_project_root_defaults_to_runner_dir(self, cli, tmp_path):
        assert cli.project_root() == tmp_path
        assert str(cli.project_root("/elsewhere")) == "/elsewhere"
