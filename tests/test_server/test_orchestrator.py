"""Tests for Orchestrator."""

import json

import pytest

from shadcn_mcp import InternalError, NotFoundError, Orchestrator
from shadcn_registry import CssVars, RegistryFetchError, RegistryFile, RegistryItem
from shadcn_runner import RawCommandResult, ShadcnCli


@pytest.fixture
def orchestrator(fake_registry, fake_runner) -> Orchestrator:
    return Orchestrator(fake_registry, ShadcnCli(fake_runner))


def _button_item() -> RegistryItem:
    return RegistryItem(
        name="button",
        type="registry:ui",
        dependencies=["@radix-ui/react-slot"],
        registry_dependencies=[],
        files=[RegistryFile(name="button.tsx", content="export { Button }")],
        css_vars=CssVars(dark={"primary": "0 0% 98%"}),
    )


class TestListing:
    @pytest.mark.asyncio
    async def test_list_components(self, orchestrator):
        result = await orchestrator.list_components()
        assert result["count"] == 50
        assert len(result["components"]) == 50

    @pytest.mark.asyncio
    async def test_list_components_by_category(self, orchestrator):
        result = await orchestrator.list_components(category="feedback")
        assert result["count"] == len(result["components"])
        assert all(c["category"] == "feedback" for c in result["components"])

    @pytest.mark.asyncio
    async def test_list_blocks(self, orchestrator):
        result = await orchestrator.list_blocks(category="charts")
        assert [b["name"] for b in result["blocks"]] == [
            "chart-01",
            "chart-02",
            "chart-03",
            "chart-04",
        ]


class TestComponentSource:
    @pytest.mark.asyncio
    async def test_returns_primary_file(self, orchestrator, fake_registry):
        fake_registry.items["button"] = _button_item()
        assert await orchestrator.get_component_source("button") == "export { Button }"

    @pytest.mark.asyncio
    async def test_passes_style(self, orchestrator, fake_registry):
        fake_registry.items["button"] = _button_item()
        await orchestrator.get_component_source("button", style="new-york")
        assert fake_registry.calls == [("component", "button", "new-york")]

    @pytest.mark.asyncio
    async def test_unknown_component(self, orchestrator, fake_registry):
        with pytest.raises(NotFoundError, match='Component "nope" not found'):
            await orchestrator.get_component_source("nope")
        assert fake_registry.calls == []

    @pytest.mark.asyncio
    async def test_fetch_failure_is_not_masked(self, orchestrator):
        with pytest.raises(InternalError, match="Failed to fetch component source"):
            await orchestrator.get_component_source("button")

    @pytest.mark.asyncio
    async def test_empty_files(self, orchestrator, fake_registry):
        fake_registry.items["button"] = RegistryItem(name="button")
        with pytest.raises(InternalError, match="No files found"):
            await orchestrator.get_component_source("button")


class TestComponentMetadata:
    @pytest.mark.asyncio
    async def test_from_registry(self, orchestrator, fake_registry):
        fake_registry.items["button"] = _button_item()
        result = await orchestrator.get_component_metadata("button")
        assert result["degraded"] is False
        assert result["category"] == "form"
        assert result["dependencies"] == ["@radix-ui/react-slot"]
        assert result["files"] == ["button.tsx"]
        assert result["cssVars"] == {"dark": {"primary": "0 0% 98%"}}

    @pytest.mark.asyncio
    async def test_falls_back_to_catalog(self, orchestrator):
        result = await orchestrator.get_component_metadata("dialog")
        assert result["degraded"] is True
        assert result["name"] == "dialog"
        assert result["dependencies"] == ["@radix-ui/react-dialog"]
        assert "404" in result["degradedReason"]
        assert result["registryUrl"].endswith("/ui/dialog.json")

    @pytest.mark.asyncio
    async def test_fallback_on_network_error(self, orchestrator, fake_registry):
        fake_registry.error = RegistryFetchError(
            "Error fetching component card: timed out", kind="component", name="card"
        )
        result = await orchestrator.get_component_metadata("card")
        assert result["degraded"] is True
        assert result["degradedReason"] == "Error fetching component card: timed out"

    @pytest.mark.asyncio
    async def test_unknown_component_is_not_degraded(self, orchestrator):
        with pytest.raises(NotFoundError):
            await orchestrator.get_component_metadata("nope")


class TestComponentDemo:
    @pytest.mark.asyncio
    async def test_demo(self, orchestrator):
        result = await orchestrator.get_component_demo("card", demo_index=1)
        assert result["currentDemo"]["name"] == "Card with Form"
        assert result["availableDemos"] == 2
        assert "export function CardwithFormDemo()" in result["formattedCode"]


class TestInstallComponent:
    @pytest.mark.asyncio
    async def test_classified_output(self, orchestrator, fake_runner):
        fake_runner.results.append(
            RawCommandResult(
                succeeded=True,
                output="Installing\n - button\nSkipping existing\n - card\n",
                exit_code=0,
            )
        )
        result = await orchestrator.install_component(["button", "card"], force=True)
        assert result["success"] is True
        assert result["installed"] == ["button"]
        assert result["skipped"] == ["card"]
        assert result["errors"] == []
        assert result["command"] == "npx shadcn@latest add --yes --force button card"

    @pytest.mark.asyncio
    async def test_unclassified_success_reports_requested(self, orchestrator, fake_runner):
        fake_runner.results.append(RawCommandResult(succeeded=True, output="Done.", exit_code=0))
        result = await orchestrator.install_component(["badge"])
        assert result["installed"] == ["badge"]
        assert result["skipped"] == []

    @pytest.mark.asyncio
    async def test_failure(self, orchestrator, fake_runner):
        fake_runner.results.append(
            RawCommandResult(succeeded=False, error="npm ERR! network", exit_code=1)
        )
        result = await orchestrator.install_component(["badge"], cwd="/proj")
        assert result["success"] is False
        assert result["installed"] == []
        assert result["errors"] == ["npm ERR! network"]
        assert fake_runner.calls[0]["working_dir"] == "/proj"

    @pytest.mark.asyncio
    async def test_unknown_component_runs_nothing(self, orchestrator, fake_runner):
        with pytest.raises(NotFoundError):
            await orchestrator.install_component(["button", "nope"])
        assert fake_runner.calls == []


class TestDiffComponent:
    @pytest.mark.asyncio
    async def test_diff(self, orchestrator, fake_runner):
        fake_runner.results.append(
            RawCommandResult(succeeded=True, output="No updates found.", exit_code=0)
        )
        result = await orchestrator.diff_component("button")
        assert result == {
            "success": True,
            "output": "No updates found.",
            "error": None,
            "command": "npx shadcn@latest diff button",
        }


class TestBlocks:
    @pytest.mark.asyncio
    async def test_block_source(self, orchestrator, fake_registry):
        fake_registry.items["dashboard-01"] = RegistryItem(
            name="dashboard-01",
            registry_dependencies=["card"],
            files=[
                RegistryFile(name="page.tsx", content="page"),
                RegistryFile(name="stats.tsx", content="stats"),
            ],
        )
        result = await orchestrator.get_block_source("dashboard-01")
        assert [f["name"] for f in result["files"]] == ["page.tsx", "stats.tsx"]
        assert result["registryDependencies"] == ["card"]
        assert result["components"] == ["card", "tabs", "button"]

    @pytest.mark.asyncio
    async def test_block_source_empty(self, orchestrator, fake_registry):
        fake_registry.items["dashboard-01"] = RegistryItem(name="dashboard-01")
        with pytest.raises(InternalError, match="Failed to fetch block source"):
            await orchestrator.get_block_source("dashboard-01")

    @pytest.mark.asyncio
    async def test_unknown_block(self, orchestrator):
        with pytest.raises(NotFoundError, match='Block "nope" not found'):
            await orchestrator.get_block_source("nope")

    @pytest.mark.asyncio
    async def test_block_metadata_fallback(self, orchestrator):
        result = await orchestrator.get_block_metadata("dashboard-01")
        assert result["degraded"] is True
        assert result["components"] == ["card", "tabs", "button"]

    @pytest.mark.asyncio
    async def test_install_block(self, orchestrator, fake_runner):
        result = await orchestrator.install_block("dashboard-01")
        assert result["success"] is True
        assert result["installedComponents"] == ["card", "tabs", "button"]
        assert len(fake_runner.calls) == 2
        assert result["command"] == "npx shadcn@latest add --yes dashboard-01"

    @pytest.mark.asyncio
    async def test_install_block_component_failure(self, orchestrator, fake_runner):
        fake_runner.results.append(RawCommandResult(succeeded=False, error="EACCES"))
        with pytest.raises(InternalError, match="Failed to install required components: EACCES"):
            await orchestrator.install_block("dashboard-01")
        assert len(fake_runner.calls) == 1


class TestRepository:
    @pytest.mark.asyncio
    async def test_browse_root(self, orchestrator):
        result = await orchestrator.browse_repository()
        assert result["path"] == "/"
        assert result["contents"] == ["apps/"]

    @pytest.mark.asyncio
    async def test_browse_ui(self, orchestrator):
        result = await orchestrator.browse_repository("apps/www/components/ui/")
        assert "button.tsx" in result["contents"]

    @pytest.mark.asyncio
    async def test_browse_unknown(self, orchestrator):
        with pytest.raises(NotFoundError):
            await orchestrator.browse_repository("packages/cli")

    @pytest.mark.asyncio
    async def test_search(self, orchestrator):
        result = await orchestrator.search_repository("card")
        types = {r["type"] for r in result["results"]}
        assert types == {"component", "block"}
        assert result["count"] == len(result["results"])

    @pytest.mark.asyncio
    async def test_search_file_type(self, orchestrator):
        result = await orchestrator.search_repository("card", file_type="tsx")
        assert result["results"]
        assert all(r["path"].endswith(".tsx") for r in result["results"])


class TestProject:
    @pytest.mark.asyncio
    async def test_init_project(self, orchestrator, fake_runner):
        await orchestrator.init_project(style="new-york", typescript=False, cwd="/proj")
        call = fake_runner.calls[0]
        assert call["args"] == [
            "shadcn@latest",
            "init",
            "--yes",
            "--defaults",
            "--no-typescript",
            "--style",
            "new-york",
        ]
        assert call["working_dir"] == "/proj"

    @pytest.mark.asyncio
    async def test_status_initialized(self, orchestrator, fake_runner, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"devDependencies": {"vite": "5"}}))
        (tmp_path / "components.json").write_text(
            json.dumps(
                {
                    "style": "new-york",
                    "tailwind": {"config": "tailwind.config.js", "css": "src/index.css"},
                    "aliases": {"components": "@/components"},
                }
            )
        )
        ui = tmp_path / "src" / "components" / "ui"
        ui.mkdir(parents=True)
        (ui / "button.tsx").write_text("")
        (ui / "utils.ts").write_text("")
        fake_runner.results.append(
            RawCommandResult(succeeded=True, output='{"dependencies": {"tailwindcss": {}}}')
        )

        result = await orchestrator.check_project_status(str(tmp_path))
        status = result["status"]
        assert status["initialized"] is True
        assert status["framework"] == "vite"
        assert status["tailwindInstalled"] is True
        assert status["typescript"] is False
        assert status["style"] == "new-york"
        assert status["tailwindCss"] == "src/index.css"
        assert status["componentsInstalled"] == ["button"]
        assert result["recommendation"] == "Project is ready for shadcn/ui components"

    @pytest.mark.asyncio
    async def test_status_uninitialized(self, orchestrator, tmp_path):
        result = await orchestrator.check_project_status(str(tmp_path))
        assert result["status"]["initialized"] is False
        assert result["componentsJson"] is None
        assert "init_project" in result["recommendation"]
