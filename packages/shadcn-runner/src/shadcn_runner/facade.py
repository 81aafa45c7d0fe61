"""Typed wrapper around the shadcn CLI.

Each operation builds an argument vector from CliOptions, runs it through a
ProcessRunner with a fixed timeout ceiling, and classifies the output.
Process failures are returned as data; only malformed calls raise.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shadcn_runner.classifier import classify_output
from shadcn_runner.runners.base import ProcessRunner
from shadcn_runner.types import (
    BlockInstallResult,
    CliOptions,
    ClassifiedResult,
    CommandResult,
    ProjectInfo,
    RawCommandResult,
)

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "npx"
DEFAULT_PACKAGE = "shadcn@latest"

INIT_TIMEOUT_MS = 120_000
ADD_TIMEOUT_MS = 60_000
DIFF_TIMEOUT_MS = 30_000
INSPECT_TIMEOUT_MS = 30_000

# package.json dependency name -> framework, first match wins
_FRAMEWORKS = (
    ("next", "next"),
    ("vite", "vite"),
    ("@remix-run/react", "remix"),
    ("remix", "remix"),
    ("gatsby", "gatsby"),
    ("astro", "astro"),
    ("laravel-vite-plugin", "laravel"),
)


def _flag(args: list[str], enabled: bool, flag: str) -> None:
    if enabled:
        args.append(flag)


def _valued(args: list[str], value: str | None, flag: str) -> None:
    if value:
        args.extend([flag, value])


def init_args(options: CliOptions) -> list[str]:
    args: list[str] = []
    _flag(args, options.yes, "--yes")
    _flag(args, options.defaults, "--defaults")
    _flag(args, options.force, "--force")
    _flag(args, options.silent, "--silent")
    if options.typescript is not None:
        args.append("--typescript" if options.typescript else "--no-typescript")
    _valued(args, options.style, "--style")
    _valued(args, options.tailwind_config, "--tailwind-config")
    _valued(args, options.tailwind_css, "--tailwind-css")
    _valued(args, options.components_path, "--components")
    return args


def add_args(options: CliOptions) -> list[str]:
    args: list[str] = []
    _flag(args, options.yes, "--yes")
    _flag(args, options.force, "--force")
    _flag(args, options.silent, "--silent")
    return args


def diff_args(options: CliOptions) -> list[str]:
    args: list[str] = []
    _flag(args, options.yes, "--yes")
    return args


def _validate_names(names: list[str]) -> list[str]:
    if isinstance(names, str):
        raise TypeError("names must be a list of strings, not a single string")
    names = list(names)
    if not names:
        raise ValueError("at least one name is required")
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"invalid name: {name!r}")
    return names


class ShadcnCli:
    """Runs shadcn CLI subcommands through a ProcessRunner."""

    def __init__(
        self,
        runner: ProcessRunner,
        *,
        executable: str = DEFAULT_EXECUTABLE,
        package: str = DEFAULT_PACKAGE,
    ) -> None:
        self._runner = runner
        self._executable = executable
        self._package = package

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def package(self) -> str:
        return self._package

    async def init(self, options: CliOptions | None = None) -> CommandResult:
        options = options or CliOptions()
        return await self._run_cli(["init", *init_args(options)], options.cwd, INIT_TIMEOUT_MS)

    async def add(self, names: list[str], options: CliOptions | None = None) -> CommandResult:
        names = _validate_names(names)
        options = options or CliOptions()
        return await self._run_cli(
            ["add", *add_args(options), *names], options.cwd, ADD_TIMEOUT_MS
        )

    async def diff(self, name: str, options: CliOptions | None = None) -> CommandResult:
        (name,) = _validate_names([name])
        options = options or CliOptions()
        return await self._run_cli(
            ["diff", *diff_args(options), name], options.cwd, DIFF_TIMEOUT_MS
        )

    async def add_block(
        self,
        block: str,
        components: list[str],
        options: CliOptions | None = None,
    ) -> BlockInstallResult:
        """Install a block's member components, then the block itself.

        The block is not attempted when the component install fails.
        """
        (block,) = _validate_names([block])
        result = BlockInstallResult(block=block, components=list(components))
        if components:
            result.components_result = await self.add(components, options)
            if not result.components_result.raw_success:
                logger.warning(
                    "Component install for block %s failed; skipping block install", block
                )
                return result
        result.block_result = await self.add([block], options)
        return result

    async def check_dependencies(self, cwd: str | None = None) -> CommandResult:
        """Check for package.json, then ask npm whether tailwindcss is installed."""
        root = self.project_root(cwd)
        if not (root / "package.json").is_file():
            raw = RawCommandResult(
                succeeded=False,
                error="No package.json found. Please run npm init first.",
            )
            return CommandResult(raw=raw)
        return await self._run(
            "npm", ["list", "tailwindcss", "--json"], cwd, INSPECT_TIMEOUT_MS, classify=False
        )

    async def project_info(self, cwd: str | None = None) -> ProjectInfo:
        root = self.project_root(cwd)
        info = ProjectInfo(has_typescript=(root / "tsconfig.json").is_file())

        package_json = _read_json(root / "package.json")
        if package_json is not None:
            info.framework = _detect_framework(package_json)
            tailwind = await self._run(
                "npm", ["list", "tailwindcss", "--json"], cwd, INSPECT_TIMEOUT_MS, classify=False
            )
            info.has_tailwind = tailwind.raw_success and _npm_lists_package(
                tailwind.raw.output, "tailwindcss"
            )
        return info

    async def _run_cli(self, args: list[str], cwd: str | None, timeout_ms: int) -> CommandResult:
        return await self._run(self._executable, [self._package, *args], cwd, timeout_ms)

    async def _run(
        self,
        command: str,
        args: list[str],
        cwd: str | None,
        timeout_ms: int,
        classify: bool = True,
    ) -> CommandResult:
        raw = await self._runner.run(command, args, working_dir=cwd, timeout_ms=timeout_ms)
        classified = classify_output(raw.output) if classify else ClassifiedResult()
        return CommandResult(raw=raw, classified=classified, args=[command, *args])

    def project_root(self, cwd: str | None = None) -> Path:
        """Directory a command with this ``cwd`` would run in."""
        if cwd:
            return Path(cwd)
        getter = getattr(self._runner, "working_directory", None)
        return Path(getter()) if callable(getter) else Path.cwd()


def _read_json(path: Path) -> dict | None:
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _detect_framework(package_json: dict) -> str | None:
    deps: dict = {}
    for key in ("dependencies", "devDependencies"):
        section = package_json.get(key)
        if isinstance(section, dict):
            deps.update(section)
    for dep, framework in _FRAMEWORKS:
        if dep in deps:
            return framework
    return None


def _npm_lists_package(output: str, package: str) -> bool:
    try:
        data = json.loads(output)
    except ValueError:
        return False
    deps = data.get("dependencies") if isinstance(data, dict) else None
    return isinstance(deps, dict) and package in deps
