"""Core types for the runner package."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawCommandResult:
    """Unprocessed outcome of one external process invocation."""

    succeeded: bool
    output: str = ""
    error: str | None = None
    exit_code: int | None = None
    timed_out: bool = False
    duration_ms: int = 0


@dataclass
class ClassifiedResult:
    """Items partitioned out of command output.

    A list is None when its marker never appeared in the output.
    """

    installed: list[str] | None = None
    skipped: list[str] | None = None
    errored: list[str] | None = None

    @property
    def is_empty(self) -> bool:
        return self.installed is None and self.skipped is None and self.errored is None


@dataclass
class CommandResult:
    raw: RawCommandResult
    classified: ClassifiedResult = field(default_factory=ClassifiedResult)
    args: list[str] = field(default_factory=list)

    @property
    def raw_success(self) -> bool:
        return self.raw.succeeded

    @property
    def command_line(self) -> str:
        return " ".join(self.args)


@dataclass
class BlockInstallResult:
    """Outcome of installing a block's member components and then the block."""

    block: str
    components: list[str] = field(default_factory=list)
    components_result: CommandResult | None = None
    block_result: CommandResult | None = None

    @property
    def success(self) -> bool:
        if self.components_result is not None and not self.components_result.raw_success:
            return False
        return self.block_result is not None and self.block_result.raw_success

    @property
    def error(self) -> str | None:
        if self.components_result is not None and not self.components_result.raw_success:
            return self.components_result.raw.error
        if self.block_result is not None:
            return self.block_result.raw.error
        return None


@dataclass
class CliOptions:
    """Options for the shadcn CLI.

    Booleans map to the presence of a flag. ``typescript`` is tri-state: None
    leaves the choice to the CLI. Empty strings are treated as unset.
    """

    cwd: str | None = None
    yes: bool = False
    defaults: bool = False
    force: bool = False
    silent: bool = False
    typescript: bool | None = None
    style: str | None = None
    tailwind_config: str | None = None
    tailwind_css: str | None = None
    components_path: str | None = None


@dataclass
class ProjectInfo:
    has_tailwind: bool = False
    has_typescript: bool = False
    framework: str | None = None
