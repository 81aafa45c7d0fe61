"""Runs the shadcn CLI and normalizes its output."""

from shadcn_runner.classifier import classify_output
from shadcn_runner.facade import ShadcnCli
from shadcn_runner.runners import LocalProcessRunner, ProcessRunner
from shadcn_runner.types import (
    BlockInstallResult,
    ClassifiedResult,
    CliOptions,
    CommandResult,
    ProjectInfo,
    RawCommandResult,
)

__all__ = [
    "BlockInstallResult",
    "ClassifiedResult",
    "CliOptions",
    "CommandResult",
    "LocalProcessRunner",
    "ProcessRunner",
    "ProjectInfo",
    "RawCommandResult",
    "ShadcnCli",
    "classify_output",
]
