"""Process runners."""

from shadcn_runner.runners.base import ProcessRunner
from shadcn_runner.runners.local import LocalProcessRunner

__all__ = ["LocalProcessRunner", "ProcessRunner"]
