"""Shared test doubles."""

import os

import pytest

from shadcn_registry import RegistryFetchError, RegistryItem
from shadcn_runner import RawCommandResult


class FakeRunner:
    """ProcessRunner that records calls and replays queued results."""

    def __init__(self, working_dir: str | None = None):
        self.calls: list[dict] = []
        self.results: list[RawCommandResult] = []
        self._working_dir = working_dir or os.getcwd()

    def working_directory(self) -> str:
        return self._working_dir

    async def run(self, command, args=(), *, working_dir=None, timeout_ms=None):
        self.calls.append(
            {
                "command": command,
                "args": list(args),
                "working_dir": working_dir,
                "timeout_ms": timeout_ms,
            }
        )
        if self.results:
            return self.results.pop(0)
        return RawCommandResult(succeeded=True, output="", exit_code=0)


class FakeRegistry:
    """Registry stand-in serving items from a dict."""

    def __init__(self):
        self.items: dict[str, RegistryItem] = {}
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    async def fetch_component(self, name, style=None):
        self.calls.append(("component", name, style))
        return self._get("component", name)

    async def fetch_block(self, name, style=None):
        self.calls.append(("block", name, style))
        return self._get("block", name)

    def _get(self, kind, name):
        if self.error is not None:
            raise self.error
        if name in self.items:
            return self.items[name]
        raise RegistryFetchError(
            f"Failed to fetch {kind} {name}: 404 Not Found",
            kind=kind,
            name=name,
            status_code=404,
        )


@pytest.fixture
def fake_runner(tmp_path):
    return FakeRunner(working_dir=str(tmp_path))


@pytest.fixture
def fake_registry():
    return FakeRegistry()
