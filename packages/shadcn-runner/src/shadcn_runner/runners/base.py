"""Process runner protocol."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from shadcn_runner.types import RawCommandResult


@runtime_checkable
class ProcessRunner(Protocol):
    """Interface for running one external command to completion."""

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        working_dir: str | None = None,
        timeout_ms: int | None = None,
    ) -> RawCommandResult: ...
