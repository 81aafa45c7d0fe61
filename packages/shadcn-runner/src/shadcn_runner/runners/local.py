"""Local process runner using asyncio subprocesses."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import time
from typing import Sequence

from shadcn_runner.types import RawCommandResult

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Command timed out"

# Plain text output for the classifier
_NO_COLOR_ENV = {"FORCE_COLOR": "0", "NO_COLOR": "1"}

_READ_CHUNK = 4096


def _build_env(extra: dict[str, str] | None = None) -> dict[str, str]:
    """Inherit the parent environment with color output disabled."""
    env = dict(os.environ)
    env.update(_NO_COLOR_ENV)
    if extra:
        env.update(extra)
    return env


async def _drain(stream: asyncio.StreamReader | None, sink: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            return
        sink.extend(chunk)


def _decode(buf: bytearray) -> str:
    return bytes(buf).decode(errors="replace")


class LocalProcessRunner:
    """Runs commands as child processes of this one.

    stdout and stderr are accumulated separately while the child runs, so a
    timeout still returns whatever output was produced before it fired.
    """

    def __init__(
        self,
        working_dir: str | None = None,
        env_vars: dict[str, str] | None = None,
        kill_grace_s: float = 2.0,
        drain_timeout_s: float = 1.0,
    ) -> None:
        self._working_dir = working_dir or os.getcwd()
        self._env_vars = env_vars
        self._kill_grace_s = kill_grace_s
        self._drain_timeout_s = drain_timeout_s

    def working_directory(self) -> str:
        return self._working_dir

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        working_dir: str | None = None,
        timeout_ms: int | None = None,
    ) -> RawCommandResult:
        cwd = working_dir or self._working_dir
        start = time.monotonic()
        logger.debug("Running %s %s (cwd=%s, timeout_ms=%s)", command, list(args), cwd, timeout_ms)

        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=_build_env(self._env_vars),
                start_new_session=True,
            )
        except OSError as e:
            logger.debug("Failed to start %s: %s", command, e)
            return RawCommandResult(
                succeeded=False,
                output="",
                error=str(e) or type(e).__name__,
                duration_ms=_elapsed_ms(start),
            )

        stdout_buf = bytearray()
        stderr_buf = bytearray()
        readers = [
            asyncio.create_task(_drain(proc.stdout, stdout_buf)),
            asyncio.create_task(_drain(proc.stderr, stderr_buf)),
        ]

        timeout_s = timeout_ms / 1000.0 if timeout_ms else None
        try:
            await asyncio.wait_for(proc.wait(), timeout=timeout_s)
        except asyncio.TimeoutError:
            # The timer won the race: freeze the output now so anything the
            # dying process writes afterwards is dropped.
            output = _decode(stdout_buf)
            logger.warning("%s timed out after %sms", command, timeout_ms)
            await self._terminate(proc)
            await _cancel(readers)
            return RawCommandResult(
                succeeded=False,
                output=output,
                error=TIMEOUT_MESSAGE,
                exit_code=_signal_exit_code(proc.returncode),
                timed_out=True,
                duration_ms=_elapsed_ms(start),
            )

        # Grandchildren can keep the pipes open after the child exits
        _, pending = await asyncio.wait(readers, timeout=self._drain_timeout_s)
        await _cancel(list(pending))

        exit_code = proc.returncode
        output = _decode(stdout_buf)
        stderr = _decode(stderr_buf)
        succeeded = exit_code == 0
        if succeeded:
            error = stderr or None
        else:
            error = stderr or f"Command exited with code {exit_code}"
            logger.debug("%s exited with code %s", command, exit_code)

        return RawCommandResult(
            succeeded=succeeded,
            output=output,
            error=error,
            exit_code=exit_code,
            duration_ms=_elapsed_ms(start),
        )

    async def _terminate(self, proc: asyncio.subprocess.Process) -> None:
        # SIGTERM first
        try:
            os.killpg(os.getpgid(proc.pid), signal.SIGTERM)
        except (ProcessLookupError, OSError):
            pass
        try:
            await asyncio.wait_for(proc.wait(), timeout=self._kill_grace_s)
        except asyncio.TimeoutError:
            try:
                os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
            except (ProcessLookupError, OSError):
                pass
            await proc.wait()


async def _cancel(tasks: list[asyncio.Task[None]]) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _signal_exit_code(returncode: int | None) -> int | None:
    # A child that traps SIGTERM and exits cleanly still failed
    if returncode is not None and returncode < 0:
        return returncode
    return None
