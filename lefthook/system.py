"""Wrappers for interacting with the operating system."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Any, Sequence

_MAX_COMMAND_LENGTH_DARWIN = 260000
# The documented limit is 8191, but long lines break earlier in practice.
_MAX_COMMAND_LENGTH_WINDOWS = 7000
_MAX_COMMAND_LENGTH_LINUX = 130000


def max_cmd_len() -> int:
    """Return a safe maximum command line length for the current platform."""
    if sys.platform == "win32":
        return _MAX_COMMAND_LENGTH_WINDOWS
    if sys.platform == "darwin":
        return _MAX_COMMAND_LENGTH_DARWIN
    return _MAX_COMMAND_LENGTH_LINUX


class NullReader(io.RawIOBase):
    """A binary reader that is always at end of file."""

    def _ensure_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def read(self, size: int = -1) -> bytes:
        self._ensure_open()
        return super().read(size)

    def readinto(self, buffer: Any) -> int:
        self._ensure_open()
        # Nothing is ever available: leave the buffer untouched.
        return len(memoryview(buffer)[:0])

    def readable(self) -> bool:
        return True


NULL_READER = NullReader()


def _stdin_arguments(stream: Any) -> dict[str, Any]:
    if stream is None or isinstance(stream, NullReader):
        return {"stdin": subprocess.DEVNULL}
    try:
        stream.fileno()
    except (AttributeError, OSError):
        data = stream.read()
        if isinstance(data, str):
            data = data.encode()
        return {"input": data}
    return {"stdin": stream}


def _output_target(stream: Any) -> Any:
    if stream is None:
        return subprocess.DEVNULL
    try:
        stream.fileno()
    except (AttributeError, OSError):
        return subprocess.PIPE
    if hasattr(stream, "flush"):
        stream.flush()
    return stream


def _emit(stream: IO[Any] | None, data: bytes | None) -> None:
    if stream is None or not data:
        return
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode(errors="replace"))
        return
    try:
        stream.write(data)
    except TypeError:
        stream.write(data.decode(errors="replace"))


@dataclass(frozen=True)
class OsCommand:
    """Runs system commands with LEFTHOOK=0 so nested hooks are not triggered."""

    exclude_envs: tuple[str, ...] = ()

    def without_envs(self, *args: str) -> OsCommand:
        """Return a command runner that drops env entries starting with any prefix."""
        return OsCommand(exclude_envs=tuple(args))

    def _environment(self) -> dict[str, str]:
        env = {
            key: value
            for key, value in os.environ.items()
            if not any(f"{key}={value}".startswith(p) for p in self.exclude_envs)
        }
        env["LEFTHOOK"] = "0"
        return env

    def run(
        self,
        command: Sequence[str],
        root: str | os.PathLike[str] | None = None,
        stdin: Any = None,
        stdout: Any = None,
        stderr: Any = None,
    ) -> None:
        """Run ``command`` in ``root``; raise CalledProcessError on failure."""
        if not command:
            raise ValueError("empty command")
        out_target = _output_target(stdout)
        err_target = _output_target(stderr)
        completed = subprocess.run(
            list(command),
            cwd=os.fspath(root) if root else None,
            env=self._environment(),
            stdout=out_target,
            stderr=err_target,
            check=False,
            **_stdin_arguments(stdin),
        )
        if out_target is subprocess.PIPE:
            _emit(stdout, completed.stdout)
        if err_target is subprocess.PIPE:
            _emit(stderr, completed.stderr)
        if completed.returncode != 0:
            raise subprocess.CalledProcessError(
                completed.returncode, list(command)
            )


CMD = OsCommand()