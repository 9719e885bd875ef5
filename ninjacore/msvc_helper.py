"""Helpers for running the MSVC compiler and recording its dependencies."""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Mapping
from typing import NamedTuple

from ninjacore.util import fatal

__all__ = [
    "escape_for_depfile",
    "push_path_into_environment",
    "CLResult",
    "CLWrapper",
]

_WINDOWS = os.name == "nt"


def escape_for_depfile(path: str) -> str:
    """Escape spaces in path for a depfile; single backslashes stay as they are."""
    return path.replace(" ", "\\ ")


def _block_text(env_block: str | bytes) -> str:
    return os.fsdecode(env_block) if isinstance(env_block, bytes) else env_block


def _block_entries(env_block: str | bytes):
    """Yield the NAME=value entries of a NUL-separated environment block."""
    for entry in _block_text(env_block).split("\0"):
        if not entry:
            return
        yield entry


def _parse_env_block(env_block: str | bytes) -> dict[str, str]:
    env: dict[str, str] = {}
    for entry in _block_entries(env_block):
        # Names may start with '=' (per-drive directories on Windows).
        name, _, value = entry[1:].partition("=")
        env[entry[0] + name] = value
    return env


def push_path_into_environment(env_block: str | bytes) -> str | None:
    """Copy the PATH entry of an environment block into this process's environment.

    The name is matched without regard to case. Returns the new PATH value,
    or None if the block has no PATH entry.
    """
    for entry in _block_entries(env_block):
        if entry[:5].lower() == "path=":
            value = entry[5:]
            os.environ["PATH"] = value
            return value
    return None


class CLResult(NamedTuple):
    """Exit code and raw standard output of a compiler run."""

    exit_code: int
    output: bytes


class CLWrapper:
    """Runs a compiler synchronously and gathers its standard output."""

    def __init__(self) -> None:
        self._env: dict[str, str] | None = None

    def set_env_block(self, env_block: str | bytes | Mapping[str, str] | None) -> None:
        """Set the environment that run() gives the child.

        Accepts a NUL-separated NAME=value block, a mapping, or None for
        this process's own environment.
        """
        if env_block is None:
            self._env = None
        elif isinstance(env_block, Mapping):
            self._env = dict(env_block)
        else:
            self._env = _parse_env_block(env_block)

    def run(self, command: str) -> CLResult:
        """Start command and collect its stdout; stderr goes to ours.

        Raises FatalError if the process cannot be started.
        """
        args: str | list[str] = command if _WINDOWS else shlex.split(command)
        try:
            completed = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=None,
                env=self._env,
                check=False,
            )
        except (OSError, ValueError) as exc:
            fatal(f"CreateProcess: {exc}")
        return CLResult(completed.returncode, completed.stdout)