"""
Script: release_tagger/common.py
What: Shared helper functions used by all `release_tagger` modules.
Doing: Wraps env reads, JSON file reads, command execution, and output writes.
Why: Avoids duplicated helper code.
Goal: Keep behavior consistent across all helper modules.
"""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path
from typing import Mapping


class ReleaseToolError(RuntimeError):
    """Raised when a release step hits a known error condition."""


class CommandError(ReleaseToolError):
    """
    Raised when an external command fails.

    `code` is the process exit code, or `None` when the process never started.
    """

    def __init__(self, message: str, *, command: list[str], code: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.code = code


def optional_env(
    name: str,
    default: str = "",
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return an environment variable with a fallback default (empty counts as unset)."""
    env = os.environ if environ is None else environ
    return env.get(name) or default


def input_env(
    name: str,
    default: str = "",
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Return a user-configurable value.

    GitHub passes action inputs as `INPUT_<NAME>`. The bare name wins when it is
    set, so workflows can override an input with a plain `env:` entry.
    """
    env = os.environ if environ is None else environ
    return env.get(name) or env.get(f"INPUT_{name}") or default


def require_env(name: str, *, environ: Mapping[str, str] | None = None) -> str:
    """Return a required environment variable or raise a clear error."""
    value = optional_env(name, environ=environ)
    if not value:
        raise ReleaseToolError(f"Missing required environment variable: {name}")
    return value


def read_json_file(path: Path) -> object:
    """Load one UTF-8 JSON document. Read and parse errors propagate to the caller."""
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def run_cmd(cwd: str | Path, command: str, *args: str) -> None:
    """
    Run one external command in `cwd`.

    stdin and stdout are discarded; only stderr is captured so a failing
    command can explain itself in the workflow log.
    """
    print("Executing:", command, " ".join(args))
    argv = [command, *args]
    try:
        result = subprocess.run(
            argv,
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        # Executable missing, bad working directory, or not executable.
        raise CommandError(f"command failed: {command}", command=argv) from exc

    if result.returncode == 0:
        return

    message = f"command failed with code {result.returncode}"
    stderr = result.stderr.decode("utf-8", errors="replace").strip()
    if stderr:
        print(message)
        print(stderr)
    raise CommandError(message, command=argv, code=result.returncode)


def write_github_outputs(
    values: Mapping[str, str],
    *,
    environ: Mapping[str, str] | None = None,
) -> None:
    """
    Write step outputs for GitHub Actions.

    GitHub provides a file path in `GITHUB_OUTPUT`; writing `name=value` lines
    there makes that value available to later steps in the same job.
    """
    output_file = require_env("GITHUB_OUTPUT", environ=environ)
    with open(output_file, "a", encoding="utf-8") as handle:
        for key, value in values.items():
            handle.write(f"{key}={value}\n")
