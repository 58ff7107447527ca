"""Subprocess execution with rich error context.

Used by integration classes that shell out (PowerShell for the registry store,
npx for the manifest validator). Failures come back as RuntimeError whose text
includes the command, exit code and captured output, so callers can inspect the
diagnostic (for example to look for a sentinel marker) without re-running.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any


def _decode(stream: str | bytes | None) -> str:
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace").strip()
    return stream.strip()


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run a command to completion, capturing text output.

    subprocess.run() waits for the child and kills it if the wait is interrupted,
    so no process outlives this call on any exit path.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description, e.g. "query the sideloading registry"
        cwd: Working directory for command execution
        check: Whether a non-zero exit code is an error (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess with decoded stdout/stderr

    Raises:
        RuntimeError: If the command fails (check=True) or its binary is not found
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {' '.join(str(arg) for arg in cmd)}"
        error_msg += f"\nExit code: {e.returncode}"

        stdout_text = _decode(e.stdout)
        if stdout_text:
            error_msg += f"\nstdout: {stdout_text}"

        stderr_text = _decode(e.stderr)
        if stderr_text:
            error_msg += f"\nstderr: {stderr_text}"

        raise RuntimeError(error_msg) from e
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        raise RuntimeError(error_msg) from e
