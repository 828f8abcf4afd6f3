"""Subprocess execution with rich error context.

Used for the short, output-capturing commands of an update run: the shallow
AUR clone and updpkgsums. makepkg streams to the terminal and is driven
directly by the build driver. The RuntimeError raised here is translated
into FetchError by the recipe fetcher and into the manual checksum fallback
by the recipe sync.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run cmd and turn any failure into a RuntimeError describing it.

    The message names the operation, the command line, the exit code and the
    captured stderr (git and updpkgsums print their reasons there). A missing
    binary is reported the same way, so callers only handle RuntimeError.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If command fails or its binary is missing
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    logger.debug("Running %s (cwd=%s)", cmd_str, cwd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        lines = [
            f"Failed to {operation_context}",
            f"Command: {cmd_str}",
            f"Exit code: {e.returncode}",
        ]
        stderr = _decoded(e.stderr).strip()
        if stderr:
            lines.append(f"stderr: {stderr}")
        raise RuntimeError("\n".join(lines)) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}\n"
            f"Full command: {cmd_str}"
        ) from e


def _decoded(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
