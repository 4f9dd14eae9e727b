"""
Subprocess helpers for driving the VOICEPEAK executable
"""

import logging
import subprocess
import sys
from typing import Any, Optional, Sequence

from voicepeak.core.exceptions import ExternalToolError, ExternalToolTimeoutError
from voicepeak.utils.text_utils import format_command

logger = logging.getLogger(__name__)

# Keep the console window of the child hidden on Windows
CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0


def run_tool(
    exe_path: str,
    args: Sequence[str],
    *,
    timeout: Optional[float] = None,
    operation_name: str = "VOICEPEAK command",
    encoding: str = "utf-8",
    custom_logger: Optional[Any] = None,
) -> str:
    """
    Run the executable with `args` and return its stdout

    Args:
        exe_path: Path to the executable
        args: Argument list, one element per argument (no shell is involved)
        timeout: Optional seconds to wait before killing the child
        operation_name: Descriptive name for the operation (for logging)
        encoding: Codec for stdout/stderr; undecodable bytes become U+FFFD
        custom_logger: Optional logger to use instead of default

    Returns:
        Captured stdout text

    Raises:
        ExternalToolError: If the child wrote anything to stderr or could not be started
        ExternalToolTimeoutError: If the child did not exit within `timeout`
    """
    active_logger = custom_logger or logger
    cmd = [str(exe_path), *[str(a) for a in args]]

    active_logger.debug("Running %s: %s", operation_name, format_command(cmd))
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding=encoding,
            errors="replace",
            check=False,
            timeout=timeout,
            creationflags=CREATION_FLAGS,
        )
    except subprocess.TimeoutExpired as e:
        error_msg = f"{operation_name} timed out after {timeout} seconds"
        active_logger.error(error_msg)
        raise ExternalToolTimeoutError(error_msg, cmd, timeout) from e
    except OSError as e:
        error_msg = f"{operation_name} failed to start: {e}"
        active_logger.error(error_msg)
        raise ExternalToolError(error_msg, cmd) from e

    # Exit codes are not reliable for this tool; stderr output is the failure signal
    if result.stderr:
        error_msg = f"{operation_name} reported an error"
        active_logger.error(
            "%s (exit code %s): %s", error_msg, result.returncode, result.stderr.strip()
        )
        raise ExternalToolError(error_msg, cmd, result.returncode, result.stderr)

    return result.stdout or ""


def split_lines(output: str) -> list[str]:
    """Split tool output on CR/LF and drop empty entries."""
    return [line for line in output.replace("\r", "\n").split("\n") if line]
