"""
Custom error types for the VOICEPEAK wrapper
"""

from typing import Optional, Sequence, Union

from voicepeak.utils.text_utils import format_command


class VoicepeakError(Exception):
    """Base exception for all wrapper errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ExecutableNotFoundError(VoicepeakError, FileNotFoundError):
    """Exception raised when the VOICEPEAK executable does not exist

    Args:
        exe_path (str): Path that was checked
    Example:
        raise ExecutableNotFoundError("/opt/voicepeak/voicepeak")
    """

    def __init__(self, exe_path: str, message: Optional[str] = None):
        self.exe_path = exe_path
        msg = message or (
            f"VOICEPEAK not found at '{exe_path}'. "
            "Please install VOICEPEAK and try again."
        )
        super().__init__(msg, "EXECUTABLE_NOT_FOUND")


class InvalidArgumentError(VoicepeakError, ValueError):
    """Exception raised when a speech command cannot be built from the arguments"""

    def __init__(self, message: str, fields: Optional[Sequence[str]] = None):
        super().__init__(message, "INVALID_ARGUMENT")
        self.fields = list(fields or [])


class ExternalToolError(VoicepeakError):
    """
    Exception raised when the VOICEPEAK executable reports a failure.

    Any output on stderr counts as a failure, whatever the exit code was.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Union[Sequence[str], str]] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        """
        Initialize the exception with error details.

        Args:
            message: Primary error message
            command: Optional command that was executed (list or str)
            returncode: Optional exit code from the process
            stderr: Optional error output from the process
        """
        super().__init__(message, "EXTERNAL_TOOL_ERROR")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self):
        """Format the error message with available details."""
        parts = [self.message]
        if self.command:
            cmd_str = (
                self.command
                if isinstance(self.command, str)
                else format_command(self.command)
            )
            parts.append(f"Command: {cmd_str}")
        if self.returncode is not None:
            parts.append(f"Exit code: {self.returncode}")
        if self.stderr:
            stderr = str(self.stderr)
            if len(stderr) > 500:  # Limit stderr length
                stderr = stderr[:500] + "... [truncated]"
            parts.append(f"Error output: {stderr}")

        return "\n".join(parts)


class ExternalToolTimeoutError(ExternalToolError):
    """Exception raised when the executable does not exit within the timeout"""

    def __init__(
        self,
        message: str,
        command: Optional[Union[Sequence[str], str]] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(message, command=command)
        self.timeout = timeout
