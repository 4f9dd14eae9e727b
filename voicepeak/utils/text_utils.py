import shlex
from typing import Sequence


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument list as one shell-quoted string (for logs and errors)."""
    return " ".join(shlex.quote(str(x)) for x in cmd)
