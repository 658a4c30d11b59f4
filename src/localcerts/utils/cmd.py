"""Command execution utilities with logging."""

import subprocess
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console(stderr=True)

# Global flag to control command display
_show_commands = True


def set_show_commands(show: bool) -> None:
    """Enable or disable command display."""
    global _show_commands
    _show_commands = show


def quote_arg(arg: str) -> str:
    """Quote argument if it contains spaces or special characters."""
    if " " in arg or any(c in arg for c in "'\"$\\*"):
        # Use single quotes, escape any single quotes in the string
        return "'" + arg.replace("'", "'\\''") + "'"
    return arg


def run_cmd(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    capture_output: bool = False,
    text: bool = True,
    show: bool | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run a command with optional display.

    Output is not captured by default: openssl asks for the root key
    passphrase on the terminal.

    Args:
        cmd: Command and arguments as list
        cwd: Working directory for the command
        check: Raise on non-zero exit code
        capture_output: Capture stdout/stderr
        text: Return text instead of bytes
        show: Override global show_commands setting
        **kwargs: Additional subprocess.run arguments

    Returns:
        CompletedProcess result
    """
    should_show = show if show is not None else _show_commands

    if should_show:
        cmd_str = " ".join(quote_arg(arg) for arg in cmd)
        console.print(f"[dim]$ {cmd_str}[/dim]", highlight=False)

    return subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        capture_output=capture_output,
        text=text,
        **kwargs,
    )
