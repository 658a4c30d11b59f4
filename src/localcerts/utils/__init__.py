"""Utility functions for local certificate management."""

from localcerts.utils.cmd import run_cmd, set_show_commands

__all__ = [
    "run_cmd",
    "set_show_commands",
]
