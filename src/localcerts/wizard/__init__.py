"""Interactive wizard for local certificates."""

from localcerts.wizard.flow import create_authority, register_site, run_wizard
from localcerts.wizard.prompts import prompt_action, prompt_domain

__all__ = [
    "run_wizard",
    "create_authority",
    "register_site",
    "prompt_action",
    "prompt_domain",
]
