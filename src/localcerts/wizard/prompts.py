"""Rich prompts for the interactive wizard."""

from rich.console import Console
from rich.prompt import Prompt

from localcerts.model.validation import domain_error

console = Console()


def prompt_action() -> str:
    """Prompt for the action to execute.

    Returns:
        One of: "root-ca", "site-cert"
    """
    console.print("\n[bold]What action to execute?[/bold]")
    console.print("  [dim]1.[/dim] root-ca   - Create CA authority on my machine")
    console.print("  [dim]2.[/dim] site-cert - Add a new certificate for a site")

    choice = Prompt.ask(
        "\n[cyan]Select action[/cyan]",
        choices=["1", "2"],
        default="2",
    )

    return {"1": "root-ca", "2": "site-cert"}[choice]


def prompt_domain(suffix: str = ".test") -> str:
    """Ask for a domain until it ends with the required suffix."""
    while True:
        domain = Prompt.ask(
            f"[cyan]Domain to use for this site[/cyan] [dim](it must end with `{suffix}`)[/dim]",
        ).strip()

        error = domain_error(domain, suffix)
        if error is None:
            return domain
        console.print(f"[red]{error}[/red]")
