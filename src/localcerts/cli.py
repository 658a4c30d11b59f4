"""CLI entry point for the local certificates tool."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from localcerts.host import HostPlatform, detect_platform
from localcerts.model.settings import Settings
from localcerts.model.validation import ValidationError
from localcerts.tls.backend import get_backend

app = typer.Typer(
    name="localcerts",
    help="Manage a local certificate authority and Traefik certificates for .test domains",
    rich_markup_mode="rich",
)

console = Console()


def _handle_error(error: ValidationError) -> None:
    """Handle validation errors with rich formatting."""
    console.print(f"[red]Error ({error.code}):[/red] {error.message}")
    raise typer.Exit(1)


def _check_host() -> HostPlatform:
    """Stop unless the host is supported, warning Windows users about WSL."""
    host = detect_platform()
    if host == HostPlatform.WINDOWS:
        console.print(
            "[yellow]On Windows, you need to execute this tool inside WSL in order to work with openssl.[/yellow]"
        )
    return host


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Hide openssl commands being executed"),
    ] = False,
) -> None:
    """Create the local root CA or add a certificate for a site (interactive)."""
    from localcerts.utils.cmd import set_show_commands

    set_show_commands(not quiet)

    if ctx.invoked_subcommand is not None:
        return

    try:
        from localcerts.wizard.flow import run_wizard

        host = _check_host()
        run_wizard(Settings.from_env(), get_backend(host), host)
    except ValidationError as e:
        _handle_error(e)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Cancelled.[/yellow]")
        raise typer.Exit(0)


@app.command(name="list")
def list_cmd() -> None:
    """List domains registered in the Traefik TLS configuration."""
    from localcerts.registry import list_registrations

    settings = Settings.from_env()
    try:
        domains = list_registrations(settings)
    except ValidationError as e:
        _handle_error(e)

    if not domains:
        console.print("[yellow]No domains registered.[/yellow]")
        console.print("[dim]Run 'localcerts' and choose site-cert to add one.[/dim]")
        raise typer.Exit(0)

    table = Table(title="Registered domains")
    table.add_column("Domain", style="cyan")
    table.add_column("Certificate", style="white")
    table.add_column("In store", style="green")

    for domain in domains:
        in_store = (settings.store_dir / f"{domain}.crt").exists()
        table.add_row(
            domain,
            settings.proxy_cert_file(domain),
            "yes" if in_store else "[red]no[/red]",
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from localcerts import __version__

    console.print(f"localcerts version {__version__}")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
