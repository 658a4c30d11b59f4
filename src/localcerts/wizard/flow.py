"""Wizard flow logic."""

from rich.console import Console

from localcerts.host import HostPlatform
from localcerts.model.settings import Settings
from localcerts.registry import register_domain
from localcerts.tls.authority import RootAuthorityStatus, ensure_root_authority
from localcerts.tls.backend import CryptoBackend
from localcerts.wizard.prompts import prompt_action, prompt_domain

console = Console()


def create_authority(settings: Settings, backend: CryptoBackend, host: HostPlatform) -> RootAuthorityStatus:
    """Create the root authority and tell the operator how to trust it."""
    status = ensure_root_authority(settings, backend)

    if status == RootAuthorityStatus.ALREADY_EXISTS:
        console.print("[yellow]Root certificate authority already exists.[/yellow]")
        return status

    console.print(
        f"[green]Certificate authority created with name `{settings.root_cert_name}` "
        f"and key `{settings.root_key_name}`[/green]"
    )
    console.print(
        "You need to trust the certificate authority on your machine. "
        f"View {host.trust_doc} for more info."
    )
    return status


def register_site(settings: Settings, backend: CryptoBackend) -> str:
    """Ask for a domain, issue its certificate and register it."""
    domain = prompt_domain(settings.domain_suffix)
    entry = register_domain(domain, settings, backend)

    console.print(f"[green]Certificate for '{domain}' created in {settings.store_dir}[/green]")
    console.print(f"[dim]Registered {entry.cert_file} in {settings.tls_config_path}[/dim]")
    return domain


def run_wizard(settings: Settings, backend: CryptoBackend, host: HostPlatform) -> None:
    """Run the interactive certificate wizard."""
    console.print("\n[bold blue]Local Certificates[/bold blue]")
    console.print(f"[dim]Certificate store: {settings.store_dir}[/dim]")

    action = prompt_action()

    if action == "root-ca":
        create_authority(settings, backend, host)
    else:
        register_site(settings, backend)
