"""Root certificate authority management."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.console import Console

from localcerts.model.settings import Settings
from localcerts.model.validation import ValidationError
from localcerts.tls.backend import CryptoBackend

console = Console()


class RootAuthorityStatus(str, Enum):
    """Outcome of ensure_root_authority."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass
class RootAuthority:
    """Root certificate and key inside the store directory."""

    certificate: Path
    key: Path


def root_authority_exists(settings: Settings) -> bool:
    """Check that both root files are present in the store directory."""
    if not settings.store_dir.is_dir():
        return False
    names = {entry.name for entry in settings.store_dir.iterdir()}
    return settings.root_cert_name in names and settings.root_key_name in names


def verify_root_authority(settings: Settings) -> RootAuthority:
    """Return the root authority files, failing if either is missing.

    Raises:
        ValidationError: If the root certificate or key is absent
    """
    if not root_authority_exists(settings):
        raise ValidationError(
            "ROOT_CA_NOT_FOUND",
            "Root certificate authority does not exist. "
            "Create it first by choosing `root-ca` in this tool.",
        )
    return RootAuthority(certificate=settings.root_cert_path, key=settings.root_key_path)


def ensure_root_authority(settings: Settings, backend: CryptoBackend) -> RootAuthorityStatus:
    """Create the root authority unless it already exists.

    Args:
        settings: Store location and certificate parameters
        backend: Backend generating the key and certificate

    Returns:
        CREATED or ALREADY_EXISTS

    Raises:
        ValidationError: If the toolchain fails
    """
    if root_authority_exists(settings):
        return RootAuthorityStatus.ALREADY_EXISTS

    settings.store_dir.mkdir(parents=True, exist_ok=True)

    console.print("[cyan]Creating key...[/cyan]")
    backend.generate_key(settings.root_key_name, settings.key_bits, cwd=settings.store_dir, encrypt=True)

    console.print("[cyan]Creating certificate...[/cyan]")
    backend.generate_self_signed_cert(
        key_name=settings.root_key_name,
        cert_name=settings.root_cert_name,
        subject=settings.subject(),
        days=settings.root_validity_days,
        digest=settings.digest,
        cwd=settings.store_dir,
    )

    return RootAuthorityStatus.CREATED
