"""Leaf certificate issuance signed by the local root authority."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from localcerts.model.settings import Settings
from localcerts.tls.authority import verify_root_authority
from localcerts.tls.backend import CryptoBackend

console = Console()


@dataclass
class IssuedCertificate:
    """Files written for one domain."""

    domain: str
    key: Path
    csr: Path
    extension: Path
    certificate: Path


def create_extension_string(domain: str) -> str:
    """Build the x509 v3 extension file covering the domain and its subdomains."""
    return (
        "authorityKeyIdentifier=keyid,issuer\n"
        "basicConstraints=CA:FALSE\n"
        "keyUsage = digitalSignature, nonRepudiation, keyEncipherment, dataEncipherment\n"
        "subjectAltName = @alt_names\n"
        "\n"
        "[alt_names]\n"
        f"DNS.1 = {domain}\n"
        f"DNS.2 = *.{domain}\n"
    )


def issue_certificate(domain: str, settings: Settings, backend: CryptoBackend) -> IssuedCertificate:
    """Generate key, CSR, extension file and signed certificate for a domain.

    Nothing is rolled back on failure: files from completed steps stay
    in the store.

    Args:
        domain: Validated domain name
        settings: Store location and certificate parameters
        backend: Backend running the key and certificate operations

    Returns:
        Paths of the written files

    Raises:
        ValidationError: If the root authority is missing or the toolchain fails
    """
    root = verify_root_authority(settings)
    store = settings.store_dir

    issued = IssuedCertificate(
        domain=domain,
        key=store / f"{domain}.key",
        csr=store / f"{domain}.csr",
        extension=store / f"{domain}.ext",
        certificate=store / f"{domain}.crt",
    )

    console.print(f"[cyan]Generating certificate for '{domain}'...[/cyan]")
    backend.generate_key(issued.key.name, settings.key_bits, cwd=store)
    backend.generate_csr(issued.key.name, issued.csr.name, settings.subject(domain), cwd=store)
    issued.extension.write_text(create_extension_string(domain))
    backend.sign_csr(
        csr_name=issued.csr.name,
        ca_cert_name=root.certificate.name,
        ca_key_name=root.key.name,
        cert_name=issued.certificate.name,
        days=settings.leaf_validity_days,
        digest=settings.digest,
        ext_name=issued.extension.name,
        cwd=store,
    )

    return issued
