"""Registration of issued certificates in the Traefik TLS configuration.

The file is read, modified and rewritten in full without locking.
Running two registrations at once against the same file can lose one
of them.
"""

import re
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from localcerts.model.settings import Settings
from localcerts.model.tls_config import TlsCertificate, TlsConfig
from localcerts.model.validation import DOMAIN_CHARS, ValidationError, validate_domain
from localcerts.tls.authority import verify_root_authority
from localcerts.tls.backend import CryptoBackend
from localcerts.tls.issuer import issue_certificate


def cert_file_pattern(proxy_cert_dir: str) -> re.Pattern[str]:
    """Pattern capturing the domain from a registered certFile path."""
    return re.compile(rf"^{re.escape(proxy_cert_dir.rstrip('/'))}/(?P<domain>[a-zA-Z\-_.]+)\.crt$")


def extract_domain(cert_file: str, proxy_cert_dir: str = "/etc/ssl/traefik") -> str | None:
    """Return the domain a certFile path was registered for, if it follows the template."""
    match = cert_file_pattern(proxy_cert_dir).match(cert_file)
    if match is None:
        return None
    return match.group("domain")


def registered_domain(cert_file: str, proxy_cert_dir: str = "/etc/ssl/traefik") -> str | None:
    """Return the domain of a certFile path written by register_domain, digits included."""
    prefix = f"{proxy_cert_dir.rstrip('/')}/"
    if not (cert_file.startswith(prefix) and cert_file.endswith(".crt")):
        return None
    name = cert_file[len(prefix) : -len(".crt")]
    if not DOMAIN_CHARS.fullmatch(name):
        return None
    return name


def load_tls_config(path: Path) -> TlsConfig:
    """Load the TLS configuration, treating a missing or empty file as empty.

    Raises:
        ValidationError: If the file is not valid YAML or not shaped like a TLS config
    """
    if not path.exists():
        return TlsConfig()

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError("TLS_CONFIG_INVALID", f"Failed to parse {path}: {e}") from e

    if data is None:
        return TlsConfig()
    if not isinstance(data, dict):
        raise ValidationError("TLS_CONFIG_INVALID", f"{path} does not contain a mapping")

    try:
        return TlsConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError("TLS_CONFIG_INVALID", f"Unexpected structure in {path}: {e}") from e


def save_tls_config(config: TlsConfig, path: Path) -> Path:
    """Rewrite the whole TLS configuration file.

    Raises:
        ValidationError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            yaml.safe_dump(config.to_document(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ValidationError("TLS_CONFIG_WRITE_FAILED", f"Failed to write {path}: {e}") from e
    return path


def find_registration(config: TlsConfig, domain: str, settings: Settings) -> TlsCertificate | None:
    """Return the entry already registered for the domain, if any."""
    expected_cert_file = settings.proxy_cert_file(domain)
    for entry in config.tls.certificates:
        if entry.cert_file == expected_cert_file:
            return entry
        if extract_domain(entry.cert_file, settings.proxy_cert_dir) == domain:
            return entry
    return None


def list_registrations(settings: Settings) -> list[str]:
    """Domains registered in the TLS configuration, in registration order.

    Entries whose certFile does not follow the template are skipped.
    """
    config = load_tls_config(settings.tls_config_path)
    domains = []
    for entry in config.tls.certificates:
        domain = registered_domain(entry.cert_file, settings.proxy_cert_dir)
        if domain is not None:
            domains.append(domain)
    return domains


def register_domain(domain: str, settings: Settings, backend: CryptoBackend) -> TlsCertificate:
    """Issue a certificate for a new domain and add it to the TLS configuration.

    The duplicate check runs before anything is generated, so a rejected
    domain leaves both the store and the config file untouched.

    Args:
        domain: Domain ending with the configured suffix
        settings: Paths and certificate parameters
        backend: Backend used to issue the certificate

    Returns:
        The appended entry

    Raises:
        ValidationError: If the domain is invalid or already registered,
            the root authority is missing, or issuance fails
    """
    validate_domain(domain, settings.domain_suffix)
    verify_root_authority(settings)

    config = load_tls_config(settings.tls_config_path)
    if find_registration(config, domain, settings) is not None:
        raise ValidationError(
            "DOMAIN_ALREADY_REGISTERED",
            f"The domain '{domain}' is already registered locally. Please choose another one.",
        )

    issue_certificate(domain, settings, backend)

    entry = TlsCertificate(
        cert_file=settings.proxy_cert_file(domain),
        key_file=settings.proxy_key_file(domain),
    )
    config.tls.certificates.append(entry)
    save_tls_config(config, settings.tls_config_path)

    return entry
