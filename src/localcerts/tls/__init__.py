"""TLS certificate management."""

from localcerts.tls.authority import (
    RootAuthorityStatus,
    ensure_root_authority,
    verify_root_authority,
)
from localcerts.tls.backend import CryptoBackend, OpenSSLBackend, check_openssl, get_backend
from localcerts.tls.issuer import issue_certificate

__all__ = [
    "CryptoBackend",
    "OpenSSLBackend",
    "RootAuthorityStatus",
    "check_openssl",
    "ensure_root_authority",
    "get_backend",
    "issue_certificate",
    "verify_root_authority",
]
