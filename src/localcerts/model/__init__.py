"""Data models for local certificate management."""

from localcerts.model.settings import Settings
from localcerts.model.tls_config import TlsCertificate, TlsConfig, TlsSection
from localcerts.model.validation import ValidationError

__all__ = [
    "Settings",
    "TlsCertificate",
    "TlsConfig",
    "TlsSection",
    "ValidationError",
]
