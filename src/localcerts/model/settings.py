"""Fixed locations, file names and certificate parameters."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

STORE_DIR_ENV = "LOCALCERTS_STORE_DIR"
TLS_CONFIG_ENV = "LOCALCERTS_TLS_CONFIG"


def default_store_dir() -> Path:
    """Certificate store directory under the user's home."""
    return Path.home() / ".certs"


def default_tls_config_path() -> Path:
    """Traefik dynamic TLS config under the user's home."""
    return Path.home() / ".apps" / "local_env" / "with_custom_domains" / "tls.yml"


class Settings(BaseModel):
    """Configuration shared by the authority, issuer and registry."""

    store_dir: Path = Field(default_factory=default_store_dir)
    tls_config_path: Path = Field(default_factory=default_tls_config_path)

    # Root authority files inside store_dir
    root_cert_name: str = Field(default="root.pem")
    root_key_name: str = Field(default="root.key")
    root_common_name: str = Field(default="Root CA")

    subject_template: str = Field(default="/C=FR/ST=azerty/L=azerty/O=azerty/OU=azerty/CN={common_name}")
    key_bits: int = Field(default=2048, ge=1024)
    root_validity_days: int = Field(default=1825, ge=1)
    leaf_validity_days: int = Field(default=825, ge=1)
    digest: str = Field(default="sha256")

    domain_suffix: str = Field(default=".test", min_length=1)

    # Where Traefik sees the certificates (container-side path)
    proxy_cert_dir: str = Field(default="/etc/ssl/traefik")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, letting environment variables relocate the paths."""
        overrides: dict[str, Path] = {}
        if os.environ.get(STORE_DIR_ENV):
            overrides["store_dir"] = Path(os.environ[STORE_DIR_ENV]).expanduser()
        if os.environ.get(TLS_CONFIG_ENV):
            overrides["tls_config_path"] = Path(os.environ[TLS_CONFIG_ENV]).expanduser()
        return cls(**overrides)

    @property
    def root_cert_path(self) -> Path:
        return self.store_dir / self.root_cert_name

    @property
    def root_key_path(self) -> Path:
        return self.store_dir / self.root_key_name

    def subject(self, common_name: str | None = None) -> str:
        """Certificate subject, defaulting to the root authority's common name."""
        return self.subject_template.format(common_name=common_name or self.root_common_name)

    def proxy_cert_file(self, domain: str) -> str:
        return f"{self.proxy_cert_dir}/{domain}.crt"

    def proxy_key_file(self, domain: str) -> str:
        return f"{self.proxy_cert_dir}/{domain}.key"
