"""External cryptographic backend (openssl)."""

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from localcerts.host import HostPlatform
from localcerts.model.validation import ValidationError
from localcerts.utils.cmd import run_cmd


class CryptoBackend(Protocol):
    """Key and certificate operations, each run inside a working directory."""

    def generate_key(self, key_name: str, bits: int, cwd: Path, encrypt: bool = False) -> None:
        """Write a new RSA private key."""
        ...

    def generate_self_signed_cert(
        self,
        key_name: str,
        cert_name: str,
        subject: str,
        days: int,
        digest: str,
        cwd: Path,
    ) -> None:
        """Write a self-signed certificate for an existing key."""
        ...

    def generate_csr(self, key_name: str, csr_name: str, subject: str, cwd: Path) -> None:
        """Write a certificate signing request for an existing key."""
        ...

    def sign_csr(
        self,
        csr_name: str,
        ca_cert_name: str,
        ca_key_name: str,
        cert_name: str,
        days: int,
        digest: str,
        ext_name: str,
        cwd: Path,
    ) -> None:
        """Write a certificate by signing a CSR with the authority."""
        ...


def check_openssl() -> bool:
    """Check if openssl is installed."""
    return shutil.which("openssl") is not None


class OpenSSLBackend:
    """CryptoBackend running the openssl command line tool.

    Commands that create the root authority (its key and self-signed
    certificate) are prefixed with `authority_prefix` (``winpty`` on
    Windows) so the passphrase prompt reaches the terminal.
    """

    def __init__(self, authority_prefix: list[str] | None = None) -> None:
        self.authority_prefix = authority_prefix or []

    def _run(self, args: list[str], cwd: Path, prefix: list[str] | None = None) -> None:
        if not check_openssl():
            raise ValidationError(
                "OPENSSL_NOT_INSTALLED",
                "openssl is not installed or not on PATH. Please install it: https://www.openssl.org/",
            )

        try:
            run_cmd([*(prefix or []), "openssl", *args], cwd=cwd)
        except subprocess.CalledProcessError as e:
            raise ValidationError(
                "OPENSSL_FAILED",
                f"openssl {args[0]} failed with exit code {e.returncode}",
            ) from e

    def generate_key(self, key_name: str, bits: int, cwd: Path, encrypt: bool = False) -> None:
        args = ["genrsa"]
        if encrypt:
            args.append("-des3")
        args += ["-out", key_name, str(bits)]
        self._run(args, cwd, self.authority_prefix if encrypt else None)

    def generate_self_signed_cert(
        self,
        key_name: str,
        cert_name: str,
        subject: str,
        days: int,
        digest: str,
        cwd: Path,
    ) -> None:
        self._run(
            [
                "req",
                "-x509",
                "-new",
                "-nodes",
                "-key",
                key_name,
                f"-{digest}",
                "-days",
                str(days),
                "-out",
                cert_name,
                "-subj",
                subject,
            ],
            cwd,
            self.authority_prefix,
        )

    def generate_csr(self, key_name: str, csr_name: str, subject: str, cwd: Path) -> None:
        self._run(
            ["req", "-new", "-key", key_name, "-out", csr_name, "-subj", subject],
            cwd,
        )

    def sign_csr(
        self,
        csr_name: str,
        ca_cert_name: str,
        ca_key_name: str,
        cert_name: str,
        days: int,
        digest: str,
        ext_name: str,
        cwd: Path,
    ) -> None:
        self._run(
            [
                "x509",
                "-req",
                "-in",
                csr_name,
                "-CA",
                ca_cert_name,
                "-CAkey",
                ca_key_name,
                "-CAcreateserial",
                "-out",
                cert_name,
                "-days",
                str(days),
                f"-{digest}",
                "-extfile",
                ext_name,
            ],
            cwd,
        )


def get_backend(host: HostPlatform) -> CryptoBackend:
    """Get the openssl backend configured for the host.

    Args:
        host: Detected host platform

    Returns:
        Backend instance
    """
    if host == HostPlatform.WINDOWS:
        return OpenSSLBackend(authority_prefix=["winpty"])
    return OpenSSLBackend()
