"""Host operating system detection."""

import sys
from enum import Enum

from localcerts.model.validation import ValidationError

MACOS_TRUST_DOC = (
    "https://deliciousbrains.com/ssl-certificate-authority-for-local-https-development/"
    "#adding-root-cert-macos-keychain"
)
LINUX_TRUST_DOC = (
    "https://deliciousbrains.com/ssl-certificate-authority-for-local-https-development/"
    "#adding-root-cert-linux-keychain"
)


class HostPlatform(str, Enum):
    """Supported host operating systems."""

    MACOS = "darwin"
    LINUX = "linux"
    WINDOWS = "win32"

    @property
    def trust_doc(self) -> str:
        """Page explaining how to trust the root authority on this host."""
        if self == HostPlatform.LINUX:
            return LINUX_TRUST_DOC
        return MACOS_TRUST_DOC


def detect_platform(platform_name: str | None = None) -> HostPlatform:
    """Map sys.platform to a supported host.

    Raises:
        ValidationError: If the host is not macOS, Linux or Windows
    """
    name = platform_name if platform_name is not None else sys.platform
    # Older interpreters report "linux2"
    if name.startswith("linux"):
        name = "linux"
    try:
        return HostPlatform(name)
    except ValueError:
        raise ValidationError(
            "UNSUPPORTED_PLATFORM",
            f"Your operating system ({name}) is not supported by this tool.",
        ) from None
