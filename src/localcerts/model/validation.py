"""Validation utilities for domains and certificate state."""

import re

# Domains double as file names in the certificate store
DOMAIN_CHARS = re.compile(r"[A-Za-z0-9._-]+")


class ValidationError(Exception):
    """Validation error with error code."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


def domain_error(domain: str, suffix: str = ".test") -> str | None:
    """Return a human-readable reason the domain is rejected, or None if valid."""
    if not domain:
        return "You need to choose a domain."
    if not domain.endswith(suffix):
        return f"Your domain has to end with the `{suffix}` extension."
    if not DOMAIN_CHARS.fullmatch(domain):
        return "Your domain can only contain letters, digits, dots, dashes and underscores."
    if len(domain) <= len(suffix) or domain.startswith("."):
        return f"Your domain needs a name before the `{suffix}` extension."
    return None


def validate_domain(domain: str, suffix: str = ".test") -> str:
    """Validate a domain name and return it unchanged.

    Raises:
        ValidationError: If the domain is empty or lacks the required suffix
    """
    error = domain_error(domain, suffix)
    if error is not None:
        raise ValidationError("INVALID_DOMAIN", error)
    return domain
