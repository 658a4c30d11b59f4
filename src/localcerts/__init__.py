"""Local development certificate authority and Traefik TLS registration."""

__version__ = "0.1.0"
