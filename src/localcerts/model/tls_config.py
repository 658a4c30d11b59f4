"""Traefik dynamic TLS configuration model."""

from pydantic import BaseModel, Field, field_validator


class TlsCertificate(BaseModel):
    """A single certificate entry as Traefik reads it."""

    cert_file: str = Field(alias="certFile")
    key_file: str = Field(alias="keyFile")

    class Config:
        """Pydantic config."""

        populate_by_name = True
        extra = "allow"


class TlsSection(BaseModel):
    """The `tls` block of the dynamic configuration."""

    certificates: list[TlsCertificate] = Field(default_factory=list)

    @field_validator("certificates", mode="before")
    @classmethod
    def empty_list_for_null(cls, value):
        """`certificates:` with no items parses as null."""
        return [] if value is None else value

    class Config:
        """Pydantic config."""

        extra = "allow"


class TlsConfig(BaseModel):
    """Whole dynamic configuration document.

    Unknown keys (other `tls` sub-blocks, `http`, ...) are kept so a
    rewrite only changes the certificate list.
    """

    tls: TlsSection = Field(default_factory=TlsSection)

    @field_validator("tls", mode="before")
    @classmethod
    def empty_section_for_null(cls, value):
        return {} if value is None else value

    class Config:
        """Pydantic config."""

        extra = "allow"

    def to_document(self) -> dict:
        """Serializable form using Traefik's key names."""
        return self.model_dump(by_alias=True, mode="json")
