"""
Schemas & Canonicalization
File: protocol.py

Purpose: Protocol objects exchanged by a log server and its clients.
The signing core reads timestamps, entry types, sizes and hashes from these
models and writes only the ``signature`` field of SCTs and STHs.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .versioning import PROTOCOL_VERSION, Version, assert_supported_protocol_version

UINT64_MAX = (1 << 64) - 1
UINT16_MAX = (1 << 16) - 1

# DigitallySigned.signature is opaque<0..2^16-1>
MAX_SIGNATURE_LENGTH = UINT16_MAX


class HashAlgorithm(IntEnum):
    """TLS HashAlgorithm identifiers (RFC 5246, section 7.4.1.4.1)."""

    NONE = 0
    MD5 = 1
    SHA1 = 2
    SHA224 = 3
    SHA256 = 4
    SHA384 = 5
    SHA512 = 6


class SignatureAlgorithm(IntEnum):
    """TLS SignatureAlgorithm identifiers (RFC 5246, section 7.4.1.4.1)."""

    ANONYMOUS = 0
    RSA = 1
    DSA = 2
    ECDSA = 3


class LogEntryType(IntEnum):
    """Kind of entry an SCT attests to."""

    X509_ENTRY = 0
    PRECERT_ENTRY = 1
    # Placeholder for entries that were never classified; not encodable.
    UNKNOWN_ENTRY_TYPE = 65536


class DigitallySigned(BaseModel):
    """
    Algorithm-tagged signature envelope.

    Attached to SCTs and STHs; its wire form is produced and parsed by
    ``ctlog.schemas.serializer``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hash_algorithm: HashAlgorithm = Field(
        ...,
        description="Hash function applied to the signing input",
    )
    sig_algorithm: SignatureAlgorithm = Field(
        ...,
        description="Public-key algorithm that produced the signature",
    )
    signature: bytes = Field(
        ...,
        description="Raw signature bytes (DER for ECDSA)",
        max_length=MAX_SIGNATURE_LENGTH,
    )


class X509ChainEntry(BaseModel):
    """A submitted X.509 certificate and its chain."""

    model_config = ConfigDict(extra="forbid")

    leaf_certificate: bytes = Field(
        default=b"",
        description="DER-encoded leaf certificate",
    )
    certificate_chain: list[bytes] = Field(
        default_factory=list,
        description="DER-encoded intermediates, leaf first excluded",
    )


class PrecertChainEntry(BaseModel):
    """A submitted precertificate and its chain."""

    model_config = ConfigDict(extra="forbid")

    pre_certificate: bytes = Field(
        default=b"",
        description="DER-encoded TBSCertificate component of the precertificate",
    )
    precertificate_chain: list[bytes] = Field(
        default_factory=list,
        description="DER-encoded issuing chain",
    )


class LogEntry(BaseModel):
    """
    A log entry as accepted from a submitter.

    Exactly one of ``x509_entry`` / ``precert_entry`` is expected to be set,
    matching ``entry_type``. A mismatch surfaces as EMPTY_CERTIFICATE when the
    entry is canonicalized.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    entry_type: LogEntryType = Field(
        default=LogEntryType.UNKNOWN_ENTRY_TYPE,
        description="Kind of entry",
    )
    x509_entry: X509ChainEntry | None = Field(default=None)
    precert_entry: PrecertChainEntry | None = Field(default=None)

    @property
    def signed_entry(self) -> bytes:
        """The bytes covered by an SCT for this entry (empty if absent)."""
        if self.entry_type == LogEntryType.X509_ENTRY and self.x509_entry is not None:
            return self.x509_entry.leaf_certificate
        if self.entry_type == LogEntryType.PRECERT_ENTRY and self.precert_entry is not None:
            return self.precert_entry.pre_certificate
        return b""


class SignedCertificateTimestamp(BaseModel):
    """
    A log's promise to include a certificate.

    ``timestamp`` must be set by the caller before the SCT is signed;
    ``signature`` is filled in by the signer.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    version: Version = Field(default=PROTOCOL_VERSION)
    timestamp: int | None = Field(
        default=None,
        description="Milliseconds since the epoch",
        ge=0,
        le=UINT64_MAX,
    )
    extensions: bytes = Field(
        default=b"",
        description="Opaque CT extensions, covered by the signature",
        max_length=UINT16_MAX,
    )
    signature: DigitallySigned | None = Field(default=None)

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: Version) -> Version:
        assert_supported_protocol_version(value)
        return value

    @property
    def is_signed(self) -> bool:
        return self.signature is not None


class SignedTreeHead(BaseModel):
    """
    A log's commitment to the size and root hash of its Merkle tree.

    ``timestamp``, ``tree_size`` and ``root_hash`` must be populated by the
    caller before signing.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    version: Version = Field(default=PROTOCOL_VERSION)
    timestamp: int | None = Field(
        default=None,
        description="Milliseconds since the epoch",
        ge=0,
        le=UINT64_MAX,
    )
    tree_size: int | None = Field(
        default=None,
        description="Number of entries in the tree",
        ge=0,
        le=UINT64_MAX,
    )
    root_hash: bytes | None = Field(
        default=None,
        description="SHA-256 Merkle tree root hash",
    )
    signature: DigitallySigned | None = Field(default=None)

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: Version) -> Version:
        assert_supported_protocol_version(value)
        return value

    @property
    def is_signed(self) -> bool:
        return self.signature is not None
