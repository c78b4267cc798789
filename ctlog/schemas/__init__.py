"""
Schemas & Canonicalization

Purpose: Export the public API for the schemas module.
Protocol models, the canonical serializer and the error taxonomy live here.
"""

# Version constants
from .versioning import (
    PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    SignatureType,
    UnsupportedProtocolVersionError,
    Version,
    assert_supported_protocol_version,
)

# Error models and exceptions
from .errors import (
    ContractViolationException,
    CtLogError,
    CtLogException,
    DeserializationException,
    DeserializeResult,
    ErrorCodes,
    KeyLoadException,
    SerializationException,
    SerializeResult,
    UnsupportedKeyTypeException,
)

# Protocol objects
from .protocol import (
    DigitallySigned,
    HashAlgorithm,
    LogEntry,
    LogEntryType,
    PrecertChainEntry,
    SignatureAlgorithm,
    SignedCertificateTimestamp,
    SignedTreeHead,
    X509ChainEntry,
)

# Canonical serialization API
from .serializer import (
    DIGITALLY_SIGNED_HEADER_LENGTH,
    MAX_CERTIFICATE_LENGTH,
    MAX_SIGNATURE_LENGTH,
    ROOT_HASH_LENGTH,
    deserialize_digitally_signed,
    serialize_digitally_signed,
    serialize_sct_signature_input,
    serialize_sct_signature_input_for_entry,
    serialize_sth,
    serialize_sth_for_signing,
)

__all__ = [
    # Versioning
    "PROTOCOL_VERSION",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "SignatureType",
    "UnsupportedProtocolVersionError",
    "Version",
    "assert_supported_protocol_version",
    # Errors
    "ContractViolationException",
    "CtLogError",
    "CtLogException",
    "DeserializationException",
    "DeserializeResult",
    "ErrorCodes",
    "KeyLoadException",
    "SerializationException",
    "SerializeResult",
    "UnsupportedKeyTypeException",
    # Protocol
    "DigitallySigned",
    "HashAlgorithm",
    "LogEntry",
    "LogEntryType",
    "PrecertChainEntry",
    "SignatureAlgorithm",
    "SignedCertificateTimestamp",
    "SignedTreeHead",
    "X509ChainEntry",
    # Serializer
    "DIGITALLY_SIGNED_HEADER_LENGTH",
    "MAX_CERTIFICATE_LENGTH",
    "MAX_SIGNATURE_LENGTH",
    "ROOT_HASH_LENGTH",
    "deserialize_digitally_signed",
    "serialize_digitally_signed",
    "serialize_sct_signature_input",
    "serialize_sct_signature_input_for_entry",
    "serialize_sth",
    "serialize_sth_for_signing",
]
