"""
Schemas & Canonicalization
File: serializer.py

Purpose: Canonical byte encoding of SCT/STH signing inputs and of the
DigitallySigned envelope, in TLS presentation language (RFC 6962).

CRITICAL: All outputs from this module MUST be deterministic. Equal field
values always encode to equal bytes, and distinct well-formed inputs never
share an encoding.

Signing input layouts (big-endian):
- SCT: version(1) | signature_type(1) | timestamp(8) | entry_type(2)
       | signed_entry<1..2^24-1> | extensions<0..2^16-1>
- STH: version(1) | signature_type(1) | timestamp(8) | tree_size(8)
       | root_hash[32]
- DigitallySigned: hash_algorithm(1) | sig_algorithm(1) | signature<0..2^16-1>

Failures are raised as SerializationException / DeserializationException
carrying a closed result kind; callers translate those kinds, never the
messages.
"""

from __future__ import annotations

from .errors import (
    ContractViolationException,
    DeserializationException,
    DeserializeResult,
    SerializationException,
    SerializeResult,
)
from .protocol import (
    MAX_SIGNATURE_LENGTH,
    UINT16_MAX,
    UINT64_MAX,
    DigitallySigned,
    HashAlgorithm,
    LogEntry,
    LogEntryType,
    SignatureAlgorithm,
    SignedTreeHead,
)
from .versioning import PROTOCOL_VERSION, SignatureType

MAX_CERTIFICATE_LENGTH: int = (1 << 24) - 1
MAX_EXTENSIONS_LENGTH: int = UINT16_MAX

# SHA-256 root hash
ROOT_HASH_LENGTH: int = 32

# hash_algorithm(1) + sig_algorithm(1) + signature length prefix(2)
DIGITALLY_SIGNED_HEADER_LENGTH: int = 4

# Entry types that have a wire encoding (uint16).
_ENCODABLE_ENTRY_TYPES: frozenset[int] = frozenset(
    {LogEntryType.X509_ENTRY, LogEntryType.PRECERT_ENTRY}
)


# =============================================================================
# Primitive encoders
# =============================================================================

def _encode_uint(value: int, length: int) -> bytes:
    return value.to_bytes(length, "big")


def _encode_opaque(data: bytes, prefix_length: int) -> bytes:
    return _encode_uint(len(data), prefix_length) + data


def _require_uint64(name: str, value: int | None) -> int:
    if value is None:
        raise ContractViolationException(
            message=f"{name} must be set before serialization",
            field_name=name,
        )
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT64_MAX:
        raise ContractViolationException(
            message=f"{name} must be a 64-bit unsigned integer, got {value!r}",
            field_name=name,
        )
    return value


# =============================================================================
# Signing inputs
# =============================================================================

def serialize_sct_signature_input(
    timestamp: int,
    entry_type: LogEntryType | int,
    leaf_certificate: bytes,
    extensions: bytes = b"",
) -> bytes:
    """
    Encode the data an SCT signature covers.

    Args:
        timestamp: SCT timestamp (milliseconds since the epoch)
        entry_type: X509_ENTRY or PRECERT_ENTRY
        leaf_certificate: The signed entry (certificate or TBSCertificate)
        extensions: SCT extensions (empty for v1 logs)

    Returns:
        Canonical signing input bytes

    Raises:
        SerializationException: INVALID_ENTRY_TYPE, EMPTY_CERTIFICATE or
            CERTIFICATE_TOO_LONG
        ContractViolationException: If timestamp or extensions are out of range
    """
    _require_uint64("timestamp", timestamp)

    if entry_type not in _ENCODABLE_ENTRY_TYPES:
        raise SerializationException(
            SerializeResult.INVALID_ENTRY_TYPE,
            message=f"Entry type {entry_type!r} has no wire encoding",
            details={"entry_type": int(entry_type)},
        )
    if not leaf_certificate:
        raise SerializationException(
            SerializeResult.EMPTY_CERTIFICATE,
            message="Signed entry is empty",
        )
    if len(leaf_certificate) > MAX_CERTIFICATE_LENGTH:
        raise SerializationException(
            SerializeResult.CERTIFICATE_TOO_LONG,
            message=(
                f"Signed entry is {len(leaf_certificate)} bytes, "
                f"maximum is {MAX_CERTIFICATE_LENGTH}"
            ),
            details={"length": len(leaf_certificate)},
        )
    if len(extensions) > MAX_EXTENSIONS_LENGTH:
        raise ContractViolationException(
            message=f"SCT extensions exceed {MAX_EXTENSIONS_LENGTH} bytes",
            field_name="extensions",
        )

    return b"".join([
        _encode_uint(PROTOCOL_VERSION, 1),
        _encode_uint(SignatureType.CERTIFICATE_TIMESTAMP, 1),
        _encode_uint(timestamp, 8),
        _encode_uint(int(entry_type), 2),
        _encode_opaque(leaf_certificate, 3),
        _encode_opaque(extensions, 2),
    ])


def serialize_sct_signature_input_for_entry(
    timestamp: int,
    entry: LogEntry,
    extensions: bytes = b"",
) -> bytes:
    """
    Encode the data an SCT signature covers, taking type and signed bytes
    from a full log entry.

    Same failure kinds as serialize_sct_signature_input().
    """
    return serialize_sct_signature_input(
        timestamp, entry.entry_type, entry.signed_entry, extensions
    )


def serialize_sth_for_signing(
    timestamp: int,
    tree_size: int,
    root_hash: bytes | None,
) -> bytes:
    """
    Encode the data an STH signature covers.

    Raises:
        SerializationException: INVALID_HASH_LENGTH if root_hash is not
            exactly 32 bytes
        ContractViolationException: If timestamp or tree_size are unset or
            out of range
    """
    _require_uint64("timestamp", timestamp)
    _require_uint64("tree_size", tree_size)

    root_hash = root_hash or b""
    if len(root_hash) != ROOT_HASH_LENGTH:
        raise SerializationException(
            SerializeResult.INVALID_HASH_LENGTH,
            message=(
                f"Root hash must be {ROOT_HASH_LENGTH} bytes, "
                f"got {len(root_hash)}"
            ),
            details={"length": len(root_hash)},
        )

    return b"".join([
        _encode_uint(PROTOCOL_VERSION, 1),
        _encode_uint(SignatureType.TREE_HASH, 1),
        _encode_uint(timestamp, 8),
        _encode_uint(tree_size, 8),
        root_hash,
    ])


def serialize_sth(sth: SignedTreeHead) -> bytes:
    """Encode the signing input for a populated SignedTreeHead."""
    return serialize_sth_for_signing(sth.timestamp, sth.tree_size, sth.root_hash)


# =============================================================================
# DigitallySigned envelope
# =============================================================================

def serialize_digitally_signed(signature: DigitallySigned) -> bytes:
    """
    Encode a signature envelope to its wire form.

    Infallible for a validated DigitallySigned; the model already bounds
    the signature length.

    Raises:
        ContractViolationException: If an unvalidated envelope (built with
            model_construct or model_copy) carries an oversized signature
    """
    if len(signature.signature) > MAX_SIGNATURE_LENGTH:
        raise ContractViolationException(
            message=f"Signature exceeds {MAX_SIGNATURE_LENGTH} bytes",
            field_name="signature",
        )
    return b"".join([
        _encode_uint(signature.hash_algorithm, 1),
        _encode_uint(signature.sig_algorithm, 1),
        _encode_opaque(signature.signature, 2),
    ])


class _Reader:
    """Sequential reader over a byte string; running out is INPUT_TOO_SHORT."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_bytes(self, length: int) -> bytes:
        if length > self.remaining:
            raise DeserializationException(
                DeserializeResult.INPUT_TOO_SHORT,
                message=(
                    f"Needed {length} bytes at offset {self._offset}, "
                    f"only {self.remaining} left"
                ),
                details={"offset": self._offset, "needed": length},
            )
        chunk = self._data[self._offset:self._offset + length]
        self._offset += length
        return chunk

    def read_uint(self, length: int) -> int:
        return int.from_bytes(self.read_bytes(length), "big")

    def read_opaque(self, prefix_length: int) -> bytes:
        return self.read_bytes(self.read_uint(prefix_length))


def deserialize_digitally_signed(data: bytes) -> DigitallySigned:
    """
    Parse a wire-format signature envelope.

    Fields are consumed in order, so a truncated input reports
    INPUT_TOO_SHORT only after any earlier field has been validated.

    Raises:
        DeserializationException: INPUT_TOO_SHORT, INVALID_HASH_ALGORITHM,
            INVALID_SIGNATURE_ALGORITHM or INPUT_TOO_LONG
    """
    reader = _Reader(data)

    hash_id = reader.read_uint(1)
    try:
        hash_algorithm = HashAlgorithm(hash_id)
    except ValueError as e:
        raise DeserializationException(
            DeserializeResult.INVALID_HASH_ALGORITHM,
            message=f"Unknown hash algorithm id {hash_id}",
            details={"hash_algorithm": hash_id},
        ) from e

    sig_id = reader.read_uint(1)
    try:
        sig_algorithm = SignatureAlgorithm(sig_id)
    except ValueError as e:
        raise DeserializationException(
            DeserializeResult.INVALID_SIGNATURE_ALGORITHM,
            message=f"Unknown signature algorithm id {sig_id}",
            details={"sig_algorithm": sig_id},
        ) from e

    signature = reader.read_opaque(2)

    if reader.remaining:
        raise DeserializationException(
            DeserializeResult.INPUT_TOO_LONG,
            message=f"{reader.remaining} trailing bytes after signature",
            details={"trailing": reader.remaining},
        )

    return DigitallySigned(
        hash_algorithm=hash_algorithm,
        sig_algorithm=sig_algorithm,
        signature=signature,
    )
