"""
Common test fixtures shared by all test modules.

Provides factory functions for:
- Signing keys (supported P-256 and unsupported RSA / P-384)
- LogEntry (X.509 and precertificate)
- SignedCertificateTimestamp / SignedTreeHead
"""

from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from ctlog.schemas.protocol import (
    LogEntry,
    LogEntryType,
    PrecertChainEntry,
    SignedCertificateTimestamp,
    SignedTreeHead,
    X509ChainEntry,
)


DEFAULT_TIMESTAMP = 1_365_181_456_089
DEFAULT_ROOT_HASH = bytes(32)

# Not a real certificate; the signing core treats entries as opaque bytes.
LEAF_CERTIFICATE = b"\x30\x82\x01\x0a" + b"leaf certificate body" * 8
TBS_CERTIFICATE = b"\x30\x81\xf0" + b"tbs certificate body" * 8


# =============================================================================
# Keys
# =============================================================================

def make_private_key() -> ec.EllipticCurvePrivateKey:
    """Create a supported (P-256) private key."""
    return ec.generate_private_key(ec.SECP256R1())


def make_p384_key() -> ec.EllipticCurvePrivateKey:
    """Create an elliptic-curve key on a curve the log does not support."""
    return ec.generate_private_key(ec.SECP384R1())


def make_rsa_key() -> rsa.RSAPrivateKey:
    """Create a key of an unsupported family."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


# =============================================================================
# Protocol objects
# =============================================================================

def make_log_entry(
    entry_type: LogEntryType = LogEntryType.X509_ENTRY,
    certificate: bytes = LEAF_CERTIFICATE,
) -> LogEntry:
    """
    Create a LogEntry whose signed bytes are ``certificate``.

    For PRECERT_ENTRY the certificate becomes the TBSCertificate.
    """
    if entry_type == LogEntryType.PRECERT_ENTRY:
        return LogEntry(
            entry_type=entry_type,
            precert_entry=PrecertChainEntry(pre_certificate=certificate),
        )
    return LogEntry(
        entry_type=entry_type,
        x509_entry=X509ChainEntry(leaf_certificate=certificate),
    )


def make_sct(timestamp: Optional[int] = DEFAULT_TIMESTAMP) -> SignedCertificateTimestamp:
    """Create an unsigned SCT."""
    return SignedCertificateTimestamp(timestamp=timestamp)


def make_sth(
    timestamp: Optional[int] = DEFAULT_TIMESTAMP,
    tree_size: Optional[int] = 42,
    root_hash: Optional[bytes] = DEFAULT_ROOT_HASH,
) -> SignedTreeHead:
    """Create an unsigned STH."""
    return SignedTreeHead(timestamp=timestamp, tree_size=tree_size, root_hash=root_hash)
