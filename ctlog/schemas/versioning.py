"""
Schemas & Canonicalization
File: versioning.py

Purpose: Centralize protocol version and signature-type constants.
This file must remain tiny and have no imports from other schema files
to avoid circular dependencies.
"""

from enum import IntEnum


class Version(IntEnum):
    """Protocol version byte carried at the start of every signing input."""

    V1 = 0


class SignatureType(IntEnum):
    """Discriminates what a signature is over (SCT vs STH)."""

    CERTIFICATE_TIMESTAMP = 0
    TREE_HASH = 1


# Current protocol version - the only one this package emits or accepts
PROTOCOL_VERSION: Version = Version.V1

SUPPORTED_PROTOCOL_VERSIONS: frozenset[Version] = frozenset({Version.V1})


class UnsupportedProtocolVersionError(ValueError):
    """Raised when an unsupported protocol version is encountered."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(
            f"Unsupported protocol version: {version}. "
            f"Supported versions: {sorted(int(v) for v in SUPPORTED_PROTOCOL_VERSIONS)}"
        )


def assert_supported_protocol_version(version: int) -> None:
    """
    Validate that the given protocol version is supported.

    Raises:
        UnsupportedProtocolVersionError: If the version is not supported.
    """
    if version not in SUPPORTED_PROTOCOL_VERSIONS:
        raise UnsupportedProtocolVersionError(version)
