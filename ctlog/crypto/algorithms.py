"""
Algorithm Families
Closed set of key/hash/signature combinations the log can sign with.

This module provides:
- AlgorithmFamily: the supported families (currently ECDSA over P-256)
- AlgorithmPair: the (hash, signature) identifiers a family tags envelopes with
- family_for_private_key / family_for_public_key: key-type dispatch

A key that does not belong to a supported family is a configuration error
and raises UnsupportedKeyTypeException; it is never reported as a result code.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from ctlog.schemas.errors import UnsupportedKeyTypeException
from ctlog.schemas.protocol import HashAlgorithm, SignatureAlgorithm

PrivateKey = ec.EllipticCurvePrivateKey
PublicKey = ec.EllipticCurvePublicKey
AnyKey = Union[PrivateKey, PublicKey]


@dataclass(frozen=True)
class AlgorithmPair:
    """Identifiers carried in every DigitallySigned produced or accepted."""
    hash_algorithm: HashAlgorithm
    signature_algorithm: SignatureAlgorithm


class AlgorithmFamily(Enum):
    """Supported signing families."""

    ECDSA_P256 = "ecdsa-p256"

    @property
    def algorithm_pair(self) -> AlgorithmPair:
        return _ALGORITHM_PAIRS[self]

    def raw_sign(self, key: PrivateKey, data: bytes) -> bytes:
        """Hash-then-sign ``data``; returns a DER-encoded signature."""
        return key.sign(data, ec.ECDSA(_HASHES[self]()))

    def raw_verify(self, key: PublicKey, data: bytes, signature: bytes) -> bool:
        """Check ``signature`` over ``data``; malformed DER counts as invalid."""
        try:
            key.verify(signature, data, ec.ECDSA(_HASHES[self]()))
        except (InvalidSignature, ValueError):
            return False
        return True


_ALGORITHM_PAIRS: dict[AlgorithmFamily, AlgorithmPair] = {
    AlgorithmFamily.ECDSA_P256: AlgorithmPair(
        hash_algorithm=HashAlgorithm.SHA256,
        signature_algorithm=SignatureAlgorithm.ECDSA,
    ),
}

_HASHES: dict[AlgorithmFamily, type[hashes.HashAlgorithm]] = {
    AlgorithmFamily.ECDSA_P256: hashes.SHA256,
}


def _describe_key(key: object) -> str:
    curve = getattr(key, "curve", None)
    if curve is not None:
        return f"{type(key).__name__}({curve.name})"
    return type(key).__name__


def _family_for_curve(key: AnyKey) -> AlgorithmFamily:
    if isinstance(key.curve, ec.SECP256R1):
        return AlgorithmFamily.ECDSA_P256
    raise UnsupportedKeyTypeException(
        message=f"Unsupported elliptic curve: {key.curve.name}",
        key_type=_describe_key(key),
    )


def family_for_private_key(key: object) -> AlgorithmFamily:
    """
    Determine the algorithm family of a private key.

    Raises:
        UnsupportedKeyTypeException: If the key is not a supported private key
    """
    if isinstance(key, ec.EllipticCurvePrivateKey):
        return _family_for_curve(key)
    raise UnsupportedKeyTypeException(
        message="Unsupported key type for signing",
        key_type=_describe_key(key),
    )


def family_for_public_key(key: object) -> AlgorithmFamily:
    """
    Determine the algorithm family of a public key.

    Raises:
        UnsupportedKeyTypeException: If the key is not a supported public key
    """
    if isinstance(key, ec.EllipticCurvePublicKey):
        return _family_for_curve(key)
    raise UnsupportedKeyTypeException(
        message="Unsupported key type for verification",
        key_type=_describe_key(key),
    )


__all__ = [
    "AlgorithmFamily",
    "AlgorithmPair",
    "PrivateKey",
    "PublicKey",
    "family_for_private_key",
    "family_for_public_key",
]
