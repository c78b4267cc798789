"""
Sign/Verify Results
Closed outcome enumerations for the signer and verifier, and the mapping of
serializer failures onto them.

Every externally caused failure has exactly one member here; callers can
switch on the result without ever looking at exception messages. An
unmapped serializer kind means the two enumerations drifted apart and is
raised as CtLogException.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ctlog.schemas.errors import CtLogException, DeserializeResult, SerializeResult


class SignResult(str, Enum):
    """Outcome of a signing operation."""

    OK = "OK"
    INVALID_ENTRY_TYPE = "INVALID_ENTRY_TYPE"
    EMPTY_CERTIFICATE = "EMPTY_CERTIFICATE"
    CERTIFICATE_TOO_LONG = "CERTIFICATE_TOO_LONG"
    INVALID_HASH_LENGTH = "INVALID_HASH_LENGTH"


class VerifyResult(str, Enum):
    """Outcome of a verification operation."""

    OK = "OK"
    # Signing input could not be canonicalized
    INVALID_ENTRY_TYPE = "INVALID_ENTRY_TYPE"
    EMPTY_CERTIFICATE = "EMPTY_CERTIFICATE"
    CERTIFICATE_TOO_LONG = "CERTIFICATE_TOO_LONG"
    INVALID_HASH_LENGTH = "INVALID_HASH_LENGTH"
    # Wire envelope could not be decoded
    SIGNATURE_TOO_SHORT = "SIGNATURE_TOO_SHORT"
    SIGNATURE_TOO_LONG = "SIGNATURE_TOO_LONG"
    INVALID_HASH_ALGORITHM = "INVALID_HASH_ALGORITHM"
    INVALID_SIGNATURE_ALGORITHM = "INVALID_SIGNATURE_ALGORITHM"
    # Envelope is well-formed but tagged for another configuration
    HASH_ALGORITHM_MISMATCH = "HASH_ALGORITHM_MISMATCH"
    SIGNATURE_ALGORITHM_MISMATCH = "SIGNATURE_ALGORITHM_MISMATCH"
    # Cryptographic check failed
    INVALID_SIGNATURE = "INVALID_SIGNATURE"


@dataclass(frozen=True)
class SignOutcome:
    """Result of signing raw fields: a result kind plus, on OK, the wire envelope."""
    result: SignResult
    signature: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return self.result is SignResult.OK


_SIGN_ERRORS: dict[SerializeResult, SignResult] = {
    SerializeResult.INVALID_ENTRY_TYPE: SignResult.INVALID_ENTRY_TYPE,
    SerializeResult.EMPTY_CERTIFICATE: SignResult.EMPTY_CERTIFICATE,
    SerializeResult.CERTIFICATE_TOO_LONG: SignResult.CERTIFICATE_TOO_LONG,
    SerializeResult.INVALID_HASH_LENGTH: SignResult.INVALID_HASH_LENGTH,
}

_VERIFY_SERIALIZE_ERRORS: dict[SerializeResult, VerifyResult] = {
    SerializeResult.INVALID_ENTRY_TYPE: VerifyResult.INVALID_ENTRY_TYPE,
    SerializeResult.EMPTY_CERTIFICATE: VerifyResult.EMPTY_CERTIFICATE,
    SerializeResult.CERTIFICATE_TOO_LONG: VerifyResult.CERTIFICATE_TOO_LONG,
    SerializeResult.INVALID_HASH_LENGTH: VerifyResult.INVALID_HASH_LENGTH,
}

_VERIFY_DESERIALIZE_ERRORS: dict[DeserializeResult, VerifyResult] = {
    DeserializeResult.INPUT_TOO_SHORT: VerifyResult.SIGNATURE_TOO_SHORT,
    DeserializeResult.INPUT_TOO_LONG: VerifyResult.SIGNATURE_TOO_LONG,
    DeserializeResult.INVALID_HASH_ALGORITHM: VerifyResult.INVALID_HASH_ALGORITHM,
    DeserializeResult.INVALID_SIGNATURE_ALGORITHM: VerifyResult.INVALID_SIGNATURE_ALGORITHM,
}


def _lookup(table: dict, kind: Enum, target: str):
    try:
        return table[kind]
    except KeyError:
        raise CtLogException(
            message=f"Unknown serializer error code {kind!r} for {target}",
            details={"kind": str(kind)},
        ) from None


def sign_result_for(kind: SerializeResult) -> SignResult:
    """Translate a serializer failure into a SignResult."""
    return _lookup(_SIGN_ERRORS, kind, "SignResult")


def verify_result_for_serialize_error(kind: SerializeResult) -> VerifyResult:
    """Translate a serializer failure into a VerifyResult."""
    return _lookup(_VERIFY_SERIALIZE_ERRORS, kind, "VerifyResult")


def verify_result_for_deserialize_error(kind: DeserializeResult) -> VerifyResult:
    """Translate an envelope parsing failure into a VerifyResult."""
    return _lookup(_VERIFY_DESERIALIZE_ERRORS, kind, "VerifyResult")


__all__ = [
    "SignOutcome",
    "SignResult",
    "VerifyResult",
    "sign_result_for",
    "verify_result_for_serialize_error",
    "verify_result_for_deserialize_error",
]
