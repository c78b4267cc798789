"""
Log Signature Verifier
Checks SCT and STH signatures against a single public key.

Verification order is fixed and every step has its own result:
1. decode the wire envelope (raw-field variants only)
2. canonicalize the signing input
3. compare the hash algorithm id with the configured one
4. compare the signature algorithm id with the configured one
5. cryptographic check

Steps 3 and 4 run before any cryptography so that a configuration mismatch
(wrong key / algorithm) is never reported as a forged signature.
"""
from __future__ import annotations

import logging

from ctlog.crypto.algorithms import AlgorithmPair, PublicKey, family_for_public_key
from ctlog.crypto.results import (
    VerifyResult,
    verify_result_for_deserialize_error,
    verify_result_for_serialize_error,
)
from ctlog.schemas.errors import (
    ContractViolationException,
    DeserializationException,
    SerializationException,
)
from ctlog.schemas.protocol import (
    DigitallySigned,
    HashAlgorithm,
    LogEntry,
    LogEntryType,
    SignatureAlgorithm,
    SignedCertificateTimestamp,
    SignedTreeHead,
)
from ctlog.schemas.serializer import (
    deserialize_digitally_signed,
    serialize_sct_signature_input,
    serialize_sct_signature_input_for_entry,
    serialize_sth_for_signing,
)

logger = logging.getLogger(__name__)

# Stand-in for an absent signature: tagged with no algorithms, so it can
# never match a configured pair.
UNSIGNED = DigitallySigned(
    hash_algorithm=HashAlgorithm.NONE,
    sig_algorithm=SignatureAlgorithm.ANONYMOUS,
    signature=b"",
)


def _or_zero(value: int | None) -> int:
    return 0 if value is None else value


class LogSigVerifier:
    """
    Verifies signatures produced by a LogSigner holding the matching key.

    Instances are immutable after construction and safe to share.
    """

    def __init__(self, public_key: PublicKey) -> None:
        """
        Args:
            public_key: An EC P-256 public key; the verifier becomes its owner

        Raises:
            UnsupportedKeyTypeException: If the key type is not supported
        """
        if public_key is None:
            raise ContractViolationException("LogSigVerifier requires a public key")
        self._family = family_for_public_key(public_key)
        self._key = public_key
        self._algorithms = self._family.algorithm_pair
        logger.debug(
            "LogSigVerifier ready: family=%s hash=%s sig=%s",
            self._family.value,
            self._algorithms.hash_algorithm.name,
            self._algorithms.signature_algorithm.name,
        )

    @property
    def algorithm_pair(self) -> AlgorithmPair:
        return self._algorithms

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return self._algorithms.hash_algorithm

    @property
    def signature_algorithm(self) -> SignatureAlgorithm:
        return self._algorithms.signature_algorithm

    # -------------------------------------------------------------------------
    # SCT
    # -------------------------------------------------------------------------

    def verify_sct_signature(
        self,
        timestamp: int,
        entry_type: LogEntryType | int,
        leaf_certificate: bytes,
        serialized_signature: bytes,
    ) -> VerifyResult:
        """Verify a wire-encoded SCT signature over raw SCT fields."""
        try:
            signature = deserialize_digitally_signed(serialized_signature)
        except DeserializationException as e:
            return self._deserialize_error(e, "SCT")

        try:
            serialized_input = serialize_sct_signature_input(
                timestamp, entry_type, leaf_certificate
            )
        except SerializationException as e:
            return self._serialize_error(e, "SCT")

        return self.verify(serialized_input, signature)

    def verify_sct(
        self,
        entry: LogEntry,
        sct: SignedCertificateTimestamp,
    ) -> VerifyResult:
        """
        Verify a populated SCT against the entry it was issued for.

        Unset fields never raise: a missing timestamp is encoded as 0 and a
        missing signature is checked as an untagged envelope, which yields
        HASH_ALGORITHM_MISMATCH.
        """
        try:
            serialized_input = serialize_sct_signature_input_for_entry(
                _or_zero(sct.timestamp), entry, sct.extensions
            )
        except SerializationException as e:
            return self._serialize_error(e, "SCT")

        return self.verify(serialized_input, sct.signature if sct.signature is not None else UNSIGNED)

    # -------------------------------------------------------------------------
    # STH
    # -------------------------------------------------------------------------

    def verify_sth_signature(
        self,
        timestamp: int,
        tree_size: int,
        root_hash: bytes,
        serialized_signature: bytes,
    ) -> VerifyResult:
        """Verify a wire-encoded STH signature over raw STH fields."""
        try:
            signature = deserialize_digitally_signed(serialized_signature)
        except DeserializationException as e:
            return self._deserialize_error(e, "STH")

        try:
            serialized_sth = serialize_sth_for_signing(timestamp, tree_size, root_hash)
        except SerializationException as e:
            return self._serialize_error(e, "STH")

        return self.verify(serialized_sth, signature)

    def verify_sth(self, sth: SignedTreeHead) -> VerifyResult:
        """
        Verify a populated STH.

        As with verify_sct, a missing timestamp or tree_size is encoded as 0
        and a missing signature yields HASH_ALGORITHM_MISMATCH.
        """
        try:
            serialized_sth = serialize_sth_for_signing(
                _or_zero(sth.timestamp), _or_zero(sth.tree_size), sth.root_hash
            )
        except SerializationException as e:
            return self._serialize_error(e, "STH")

        return self.verify(serialized_sth, sth.signature if sth.signature is not None else UNSIGNED)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def verify(self, data: bytes, signature: DigitallySigned) -> VerifyResult:
        """Check algorithm ids, then the signature, over already-canonical bytes."""
        if signature.hash_algorithm != self._algorithms.hash_algorithm:
            logger.debug(
                "Hash algorithm mismatch: got %s, expected %s",
                signature.hash_algorithm.name,
                self._algorithms.hash_algorithm.name,
            )
            return VerifyResult.HASH_ALGORITHM_MISMATCH
        if signature.sig_algorithm != self._algorithms.signature_algorithm:
            logger.debug(
                "Signature algorithm mismatch: got %s, expected %s",
                signature.sig_algorithm.name,
                self._algorithms.signature_algorithm.name,
            )
            return VerifyResult.SIGNATURE_ALGORITHM_MISMATCH
        if not self.raw_verify(data, signature.signature):
            logger.debug("Signature check failed")
            return VerifyResult.INVALID_SIGNATURE
        return VerifyResult.OK

    def raw_verify(self, data: bytes, signature: bytes) -> bool:
        """Cryptographic check only; no algorithm id comparison."""
        return self._family.raw_verify(self._key, data, signature)

    @staticmethod
    def _serialize_error(error: SerializationException, what: str) -> VerifyResult:
        result = verify_result_for_serialize_error(error.result)
        logger.debug("Cannot canonicalize %s: %s (%s)", what, result.value, error.message)
        return result

    @staticmethod
    def _deserialize_error(error: DeserializationException, what: str) -> VerifyResult:
        result = verify_result_for_deserialize_error(error.result)
        logger.debug("Cannot decode %s signature: %s (%s)", what, result.value, error.message)
        return result
