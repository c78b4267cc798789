"""
Log Signer
Produces algorithm-tagged signatures over canonical SCT and STH signing inputs.

Two shapes per object type:
- raw fields in, wire-encoded DigitallySigned out (SignOutcome)
- a populated protocol object in, its ``signature`` field filled in place

Canonicalization failures come back as SignResult members without the key
being used. Contract violations (unset timestamp etc.) and failures of the
signing primitive itself are raised, never returned.
"""
from __future__ import annotations

import logging

from ctlog.crypto.algorithms import AlgorithmPair, PrivateKey, family_for_private_key
from ctlog.crypto.results import SignOutcome, SignResult, sign_result_for
from ctlog.schemas.errors import ContractViolationException, SerializationException
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
    serialize_digitally_signed,
    serialize_sct_signature_input,
    serialize_sct_signature_input_for_entry,
    serialize_sth,
    serialize_sth_for_signing,
)

logger = logging.getLogger(__name__)


class LogSigner:
    """
    Signs SCTs and STHs with a single private key.

    The algorithm pair is fixed at construction from the key type and the
    instance is never mutated afterwards, so one signer may be shared by
    concurrent callers.

    Example:
        >>> signer = LogSigner(private_key)
        >>> outcome = signer.sign_tree_head(1000, 42, b"\\x00" * 32)
        >>> outcome.result
        <SignResult.OK: 'OK'>
    """

    def __init__(self, private_key: PrivateKey) -> None:
        """
        Args:
            private_key: An EC P-256 private key; the signer becomes its owner

        Raises:
            UnsupportedKeyTypeException: If the key type is not supported
        """
        if private_key is None:
            raise ContractViolationException("LogSigner requires a private key")
        self._family = family_for_private_key(private_key)
        self._key = private_key
        self._algorithms = self._family.algorithm_pair
        logger.debug(
            "LogSigner ready: family=%s hash=%s sig=%s",
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

    def sign_certificate_timestamp(
        self,
        timestamp: int,
        entry_type: LogEntryType | int,
        leaf_certificate: bytes,
    ) -> SignOutcome:
        """
        Sign an SCT given its raw fields.

        Returns:
            SignOutcome with the wire-encoded DigitallySigned on OK, or the
            canonicalization failure kind otherwise
        """
        try:
            serialized_input = serialize_sct_signature_input(
                timestamp, entry_type, leaf_certificate
            )
        except SerializationException as e:
            return SignOutcome(self._serialize_error(e, "SCT"))

        signature = self.sign(serialized_input)
        return SignOutcome(SignResult.OK, serialize_digitally_signed(signature))

    def sign_sct(
        self,
        entry: LogEntry,
        sct: SignedCertificateTimestamp,
    ) -> SignResult:
        """
        Sign ``sct`` for ``entry`` and store the envelope in ``sct.signature``.

        The SCT timestamp must already be set; the signature has to be
        reproducible for a given SCT, so the signer never picks one.

        Raises:
            ContractViolationException: If sct.timestamp is unset
        """
        if sct.timestamp is None:
            raise ContractViolationException(
                "Attempt to sign an SCT with a missing timestamp",
                field_name="timestamp",
            )

        try:
            serialized_input = serialize_sct_signature_input_for_entry(
                sct.timestamp, entry, sct.extensions
            )
        except SerializationException as e:
            return self._serialize_error(e, "SCT")

        sct.signature = self.sign(serialized_input)
        return SignResult.OK

    # -------------------------------------------------------------------------
    # STH
    # -------------------------------------------------------------------------

    def sign_tree_head(
        self,
        timestamp: int,
        tree_size: int,
        root_hash: bytes,
    ) -> SignOutcome:
        """
        Sign an STH given its raw fields.

        Returns:
            SignOutcome with the wire-encoded DigitallySigned on OK, or
            INVALID_HASH_LENGTH
        """
        try:
            serialized_sth = serialize_sth_for_signing(timestamp, tree_size, root_hash)
        except SerializationException as e:
            return SignOutcome(self._serialize_error(e, "STH"))

        signature = self.sign(serialized_sth)
        return SignOutcome(SignResult.OK, serialize_digitally_signed(signature))

    def sign_sth(self, sth: SignedTreeHead) -> SignResult:
        """
        Sign a populated STH in place.

        Raises:
            ContractViolationException: If timestamp or tree_size is unset
        """
        for field_name in ("timestamp", "tree_size"):
            if getattr(sth, field_name) is None:
                raise ContractViolationException(
                    f"Attempt to sign an STH with a missing {field_name}",
                    field_name=field_name,
                )

        try:
            serialized_sth = serialize_sth(sth)
        except SerializationException as e:
            return self._serialize_error(e, "STH")

        sth.signature = self.sign(serialized_sth)
        return SignResult.OK

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def sign(self, data: bytes) -> DigitallySigned:
        """Sign already-canonical bytes and tag them with this signer's algorithms."""
        return DigitallySigned(
            hash_algorithm=self._algorithms.hash_algorithm,
            sig_algorithm=self._algorithms.signature_algorithm,
            signature=self.raw_sign(data),
        )

    def raw_sign(self, data: bytes) -> bytes:
        """
        Hash-then-sign ``data``.

        Errors from the underlying library propagate; they indicate a broken
        key or environment rather than bad input.
        """
        return self._family.raw_sign(self._key, data)

    @staticmethod
    def _serialize_error(error: SerializationException, what: str) -> SignResult:
        result = sign_result_for(error.result)
        logger.debug("Refusing to sign %s: %s (%s)", what, result.value, error.message)
        return result
