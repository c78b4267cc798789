"""
Signer Unit Tests
Tests for ctlog/crypto/signer.py

Tests:
- Construction fixes the algorithm pair; unsupported keys are fatal
- Raw-field signing returns a wire envelope tagged with the fixed pair
- In-place signing fills the signature field
- Canonicalization failures map to SignResult without touching the key
- Missing timestamps are contract violations
"""
import pytest

from ctlog.crypto import LogSigner, SignResult
from ctlog.schemas.errors import ContractViolationException, UnsupportedKeyTypeException
from ctlog.schemas.protocol import HashAlgorithm, LogEntry, LogEntryType, SignatureAlgorithm
from ctlog.schemas.serializer import MAX_CERTIFICATE_LENGTH, deserialize_digitally_signed

from fixtures.common import (
    DEFAULT_ROOT_HASH,
    LEAF_CERTIFICATE,
    make_log_entry,
    make_p384_key,
    make_rsa_key,
    make_sct,
    make_sth,
)


class TestConstruction:
    """Tests for LogSigner.__init__."""

    def test_p256_key_fixes_sha256_ecdsa(self, private_key):
        signer = LogSigner(private_key)

        assert signer.hash_algorithm is HashAlgorithm.SHA256
        assert signer.signature_algorithm is SignatureAlgorithm.ECDSA

    def test_rsa_key_is_fatal(self):
        with pytest.raises(UnsupportedKeyTypeException):
            LogSigner(make_rsa_key())

    def test_other_curve_is_fatal(self):
        with pytest.raises(UnsupportedKeyTypeException, match="curve"):
            LogSigner(make_p384_key())

    def test_public_key_is_fatal(self, private_key):
        with pytest.raises(UnsupportedKeyTypeException):
            LogSigner(private_key.public_key())

    def test_missing_key_is_contract_violation(self):
        with pytest.raises(ContractViolationException):
            LogSigner(None)


class _ExplodingSigner(LogSigner):
    """Signer that fails the test if the key is ever used."""

    def raw_sign(self, data: bytes) -> bytes:
        raise AssertionError("key must not be used for invalid input")


class TestSignCertificateTimestamp:
    """Tests for LogSigner.sign_certificate_timestamp()."""

    def test_ok_returns_tagged_envelope(self, signer):
        outcome = signer.sign_certificate_timestamp(1000, LogEntryType.X509_ENTRY, LEAF_CERTIFICATE)

        assert outcome.ok
        assert outcome.result is SignResult.OK
        envelope = deserialize_digitally_signed(outcome.signature)
        assert envelope.hash_algorithm is HashAlgorithm.SHA256
        assert envelope.sig_algorithm is SignatureAlgorithm.ECDSA
        assert envelope.signature

    def test_empty_certificate(self, signer):
        outcome = signer.sign_certificate_timestamp(1000, LogEntryType.X509_ENTRY, b"")

        assert outcome.result is SignResult.EMPTY_CERTIFICATE
        assert outcome.signature is None
        assert not outcome.ok

    def test_certificate_too_long(self, signer):
        outcome = signer.sign_certificate_timestamp(
            1000, LogEntryType.X509_ENTRY, b"\x00" * (MAX_CERTIFICATE_LENGTH + 1)
        )

        assert outcome.result is SignResult.CERTIFICATE_TOO_LONG

    def test_invalid_entry_type(self, signer):
        outcome = signer.sign_certificate_timestamp(
            1000, LogEntryType.UNKNOWN_ENTRY_TYPE, LEAF_CERTIFICATE
        )

        assert outcome.result is SignResult.INVALID_ENTRY_TYPE

    def test_key_not_used_on_canonicalization_failure(self, private_key):
        signer = _ExplodingSigner(private_key)

        outcome = signer.sign_certificate_timestamp(1000, LogEntryType.X509_ENTRY, b"")

        assert outcome.result is SignResult.EMPTY_CERTIFICATE


class TestSignSCT:
    """Tests for LogSigner.sign_sct()."""

    def test_fills_signature(self, signer, log_entry, sct):
        result = signer.sign_sct(log_entry, sct)

        assert result is SignResult.OK
        assert sct.is_signed
        assert sct.signature.hash_algorithm is HashAlgorithm.SHA256
        assert sct.signature.sig_algorithm is SignatureAlgorithm.ECDSA

    def test_leaves_other_fields_alone(self, signer, log_entry, sct):
        timestamp = sct.timestamp

        signer.sign_sct(log_entry, sct)

        assert sct.timestamp == timestamp
        assert sct.extensions == b""

    def test_missing_timestamp_is_contract_violation(self, signer, log_entry):
        sct = make_sct(timestamp=None)

        with pytest.raises(ContractViolationException, match="timestamp"):
            signer.sign_sct(log_entry, sct)
        assert sct.signature is None

    def test_unknown_entry_type_leaves_sct_unsigned(self, signer, sct):
        result = signer.sign_sct(LogEntry(), sct)

        assert result is SignResult.INVALID_ENTRY_TYPE
        assert sct.signature is None

    def test_precert_entry(self, signer, sct):
        entry = make_log_entry(LogEntryType.PRECERT_ENTRY)

        assert signer.sign_sct(entry, sct) is SignResult.OK


class TestSignTreeHead:
    """Tests for LogSigner.sign_tree_head() and sign_sth()."""

    def test_ok_returns_tagged_envelope(self, signer):
        outcome = signer.sign_tree_head(1000, 42, DEFAULT_ROOT_HASH)

        assert outcome.result is SignResult.OK
        envelope = deserialize_digitally_signed(outcome.signature)
        assert envelope.hash_algorithm is HashAlgorithm.SHA256

    def test_invalid_hash_length(self, signer):
        outcome = signer.sign_tree_head(1000, 42, b"\x00" * 31)

        assert outcome.result is SignResult.INVALID_HASH_LENGTH
        assert outcome.signature is None

    def test_sign_sth_fills_signature(self, signer, sth):
        assert signer.sign_sth(sth) is SignResult.OK
        assert sth.is_signed

    def test_sign_sth_bad_root_hash(self, signer):
        sth = make_sth(root_hash=b"\x00" * 20)

        assert signer.sign_sth(sth) is SignResult.INVALID_HASH_LENGTH
        assert sth.signature is None

    @pytest.mark.parametrize("missing", ["timestamp", "tree_size"])
    def test_sign_sth_missing_field_is_contract_violation(self, signer, missing):
        sth = make_sth(**{missing: None})

        with pytest.raises(ContractViolationException, match=missing):
            signer.sign_sth(sth)


class TestSignPrimitives:
    """Tests for LogSigner.sign() / raw_sign()."""

    def test_sign_tags_with_fixed_pair(self, signer):
        envelope = signer.sign(b"anything")

        assert envelope.hash_algorithm is signer.hash_algorithm
        assert envelope.sig_algorithm is signer.signature_algorithm

    def test_raw_sign_verifies_with_library(self, signer, private_key):
        from cryptography.hazmat.primitives import hashes
        from cryptography.hazmat.primitives.asymmetric import ec

        signature = signer.raw_sign(b"payload")

        # Raises InvalidSignature on failure
        private_key.public_key().verify(signature, b"payload", ec.ECDSA(hashes.SHA256()))
