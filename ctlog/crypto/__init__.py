"""
Log signing core.

This package provides:
- LogSigner / LogSigVerifier: sign and verify SCTs and STHs
- SignResult / VerifyResult: closed outcome enumerations
- AlgorithmFamily: the supported key/hash/signature combinations
- Key helpers and hex utilities used by the CLI

Usage:
    from ctlog.crypto import LogSigner, LogSigVerifier, VerifyResult

    signer = LogSigner(private_key)
    outcome = signer.sign_tree_head(timestamp, tree_size, root_hash)

    verifier = LogSigVerifier(private_key.public_key())
    assert verifier.verify_sth_signature(
        timestamp, tree_size, root_hash, outcome.signature
    ) == VerifyResult.OK
"""
from .algorithms import (
    AlgorithmFamily,
    AlgorithmPair,
    family_for_private_key,
    family_for_public_key,
)
from .results import (
    SignOutcome,
    SignResult,
    VerifyResult,
    sign_result_for,
    verify_result_for_deserialize_error,
    verify_result_for_serialize_error,
)
from .signer import LogSigner
from .verifier import LogSigVerifier

__all__ = [
    # Algorithms
    "AlgorithmFamily",
    "AlgorithmPair",
    "family_for_private_key",
    "family_for_public_key",
    # Results
    "SignOutcome",
    "SignResult",
    "VerifyResult",
    "sign_result_for",
    "verify_result_for_deserialize_error",
    "verify_result_for_serialize_error",
    # Components
    "LogSigner",
    "LogSigVerifier",
]
