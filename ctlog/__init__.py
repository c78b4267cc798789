"""ctlog - signing and verification core for a Certificate Transparency log."""

__version__ = "0.1.0"

from ctlog.crypto import LogSigner, LogSigVerifier, SignResult, VerifyResult

__all__ = ["LogSigner", "LogSigVerifier", "SignResult", "VerifyResult", "__version__"]
