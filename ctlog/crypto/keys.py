"""Key generation, PEM persistence and loading for log signing keys."""

from __future__ import annotations

import os
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from ctlog.crypto.hashing import sha256
from ctlog.schemas.errors import KeyLoadException


def _write_secure_file(path: Path, data: bytes, *, mode: int = 0o600) -> None:
    """Write ``data`` to ``path`` and restrict permissions."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    try:
        os.write(fd, data)
    finally:
        os.close(fd)

    try:
        os.chmod(path, mode)
    except PermissionError:
        # Windows may not support POSIX-style chmod; best effort only.
        pass


def generate_private_key() -> ec.EllipticCurvePrivateKey:
    """Generate a fresh P-256 private key."""
    return ec.generate_private_key(ec.SECP256R1())


def private_key_to_pem(key: ec.EllipticCurvePrivateKey, *, password: bytes | None = None) -> bytes:
    """Encode a private key as PKCS#8 PEM, optionally encrypted."""
    if password:
        encryption = serialization.BestAvailableEncryption(password)
    else:
        encryption = serialization.NoEncryption()
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        encryption,
    )


def public_key_to_pem(key: ec.EllipticCurvePublicKey) -> bytes:
    """Encode a public key as SubjectPublicKeyInfo PEM."""
    return key.public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def log_id(key: ec.EllipticCurvePublicKey) -> bytes:
    """Log ID: SHA-256 of the DER SubjectPublicKeyInfo (RFC 6962, section 3.2)."""
    der = key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return sha256(der)


def write_key_pair(
    private_key: ec.EllipticCurvePrivateKey,
    private_path: Path,
    public_path: Path,
    *,
    password: bytes | None = None,
) -> None:
    """Persist a key pair; the private half is written with mode 0600."""
    _write_secure_file(private_path, private_key_to_pem(private_key, password=password))
    public_path.parent.mkdir(parents=True, exist_ok=True)
    public_path.write_bytes(public_key_to_pem(private_key.public_key()))


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise KeyLoadException(f"Cannot read key file: {e}", path=str(path)) from e


def load_private_key(path: Path, *, password: bytes | None = None):
    """
    Load a PEM private key.

    The key type is not checked here; LogSigner rejects unsupported keys.

    Raises:
        KeyLoadException: If the file is missing or is not a PEM private key
    """
    try:
        return serialization.load_pem_private_key(_read(path), password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyLoadException(f"Invalid private key: {e}", path=str(path)) from e


def load_public_key(path: Path):
    """
    Load a PEM public key.

    Raises:
        KeyLoadException: If the file is missing or is not a PEM public key
    """
    try:
        return serialization.load_pem_public_key(_read(path))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyLoadException(f"Invalid public key: {e}", path=str(path)) from e
