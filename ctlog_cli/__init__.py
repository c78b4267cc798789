"""
ctlog CLI

Command-line interface for signing and verifying SCTs and STHs.

Usage:
    python -m ctlog_cli keygen --out log-key.pem
    python -m ctlog_cli sign-sth --timestamp 1000 --tree-size 42 --root-hash <hex>
    python -m ctlog_cli verify-sth --timestamp 1000 --tree-size 42 --root-hash <hex> --signature <hex>
    python -m ctlog_cli sign-sct --timestamp 1000 --entry-type x509 --cert leaf.der
    python -m ctlog_cli verify-sct --timestamp 1000 --entry-type x509 --cert leaf.der --signature <hex>
"""

__version__ = "0.1.0"
