"""
Test fixtures package for ctlog tests.

This package provides factory functions for creating test objects:
- common.py: keys, log entries, SCTs and STHs

Usage:
    from fixtures import make_log_entry, make_sth

    def test_something():
        sth = make_sth(tree_size=7)
"""

from .common import (
    DEFAULT_ROOT_HASH,
    DEFAULT_TIMESTAMP,
    LEAF_CERTIFICATE,
    TBS_CERTIFICATE,
    make_log_entry,
    make_p384_key,
    make_private_key,
    make_rsa_key,
    make_sct,
    make_sth,
)

__all__ = [
    "DEFAULT_ROOT_HASH",
    "DEFAULT_TIMESTAMP",
    "LEAF_CERTIFICATE",
    "TBS_CERTIFICATE",
    "make_log_entry",
    "make_p384_key",
    "make_private_key",
    "make_rsa_key",
    "make_sct",
    "make_sth",
]
