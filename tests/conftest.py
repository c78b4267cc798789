"""
Pytest configuration and shared fixtures for ctlog tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_private_key = _common.make_private_key
make_log_entry = _common.make_log_entry
make_sct = _common.make_sct
make_sth = _common.make_sth

from ctlog.config import set_default_config
from ctlog.crypto import LogSigner, LogSigVerifier


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(scope="session")
def private_key():
    """A P-256 private key shared across the session (key generation is slow-ish)."""
    return make_private_key()


@pytest.fixture(scope="session")
def other_private_key():
    """A second, unrelated P-256 private key."""
    return make_private_key()


@pytest.fixture
def signer(private_key):
    """Provide a LogSigner over the session key."""
    return LogSigner(private_key)


@pytest.fixture
def verifier(private_key):
    """Provide a LogSigVerifier over the session key's public half."""
    return LogSigVerifier(private_key.public_key())


@pytest.fixture
def log_entry():
    """Provide a default X.509 LogEntry."""
    return make_log_entry()


@pytest.fixture
def sct():
    """Provide an unsigned SCT with its timestamp set."""
    return make_sct()


@pytest.fixture
def sth():
    """Provide an unsigned, populated STH."""
    return make_sth()


@pytest.fixture(autouse=True)
def _clean_ctlog_env(monkeypatch):
    """Keep CTLOG_* variables from the developer's shell out of tests."""
    for name in (
        "CTLOG_PRIVATE_KEY",
        "CTLOG_PUBLIC_KEY",
        "CTLOG_KEY_PASSWORD",
        "CTLOG_LOG_LEVEL",
        "CTLOG_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
