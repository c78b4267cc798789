"""
Helpers shared by the CLI commands: exit codes, key resolution and output.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from ctlog.config import RuntimeConfig
from ctlog.crypto.keys import load_private_key, load_public_key
from ctlog.schemas.errors import CtLogException, KeyLoadException
from ctlog.schemas.protocol import LogEntryType


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


ENTRY_TYPES: dict[str, LogEntryType] = {
    "x509": LogEntryType.X509_ENTRY,
    "precert": LogEntryType.PRECERT_ENTRY,
}


def _config(args: Namespace) -> RuntimeConfig:
    return getattr(args, "runtime_config", None) or RuntimeConfig()


def resolve_private_key(args: Namespace):
    """Load the private key named by --key, falling back to configuration."""
    config = _config(args)
    path = args.key or config.keys.private_key_path
    if not path:
        raise KeyLoadException(
            "No private key given (use --key or set CTLOG_PRIVATE_KEY)"
        )
    return load_private_key(Path(path), password=config.keys.password_bytes)


def resolve_public_key(args: Namespace):
    """
    Load the public key named by --key, falling back to configuration.

    A private key file is accepted too; its public half is used.
    """
    config = _config(args)
    if args.key:
        path = Path(args.key)
    elif config.keys.public_key_path:
        path = Path(config.keys.public_key_path)
    elif config.keys.private_key_path:
        return load_private_key(
            Path(config.keys.private_key_path), password=config.keys.password_bytes
        ).public_key()
    else:
        raise KeyLoadException(
            "No public key given (use --key or set CTLOG_PUBLIC_KEY)"
        )

    try:
        return load_public_key(path)
    except KeyLoadException:
        return load_private_key(path, password=config.keys.password_bytes).public_key()


def read_certificate(path: str) -> bytes:
    """Read the signed entry bytes (DER certificate or TBSCertificate)."""
    return Path(path).read_bytes()


def print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))


def report_error(error: CtLogException, output_json: bool) -> None:
    """Print a structured error either as JSON on stdout or as text on stderr."""
    record = error.to_error_model()
    if output_json:
        print_json({"ok": False, "error": record.model_dump()})
    else:
        print(f"Error: {record.message}", file=sys.stderr)
