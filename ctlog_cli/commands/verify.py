"""
CLI Verify Commands

Check a hex-encoded DigitallySigned against raw STH or SCT fields.

Usage:
    ctlog verify-sth --timestamp N --tree-size N --root-hash HEX --signature HEX [--key PATH] [--json]
    ctlog verify-sct --timestamp N --entry-type x509 --cert PATH --signature HEX [--key PATH] [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from ctlog.crypto import LogSigVerifier, VerifyResult
from ctlog.crypto.hashing import from_hex
from ctlog_cli.commands.common import (
    ENTRY_TYPES,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    print_json,
    read_certificate,
    resolve_public_key,
)


logger = logging.getLogger(__name__)


def _emit(result: VerifyResult, what: str, output_json: bool) -> int:
    ok = result is VerifyResult.OK
    if output_json:
        print_json({"ok": ok, "result": result.value})
    else:
        print(f"result: {result.value}")

    if ok:
        logger.info("%s signature verified", what)
        return EXIT_SUCCESS
    logger.warning("%s verification failed: %s", what, result.value)
    return EXIT_VERIFICATION_FAILED


def verify_sth_cmd(args: Namespace) -> int:
    """Execute the verify-sth command."""
    verifier = LogSigVerifier(resolve_public_key(args))
    result = verifier.verify_sth_signature(
        args.timestamp,
        args.tree_size,
        from_hex(args.root_hash),
        from_hex(args.signature),
    )
    return _emit(result, "STH", args.json)


def verify_sct_cmd(args: Namespace) -> int:
    """Execute the verify-sct command."""
    verifier = LogSigVerifier(resolve_public_key(args))
    result = verifier.verify_sct_signature(
        args.timestamp,
        ENTRY_TYPES[args.entry_type],
        read_certificate(args.cert),
        from_hex(args.signature),
    )
    return _emit(result, "SCT", args.json)
