"""
CLI Sign Commands

Sign an STH or an SCT from raw fields and print the wire-encoded
DigitallySigned as hex.

Usage:
    ctlog sign-sth --timestamp N --tree-size N --root-hash HEX [--key PATH] [--json]
    ctlog sign-sct --timestamp N --entry-type x509 --cert PATH [--key PATH] [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from ctlog.crypto import LogSigner, SignOutcome
from ctlog.crypto.hashing import from_hex, to_hex
from ctlog.schemas.errors import CtLogException, ErrorCodes
from ctlog_cli.commands.common import (
    ENTRY_TYPES,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    print_json,
    read_certificate,
    report_error,
    resolve_private_key,
)


logger = logging.getLogger(__name__)


def _emit(outcome: SignOutcome, what: str, output_json: bool) -> int:
    if not outcome.ok:
        logger.warning("%s signing refused: %s", what, outcome.result.value)
        report_error(
            CtLogException(
                code=ErrorCodes.SIGNING_FAILED,
                message=f"Cannot sign {what}: {outcome.result.value}",
                details={"result": outcome.result.value},
            ),
            output_json,
        )
        return EXIT_RUNTIME_ERROR

    signature_hex = to_hex(outcome.signature)
    if output_json:
        print_json({"ok": True, "result": outcome.result.value, "signature": signature_hex})
    else:
        print(f"signature: {signature_hex}")
    return EXIT_SUCCESS


def sign_sth_cmd(args: Namespace) -> int:
    """Execute the sign-sth command."""
    signer = LogSigner(resolve_private_key(args))
    outcome = signer.sign_tree_head(
        args.timestamp,
        args.tree_size,
        from_hex(args.root_hash),
    )
    return _emit(outcome, "STH", args.json)


def sign_sct_cmd(args: Namespace) -> int:
    """Execute the sign-sct command."""
    signer = LogSigner(resolve_private_key(args))
    outcome = signer.sign_certificate_timestamp(
        args.timestamp,
        ENTRY_TYPES[args.entry_type],
        read_certificate(args.cert),
    )
    return _emit(outcome, "SCT", args.json)
