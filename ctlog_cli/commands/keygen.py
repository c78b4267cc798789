"""
CLI Keygen Command

Generate a P-256 key pair for a log and write it as PEM.

Usage:
    ctlog keygen --out log-key.pem [--public-out log-pub.pem] [--json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from ctlog.crypto.hashing import to_hex
from ctlog.crypto.keys import generate_private_key, log_id, write_key_pair
from ctlog_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, print_json


logger = logging.getLogger(__name__)


def keygen_cmd(args: Namespace) -> int:
    """
    Execute the keygen command.

    Returns:
        Exit code
    """
    private_path = Path(args.out)
    if args.public_out:
        public_path = Path(args.public_out)
    else:
        public_path = private_path.with_name(private_path.stem + ".pub.pem")

    if private_path.exists() and not args.force:
        print(f"Error: Key file already exists: {private_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    config = getattr(args, "runtime_config", None)
    password = config.keys.password_bytes if config else None

    key = generate_private_key()
    write_key_pair(key, private_path, public_path, password=password)
    key_id = to_hex(log_id(key.public_key()))
    logger.info("Wrote key pair %s / %s", private_path, public_path)

    if args.json:
        print_json({
            "private_key": str(private_path),
            "public_key": str(public_path),
            "log_id": key_id,
        })
    else:
        print(f"private_key: {private_path}")
        print(f"public_key: {public_path}")
        print(f"log_id: {key_id}")
    return EXIT_SUCCESS
