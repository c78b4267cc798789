"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m ctlog_cli keygen --out PATH [--public-out PATH] [--force] [--json]
    python -m ctlog_cli sign-sth --timestamp N --tree-size N --root-hash HEX [--key PATH] [--json]
    python -m ctlog_cli verify-sth --timestamp N --tree-size N --root-hash HEX --signature HEX [--key PATH] [--json]
    python -m ctlog_cli sign-sct --timestamp N --entry-type {x509,precert} --cert PATH [--key PATH] [--json]
    python -m ctlog_cli verify-sct --timestamp N --entry-type {x509,precert} --cert PATH --signature HEX [--key PATH] [--json]
    python -m ctlog_cli config --show

Environment Variables:
    CTLOG_PRIVATE_KEY       Path to the PEM private key
    CTLOG_PUBLIC_KEY        Path to the PEM public key
    CTLOG_KEY_PASSWORD      Password protecting the private key
    CTLOG_LOG_LEVEL         Log level (default: INFO)
    CTLOG_LOG_FILE          Also write logs to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from ctlog.config import RuntimeConfig
from ctlog.schemas.errors import CtLogException
from ctlog_cli.commands import keygen, sign, verify
from ctlog_cli.commands.common import (
    ENTRY_TYPES,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    report_error,
)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_common_flags(parser: argparse.ArgumentParser, *, key_help: str) -> None:
    parser.add_argument(
        "--key", "-k",
        type=str,
        default=None,
        help=key_help,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )


def _add_sth_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--timestamp", type=int, required=True, help="STH timestamp (ms since epoch)")
    parser.add_argument("--tree-size", type=int, required=True, help="Number of entries in the tree")
    parser.add_argument("--root-hash", type=str, required=True, help="Hex-encoded 32-byte root hash")


def _add_sct_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--timestamp", type=int, required=True, help="SCT timestamp (ms since epoch)")
    parser.add_argument(
        "--entry-type",
        type=str,
        choices=sorted(ENTRY_TYPES),
        default="x509",
        help="Kind of entry (default: x509)",
    )
    parser.add_argument("--cert", type=str, required=True, help="File holding the DER entry to sign")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ctlog",
        description="Sign and verify Certificate Transparency SCTs and STHs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- keygen command ---
    keygen_parser = subparsers.add_parser(
        "keygen",
        help="Generate a P-256 log key pair",
        description="Write a new PEM key pair and print the resulting log ID.",
    )
    keygen_parser.add_argument(
        "--out", "-o",
        type=str,
        required=True,
        help="Output path for the private key",
    )
    keygen_parser.add_argument(
        "--public-out",
        type=str,
        default=None,
        help="Output path for the public key (default: <out stem>.pub.pem)",
    )
    keygen_parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite an existing private key file",
    )
    keygen_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    keygen_parser.set_defaults(func=keygen.keygen_cmd)

    # --- sign-sth command ---
    sign_sth_parser = subparsers.add_parser(
        "sign-sth",
        help="Sign a tree head",
        description="Sign (timestamp, tree size, root hash) and print the DigitallySigned as hex.",
    )
    _add_sth_fields(sign_sth_parser)
    _add_common_flags(sign_sth_parser, key_help="PEM private key (default: CTLOG_PRIVATE_KEY)")
    sign_sth_parser.set_defaults(func=sign.sign_sth_cmd)

    # --- verify-sth command ---
    verify_sth_parser = subparsers.add_parser(
        "verify-sth",
        help="Verify a tree head signature",
        description="Check a hex DigitallySigned against (timestamp, tree size, root hash).",
    )
    _add_sth_fields(verify_sth_parser)
    verify_sth_parser.add_argument("--signature", type=str, required=True, help="Hex-encoded DigitallySigned")
    _add_common_flags(verify_sth_parser, key_help="PEM public (or private) key (default: CTLOG_PUBLIC_KEY)")
    verify_sth_parser.set_defaults(func=verify.verify_sth_cmd)

    # --- sign-sct command ---
    sign_sct_parser = subparsers.add_parser(
        "sign-sct",
        help="Sign a certificate timestamp",
        description="Sign (timestamp, entry type, certificate) and print the DigitallySigned as hex.",
    )
    _add_sct_fields(sign_sct_parser)
    _add_common_flags(sign_sct_parser, key_help="PEM private key (default: CTLOG_PRIVATE_KEY)")
    sign_sct_parser.set_defaults(func=sign.sign_sct_cmd)

    # --- verify-sct command ---
    verify_sct_parser = subparsers.add_parser(
        "verify-sct",
        help="Verify a certificate timestamp signature",
        description="Check a hex DigitallySigned against (timestamp, entry type, certificate).",
    )
    _add_sct_fields(verify_sct_parser)
    verify_sct_parser.add_argument("--signature", type=str, required=True, help="Hex-encoded DigitallySigned")
    _add_common_flags(verify_sct_parser, key_help="PEM public (or private) key (default: CTLOG_PUBLIC_KEY)")
    verify_sct_parser.set_defaults(func=verify.verify_sct_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
        description="Print the configuration after file and environment overrides.",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def load_config(config_path: Path | None) -> RuntimeConfig:
    """Load configuration from a YAML file (if given) with env overrides on top."""
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()
    return RuntimeConfig.from_env()


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: ctlog config --show")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except CtLogException as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        report_error(e, getattr(args, "json", False))
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
