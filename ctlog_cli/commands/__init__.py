"""
CLI command modules.
"""

from ctlog_cli.commands import keygen, sign, verify

__all__ = ["keygen", "sign", "verify"]
