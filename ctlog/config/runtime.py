"""
Runtime Configuration

Central configuration for key locations and logging.

The signing core itself takes already-loaded keys; this configuration is
consumed by the CLI and by services that wire a LogSigner / LogSigVerifier
from files on disk.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "CTLOG_"


@dataclass
class KeyConfig:
    """Where the log's key pair lives."""
    private_key_path: Optional[str] = None
    public_key_path: Optional[str] = None
    password: Optional[str] = None

    @property
    def password_bytes(self) -> Optional[bytes]:
        return self.password.encode("utf-8") if self.password else None


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    keys: KeyConfig = field(default_factory=KeyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - CTLOG_PRIVATE_KEY: Path to the PEM private key
        - CTLOG_PUBLIC_KEY: Path to the PEM public key
        - CTLOG_KEY_PASSWORD: Password protecting the private key
        - CTLOG_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
        - CTLOG_LOG_FILE: Also write logs to this file
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}PRIVATE_KEY"):
            overrides.setdefault("keys", {})["private_key_path"] = os.getenv(f"{ENV_PREFIX}PRIVATE_KEY")
        if os.getenv(f"{ENV_PREFIX}PUBLIC_KEY"):
            overrides.setdefault("keys", {})["public_key_path"] = os.getenv(f"{ENV_PREFIX}PUBLIC_KEY")
        if os.getenv(f"{ENV_PREFIX}KEY_PASSWORD"):
            overrides.setdefault("keys", {})["password"] = os.getenv(f"{ENV_PREFIX}KEY_PASSWORD")

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        keys_data = data.get("keys", {})
        logging_data = data.get("logging", {})

        keys = KeyConfig(**keys_data) if keys_data else KeyConfig()
        logging_config = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            keys=keys,
            logging=logging_config,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("keys", {}).items():
            setattr(new_config.keys, key, value)
        for key, value in overrides.get("logging", {}).items():
            setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary (the key password is never included)."""
        return {
            "keys": {
                "private_key_path": self.keys.private_key_path,
                "public_key_path": self.keys.public_key_path,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
