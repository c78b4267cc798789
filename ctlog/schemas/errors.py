"""
Schemas & Canonicalization
File: errors.py

Purpose: Standard error taxonomy for the log signing core.
Defines the serializer's failure kinds, a Pydantic model for structured
error communication, and Python exceptions for control flow.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the package."""

    # Canonicalization & Wire Format Errors
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"

    # Configuration Errors
    UNSUPPORTED_KEY_TYPE = "UNSUPPORTED_KEY_TYPE"
    KEY_LOAD_ERROR = "KEY_LOAD_ERROR"

    # Caller Contract Errors
    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"

    # Signing Outcomes
    SIGNING_FAILED = "SIGNING_FAILED"


class SerializeResult(str, Enum):
    """Failure kinds reported by the signing-input serializer."""

    INVALID_ENTRY_TYPE = "INVALID_ENTRY_TYPE"
    EMPTY_CERTIFICATE = "EMPTY_CERTIFICATE"
    CERTIFICATE_TOO_LONG = "CERTIFICATE_TOO_LONG"
    INVALID_HASH_LENGTH = "INVALID_HASH_LENGTH"


class DeserializeResult(str, Enum):
    """Failure kinds reported when parsing a wire-format DigitallySigned."""

    INPUT_TOO_SHORT = "INPUT_TOO_SHORT"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"
    INVALID_HASH_ALGORITHM = "INVALID_HASH_ALGORITHM"
    INVALID_SIGNATURE_ALGORITHM = "INVALID_SIGNATURE_ALGORITHM"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class CtLogError(BaseModel):
    """
    Base error model for structured error communication.

    Used to report a non-OK sign/verify outcome to callers that want a
    serializable record (e.g. the CLI's JSON output) instead of an exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.SIGNING_FAILED],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CtLogException(Exception):
    """
    Base exception for all log signing core errors.

    This exception carries structured error information and can be
    converted to a CtLogError model for reporting.
    """

    def __init__(
        self,
        message: str,
        code: str = "CTLOG_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> CtLogError:
        """Convert this exception to a CtLogError model."""
        return CtLogError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class SerializationException(CtLogException):
    """Exception raised when a signing input cannot be canonicalized."""

    def __init__(
        self,
        result: SerializeResult,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["result"] = result.value
        super().__init__(
            message=message,
            code=ErrorCodes.SERIALIZATION_ERROR,
            details=full_details,
            retryable=False,
        )
        self.result = result


class DeserializationException(CtLogException):
    """Exception raised when a wire-format signature envelope is malformed."""

    def __init__(
        self,
        result: DeserializeResult,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["result"] = result.value
        super().__init__(
            message=message,
            code=ErrorCodes.DESERIALIZATION_ERROR,
            details=full_details,
            retryable=False,
        )
        self.result = result


class UnsupportedKeyTypeException(CtLogException):
    """Raised when a signer or verifier is built around an unsupported key."""

    def __init__(
        self,
        message: str,
        key_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key_type:
            full_details["key_type"] = key_type
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_KEY_TYPE,
            details=full_details,
            retryable=False,
        )


class KeyLoadException(CtLogException):
    """Raised when key material cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_LOAD_ERROR,
            details=full_details,
            retryable=False,
        )


class ContractViolationException(CtLogException):
    """Raised when a caller breaks a documented precondition (a bug, not bad data)."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_name:
            full_details["field"] = field_name
        super().__init__(
            message=message,
            code=ErrorCodes.CONTRACT_VIOLATION,
            details=full_details,
            retryable=False,
        )
