"""
Error handling utilities for Web3 Error Helper.

This module defines the exception hierarchy raised by the registration and
configuration APIs. Translation requests never raise these to the caller;
they are converted into fallback results by the translator.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """Error codes for Web3 Error Helper."""
    # General errors
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    VALIDATION_ERROR = 1002

    # Registry errors
    CHAIN_VALIDATION_ERROR = 2000
    DUPLICATE_CHAIN_ERROR = 2001
    ADAPTER_ERROR = 2002

    # Pipeline errors
    TRANSLATION_ERROR = 3000


class Web3ErrorHelperError(Exception):
    """Base exception class for all Web3 Error Helper errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new Web3ErrorHelperError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        formatted_message = f"[{error_code.name}] {message}"
        if details:
            formatted_message += f" - Details: {details}"

        super().__init__(formatted_message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary."""
        return {
            "error": self.error_code.name,
            "code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(Web3ErrorHelperError):
    """Error raised for invalid settings or registration input."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.CONFIGURATION_ERROR
    ):
        super().__init__(message, error_code, details)


class ChainValidationError(ConfigurationError):
    """Error raised when a custom chain or one of its mappings is invalid."""

    def __init__(self, message: str, chain_id: Optional[str] = None):
        details = {"chain_id": chain_id} if chain_id else None
        super().__init__(message, details, ErrorCode.CHAIN_VALIDATION_ERROR)
        self.chain_id = chain_id


class DuplicateChainError(ConfigurationError):
    """Error raised when a custom chain id is registered twice."""

    def __init__(self, chain_id: str):
        super().__init__(
            f"Chain '{chain_id}' is already registered",
            error_code=ErrorCode.DUPLICATE_CHAIN_ERROR,
        )
        self.chain_id = chain_id


class AdapterError(ConfigurationError):
    """Error raised when an adapter cannot be registered."""

    def __init__(self, message: str, ecosystem: Optional[str] = None):
        details = {"ecosystem": ecosystem} if ecosystem else None
        super().__init__(message, details, ErrorCode.ADAPTER_ERROR)
        self.ecosystem = ecosystem


class TranslationError(Web3ErrorHelperError):
    """Internal failure inside the translation pipeline."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None
    ):
        details = {"original_error": str(original_error)} if original_error else None
        super().__init__(message, ErrorCode.TRANSLATION_ERROR, details)
        self.original_error = original_error
