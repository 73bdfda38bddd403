"""
Translation request and result models for the Web3 Error Helper.

``TranslateErrorOptions`` is a Pydantic model so option dictionaries written
in either snake_case or camelCase validate the same way. Results are plain
dataclasses: they are return values only and are never validated.
"""

import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorSeverity(str, Enum):
    """Severity classification attached to a translation result."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TranslateErrorOptions(BaseModel):
    """
    Model for the options accepted by ``translate_error``.

    ``chain`` is resolved against the configured default chain when omitted.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    chain: Optional[str] = None
    ecosystem: Optional[str] = None
    fallback_message: Optional[str] = Field(default=None, alias="fallbackMessage")
    include_original_error: bool = Field(default=False, alias="includeOriginalError")
    custom_mappings: Optional[Dict[str, str]] = Field(default=None, alias="customMappings")
    language: Optional[str] = None
    auto_detect_language: bool = Field(default=False, alias="autoDetectLanguage")
    fallback_language: Optional[str] = Field(default=None, alias="fallbackLanguage")
    custom_locales: Optional[Dict[str, Dict[str, Any]]] = Field(default=None, alias="customLocales")


@dataclass
class ErrorContext:
    """Diagnostic context for a translation result."""
    chain: str
    ecosystem: str
    language: str
    severity: ErrorSeverity
    error_type: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ErrorTranslationResult:
    """Outcome of one translation.

    ``translated`` is True only when a mapping produced ``message``.
    ``context`` carries a timestamp and is excluded from equality so two
    identical calls compare equal.
    """
    message: str
    translated: bool
    chain: str
    original_error: Optional[Any] = None
    retryable: bool = False
    fallback_used: bool = False
    context: Optional[ErrorContext] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary, omitting unset optional fields."""
        result: Dict[str, Any] = {
            "message": self.message,
            "translated": self.translated,
            "chain": self.chain,
            "retryable": self.retryable,
            "fallback_used": self.fallback_used,
        }
        if self.original_error is not None:
            result["original_error"] = self.original_error
        if self.context is not None:
            result["context"] = asdict(self.context)
        return result
