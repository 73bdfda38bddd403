"""
Base chain adapter.

An adapter knows how one blockchain ecosystem shapes its errors: where the
human-readable text lives inside a structured error and which keywords or
keys identify an error as belonging to that ecosystem.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from web3_error_helper.constants import UNKNOWN_ERROR_MESSAGE
from web3_error_helper.data.ecosystem_patterns import (
    ECOSYSTEM_ERROR_PATTERNS,
    ECOSYSTEM_FALLBACK_MESSAGES,
)

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, bytes, int, float, bool)


def get_field(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an object attribute.

    Never raises; returns None for primitives, missing keys and attributes
    whose access fails.
    """
    if obj is None or isinstance(obj, _PRIMITIVES):
        return None
    try:
        if isinstance(obj, Mapping):
            return obj.get(key)
        return getattr(obj, key, None)
    except Exception:
        return None


def get_path(obj: Any, *keys: str) -> Any:
    """Follow a chain of keys through nested mappings or objects."""
    for key in keys:
        obj = get_field(obj, key)
        if obj is None:
            return None
    return obj


def get_text(obj: Any, *keys: str) -> Optional[str]:
    """Return the value at ``keys`` when it is a non-empty string."""
    value = get_path(obj, *keys)
    if isinstance(value, str) and value:
        return value
    return None


def has_field(obj: Any, key: str) -> bool:
    """Check whether a structured error carries ``key``."""
    if obj is None or isinstance(obj, _PRIMITIVES):
        return False
    try:
        if isinstance(obj, Mapping):
            return key in obj
        return hasattr(obj, key)
    except Exception:
        return False


class BaseChainAdapter(ABC):
    """Base class for ecosystem adapters.

    Subclasses declare the string keywords and structured-error keys used to
    recognise their errors, and override :meth:`extract_specific_message` to
    read ecosystem-specific field paths. Extraction is total: any failure
    degrades to the generic field search and finally to the
    ``"Unknown error occurred"`` sentinel.
    """

    ecosystem: ClassVar[str]
    name: ClassVar[str]
    string_keywords: ClassVar[Tuple[str, ...]] = ()
    field_keys: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, chain_id: Optional[Union[str, int]] = None):
        self.chain_id = chain_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ecosystem={self.ecosystem!r}, chain_id={self.chain_id!r})"

    def extract_error_message(self, error: Any) -> str:
        """Extract a plain-text message from an error of any shape.

        Args:
            error: A string, exception, mapping or arbitrary object

        Returns:
            The extracted message, or the unknown-error sentinel
        """
        if isinstance(error, str):
            return error

        try:
            message = self.extract_specific_message(error)
            if message:
                return message
        except Exception:
            logger.debug(f"{self.name} adapter failed to read ecosystem fields", exc_info=True)

        return self.extract_message_from_error(error)

    def extract_specific_message(self, error: Any) -> Optional[str]:
        """Read ecosystem-specific field paths. Override in subclasses."""
        return None

    def extract_message_from_error(self, error: Any) -> str:
        """Generic extraction shared by every adapter."""
        for path in (("message",), ("error",), ("error", "message"),
                     ("reason",), ("details",), ("data", "message")):
            message = get_text(error, *path)
            if message:
                return message

        if isinstance(error, BaseException):
            text = str(error)
            if text:
                return text

        return UNKNOWN_ERROR_MESSAGE

    def matches_error_format(self, error: Any) -> bool:
        """Cheap probe for whether ``error`` belongs to this ecosystem.

        Strings (and exception messages) are checked for ecosystem keywords;
        structured errors for ecosystem-specific keys.
        """
        if isinstance(error, str):
            return self._matches_text(error)

        if isinstance(error, BaseException) and self._matches_text(str(error)):
            return True

        return any(has_field(error, key) for key in self.field_keys)

    def _matches_text(self, text: str) -> bool:
        return any(keyword in text for keyword in self.string_keywords)

    @abstractmethod
    def get_error_patterns(self) -> Dict[str, str]:
        """Pattern-to-message table for this ecosystem."""

    def get_fallback_messages(self) -> Dict[str, str]:
        """Fallback messages keyed by error type."""
        return dict(ECOSYSTEM_FALLBACK_MESSAGES.get(self.ecosystem, {}))


class EcosystemAdapter(BaseChainAdapter):
    """Adapter whose patterns come from the shared ecosystem table."""

    def get_error_patterns(self) -> Dict[str, str]:
        return dict(ECOSYSTEM_ERROR_PATTERNS.get(self.ecosystem, {}))
