"""
Error type detection and fallback resolution.

When no mapping matches, the extracted message is classified into a coarse
error type by keyword search and the fallback message for that type is
returned. Resolution is total: it always yields a non-empty string.
"""

from typing import List, Optional

from web3_error_helper.constants import (
    DEFAULT_FALLBACK_MESSAGES,
    ERROR_TYPE_KEYWORDS,
    FALLBACK_KEY_BY_TYPE,
    ErrorType,
)
from web3_error_helper.models.mapping import CustomFallbacks


def detect_error_type(message: str) -> Optional[ErrorType]:
    """Classify ``message``; the first type with a matching keyword wins.

    Args:
        message: Extracted error message

    Returns:
        The detected ErrorType, or None if no keyword matches
    """
    text = message.lower()
    for error_type, keywords in ERROR_TYPE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return error_type
    return None


def is_error_type(message: str, error_type: ErrorType) -> bool:
    """Whether ``message`` contains any keyword of ``error_type``."""
    text = message.lower()
    for candidate, keywords in ERROR_TYPE_KEYWORDS:
        if candidate == error_type:
            return any(keyword in text for keyword in keywords)
    return False


def get_matching_error_types(message: str) -> List[ErrorType]:
    """Every error type whose keywords occur in ``message``, in check order."""
    return [
        error_type for error_type, _ in ERROR_TYPE_KEYWORDS
        if is_error_type(message, error_type)
    ]


def get_fallback_key(error_type: Optional[ErrorType]) -> str:
    """Fallback table key for a detected type (``generic`` when undetected)."""
    if error_type is None:
        return "generic"
    return FALLBACK_KEY_BY_TYPE.get(error_type, "generic")


def get_type_specific_fallback(
    custom_fallbacks: Optional[CustomFallbacks],
    error_type: Optional[ErrorType]
) -> Optional[str]:
    """A custom chain's fallback for exactly the detected type, if set."""
    if custom_fallbacks is None:
        return None
    key = get_fallback_key(error_type)
    if key == "generic":
        return None
    return custom_fallbacks.get(key)


def get_custom_fallback(
    custom_fallbacks: Optional[CustomFallbacks],
    error_type: Optional[ErrorType]
) -> Optional[str]:
    """A custom chain's fallback for the detected type, else its generic one."""
    if custom_fallbacks is None:
        return None
    return get_type_specific_fallback(custom_fallbacks, error_type) or custom_fallbacks.get("generic")


def get_default_fallback(error_type: Optional[ErrorType]) -> str:
    return DEFAULT_FALLBACK_MESSAGES[get_fallback_key(error_type)]


def resolve_fallback_message(
    message: str,
    fallback_message: Optional[str] = None,
    custom_fallbacks: Optional[CustomFallbacks] = None
) -> str:
    """Resolve the fallback for an unmatched message.

    Args:
        message: Extracted error message, used for type detection
        fallback_message: Caller-supplied override, always wins when set
        custom_fallbacks: Fallbacks of the target custom chain, if any

    Returns:
        The explicit fallback, else the custom chain fallback, else the
        built-in default for the detected type
    """
    if fallback_message:
        return fallback_message

    error_type = detect_error_type(message)
    return get_custom_fallback(custom_fallbacks, error_type) or get_default_fallback(error_type)
