"""
Pattern matcher.

Non-regex patterns match when they equal the whole message, ignoring case.
Regex patterns are searched case-insensitively; a pattern that does not
compile degrades to a case-insensitive substring test.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, Optional, Pattern

from web3_error_helper.models.mapping import ErrorMapping

logger = logging.getLogger(__name__)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> Optional[Pattern]:
    """Compile ``pattern`` case-insensitively, or None if it is invalid."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        logger.warning(f"Invalid regex pattern {pattern!r} ({e}); using substring matching")
        return None


def matches_pattern(message: str, mapping: ErrorMapping) -> bool:
    """Check whether ``message`` matches one mapping."""
    if mapping.is_regex:
        compiled = compile_pattern(mapping.pattern)
        if compiled is not None:
            return compiled.search(message) is not None
        return mapping.pattern.lower() in message.lower()

    return message.lower() == mapping.pattern.lower()


def find_best_match(message: str, mappings: Iterable[ErrorMapping]) -> Optional[ErrorMapping]:
    """First mapping in ``mappings`` that matches ``message``.

    ``mappings`` must already be in priority order.
    """
    for mapping in mappings:
        if matches_pattern(message, mapping):
            return mapping
    return None
