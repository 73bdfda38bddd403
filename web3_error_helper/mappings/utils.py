"""
Utilities for working with lists of error mappings.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from web3_error_helper.constants import CUSTOM_MAPPING_PRIORITY
from web3_error_helper.models.mapping import ErrorMapping

logger = logging.getLogger(__name__)


def sort_mappings_by_priority(mappings: Iterable[ErrorMapping]) -> List[ErrorMapping]:
    """Stable sort, highest priority first."""
    return sorted(mappings, key=lambda mapping: mapping.priority or 0, reverse=True)


def build_custom_mappings(custom_mappings: Optional[Dict[str, str]]) -> List[ErrorMapping]:
    """Turn a pattern-to-message dictionary into top-priority mappings.

    Entries with an empty pattern or message are skipped.
    """
    mappings: List[ErrorMapping] = []
    for pattern, message in (custom_mappings or {}).items():
        try:
            mappings.append(
                ErrorMapping(pattern=pattern, message=message, priority=CUSTOM_MAPPING_PRIORITY)
            )
        except ValidationError:
            logger.warning(f"Ignoring invalid custom mapping for pattern {pattern!r}")
    return mappings


def add_custom_mappings(
    mappings: List[ErrorMapping],
    custom_mappings: Optional[Dict[str, str]]
) -> List[ErrorMapping]:
    """Prepend per-call custom mappings to ``mappings``.

    For callers assembling their own candidate list; ``ErrorTranslator``
    matches per-call mappings on their own before loading chain mappings.

    Args:
        mappings: Already sorted mappings
        custom_mappings: Pattern-to-message dictionary

    Returns:
        A new list with the custom mappings first
    """
    return build_custom_mappings(custom_mappings) + list(mappings)


def filter_mappings_by_priority(mappings: Iterable[ErrorMapping], min_priority: int) -> List[ErrorMapping]:
    return [mapping for mapping in mappings if (mapping.priority or 0) >= min_priority]


def find_mappings_by_pattern(
    mappings: Iterable[ErrorMapping],
    pattern: str,
    exact: bool = False
) -> List[ErrorMapping]:
    """Find mappings whose pattern equals (or contains) ``pattern``, case-insensitively."""
    needle = pattern.lower()
    if exact:
        return [mapping for mapping in mappings if mapping.pattern.lower() == needle]
    return [mapping for mapping in mappings if needle in mapping.pattern.lower()]


def find_mappings_by_message(mappings: Iterable[ErrorMapping], text: str) -> List[ErrorMapping]:
    needle = text.lower()
    return [mapping for mapping in mappings if needle in mapping.message.lower()]


def get_unique_patterns(mappings: Iterable[ErrorMapping]) -> List[str]:
    """Distinct patterns in first-seen order."""
    return list(dict.fromkeys(mapping.pattern for mapping in mappings))


def get_mapping_stats(mappings: Iterable[ErrorMapping]) -> Dict[str, Any]:
    """Summary counts for a mapping list."""
    mappings = list(mappings)
    priorities = [mapping.priority or 0 for mapping in mappings]
    return {
        "total": len(mappings),
        "regex": sum(1 for mapping in mappings if mapping.is_regex),
        "unique_patterns": len(get_unique_patterns(mappings)),
        "max_priority": max(priorities) if priorities else 0,
        "min_priority": min(priorities) if priorities else 0,
    }


def validate_mapping(mapping: Union[ErrorMapping, Mapping, Any]) -> List[str]:
    """Return a list of problems with ``mapping``; empty when it is valid."""
    if isinstance(mapping, ErrorMapping):
        return []
    if not isinstance(mapping, Mapping):
        return ["mapping must be a dictionary"]
    try:
        ErrorMapping.model_validate(dict(mapping))
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg'].removeprefix('Value error, ')}"
            for error in e.errors()
        ]
    return []


def validate_mappings(mappings: Iterable[Any]) -> Dict[int, List[str]]:
    """Validate several mappings, keyed by the index of each invalid one."""
    problems: Dict[int, List[str]] = {}
    for index, mapping in enumerate(mappings):
        errors = validate_mapping(mapping)
        if errors:
            problems[index] = errors
    return problems


def merge_mappings(*groups: Iterable[ErrorMapping]) -> List[ErrorMapping]:
    """Merge mapping lists, keeping the highest-priority entry per pattern.

    Patterns are compared case-insensitively; the result is sorted by priority.
    """
    merged: Dict[str, ErrorMapping] = {}
    for group in groups:
        for mapping in group:
            key = mapping.pattern.lower()
            current = merged.get(key)
            if current is None or (mapping.priority or 0) > (current.priority or 0):
                merged[key] = mapping
    return sort_mappings_by_priority(merged.values())
