"""
Error category manager.

Validated views over the built-in category tables.
"""

from typing import Dict, Iterable, List, Tuple

from web3_error_helper.chains.builtin import get_enabled_error_categories
from web3_error_helper.data.error_mappings import ERROR_MAPPINGS
from web3_error_helper.models.mapping import ErrorMapping

CATEGORY_MAPPINGS: Dict[str, Tuple[ErrorMapping, ...]] = {
    category: tuple(ErrorMapping.model_validate(entry) for entry in entries)
    for category, entries in ERROR_MAPPINGS.items()
}


def get_available_categories() -> List[str]:
    return list(CATEGORY_MAPPINGS)


def has_error_category(category: str) -> bool:
    return category in CATEGORY_MAPPINGS


def get_category_mappings(category: str) -> List[ErrorMapping]:
    """Mappings of one category, or an empty list for unknown categories."""
    return list(CATEGORY_MAPPINGS.get(category, ()))


def get_error_categories(chain: str) -> List[str]:
    """Names of the categories enabled on a built-in chain, by priority."""
    return [config.category for config in get_enabled_error_categories(chain)]


def load_category_mappings(categories: Iterable[str]) -> List[ErrorMapping]:
    """Concatenate the mappings of ``categories`` in the given order."""
    mappings: List[ErrorMapping] = []
    for category in categories:
        mappings.extend(CATEGORY_MAPPINGS.get(category, ()))
    return mappings


def get_all_category_mappings() -> List[ErrorMapping]:
    return load_category_mappings(CATEGORY_MAPPINGS)


def get_category_stats() -> Dict[str, int]:
    """Number of mappings per category."""
    return {category: len(mappings) for category, mappings in CATEGORY_MAPPINGS.items()}


def search_mappings(term: str) -> List[Tuple[str, ErrorMapping]]:
    """Find (category, mapping) pairs whose pattern or message contains ``term``."""
    needle = term.lower()
    return [
        (category, mapping)
        for category, mappings in CATEGORY_MAPPINGS.items()
        for mapping in mappings
        if needle in mapping.pattern.lower() or needle in mapping.message.lower()
    ]
