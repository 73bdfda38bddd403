"""
Mapping loader.

Assembles the candidate mappings for one chain: the custom chain's own
mappings, then the built-in categories the chain enables (every category
when the chain is not built in), then the detected ecosystem's patterns at
the lowest priority. The result is sorted by priority, highest first.
"""

import logging
from typing import Dict, List, Optional

from web3_error_helper.chains.builtin import is_built_in_chain
from web3_error_helper.chains.registry import CustomChainRegistry
from web3_error_helper.constants import ECOSYSTEM_PATTERN_PRIORITY
from web3_error_helper.mappings.categories import (
    get_all_category_mappings,
    get_error_categories,
    load_category_mappings,
)
from web3_error_helper.mappings.utils import sort_mappings_by_priority
from web3_error_helper.models.mapping import ErrorMapping

logger = logging.getLogger(__name__)


def ecosystem_mappings(patterns: Optional[Dict[str, str]]) -> List[ErrorMapping]:
    """Convert an adapter pattern table into lowest-priority mappings."""
    mappings: List[ErrorMapping] = []
    for pattern, message in (patterns or {}).items():
        if isinstance(pattern, str) and isinstance(message, str) and pattern.strip() and message.strip():
            mappings.append(
                ErrorMapping(pattern=pattern, message=message, priority=ECOSYSTEM_PATTERN_PRIORITY)
            )
    return mappings


def load_error_mappings(
    chain: str,
    custom_chains: CustomChainRegistry,
    ecosystem_patterns: Optional[Dict[str, str]] = None
) -> List[ErrorMapping]:
    """Load the sorted candidate mappings for ``chain``.

    Args:
        chain: Built-in or custom chain id; unrecognised ids get every category
        custom_chains: Registry consulted for custom chain mappings
        ecosystem_patterns: Patterns of a detected non-EVM ecosystem

    Returns:
        Mappings sorted by priority, highest first; ties keep load order
    """
    mappings: List[ErrorMapping] = []

    if custom_chains.has(chain):
        mappings.extend(custom_chains.get_error_mappings(chain))

    if is_built_in_chain(chain):
        mappings.extend(load_category_mappings(get_error_categories(chain)))
    else:
        mappings.extend(get_all_category_mappings())

    mappings.extend(ecosystem_mappings(ecosystem_patterns))

    logger.debug(f"Loaded {len(mappings)} mappings for chain '{chain}'")
    return sort_mappings_by_priority(mappings)
