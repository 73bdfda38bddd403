"""
Error mapping loading and matching for the Web3 Error Helper.
"""

from web3_error_helper.mappings.loader import load_error_mappings
from web3_error_helper.mappings.matcher import find_best_match, matches_pattern
from web3_error_helper.mappings.utils import add_custom_mappings, sort_mappings_by_priority

__all__ = [
    "load_error_mappings",
    "find_best_match",
    "matches_pattern",
    "add_custom_mappings",
    "sort_mappings_by_priority",
]
