"""
Chain registries and queries for the Web3 Error Helper.
"""

from web3_error_helper.chains.builtin import (
    BUILT_IN_CHAINS,
    get_built_in_chains,
    get_chain_config,
    get_enabled_error_categories,
    is_built_in_chain,
)
from web3_error_helper.chains.registry import CustomChainRegistry
from web3_error_helper.chains.manager import ChainManager

__all__ = [
    "BUILT_IN_CHAINS",
    "get_built_in_chains",
    "get_chain_config",
    "get_enabled_error_categories",
    "is_built_in_chain",
    "CustomChainRegistry",
    "ChainManager",
]
