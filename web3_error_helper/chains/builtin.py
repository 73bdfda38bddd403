"""
Built-in chain queries.

Pure functions over the static chain registry.
"""

from typing import Dict, List, Optional

from web3_error_helper.data.chain_registry import CHAIN_REGISTRY
from web3_error_helper.models.chain import ChainConfig, ChainErrorConfig, ChainMetadata

BUILT_IN_CHAINS: Dict[str, ChainConfig] = {
    chain_id: ChainConfig.model_validate(raw) for chain_id, raw in CHAIN_REGISTRY.items()
}


def get_built_in_chains() -> List[str]:
    """Identifiers of every built-in chain, in registry order."""
    return list(BUILT_IN_CHAINS)


def is_built_in_chain(chain: str) -> bool:
    return chain in BUILT_IN_CHAINS


def get_chain_config(chain: str) -> Optional[ChainConfig]:
    return BUILT_IN_CHAINS.get(chain)


def get_chain_metadata(chain: str) -> Optional[ChainMetadata]:
    config = BUILT_IN_CHAINS.get(chain)
    return config.metadata if config else None


def get_enabled_error_categories(chain: str) -> List[ChainErrorConfig]:
    """Enabled error categories of a built-in chain, highest priority first.

    Returns an empty list for chains that are not built in.
    """
    config = BUILT_IN_CHAINS.get(chain)
    if config is None:
        return []
    enabled = [category for category in config.error_categories if category.enabled]
    return sorted(enabled, key=lambda category: category.priority, reverse=True)
