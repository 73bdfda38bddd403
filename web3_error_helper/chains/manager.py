"""
Chain manager.

Unified queries across built-in and custom chains: availability, chain info,
discovery by chain id, symbol or name, and registry statistics.
"""

from typing import Any, Dict, List, Optional

from web3_error_helper.chains import builtin
from web3_error_helper.chains.registry import CustomChainRegistry
from web3_error_helper.models.chain import ChainMetadata


class ChainManager:
    """Read-only view over the built-in chains and a custom chain registry."""

    def __init__(self, custom_chains: CustomChainRegistry):
        self.custom_chains = custom_chains

    def get_available_chains(self) -> List[str]:
        """Custom chain ids followed by built-in chain ids."""
        custom = [config.chain_id for config in self.custom_chains.get_all()]
        return custom + builtin.get_built_in_chains()

    def get_built_in_chains(self) -> List[str]:
        return builtin.get_built_in_chains()

    def is_built_in_chain(self, chain: str) -> bool:
        return builtin.is_built_in_chain(chain)

    def is_custom_chain(self, chain: str) -> bool:
        return self.custom_chains.has(chain)

    def is_valid_chain(self, chain: str) -> bool:
        """Whether ``chain`` is a built-in or registered custom chain."""
        return self.is_built_in_chain(chain) or self.is_custom_chain(chain)

    def get_chain_info(self, chain: str) -> Optional[Dict[str, str]]:
        """Describe a chain as ``{"type": ..., "name": ...}``.

        Custom registrations shadow built-in chains with the same id.
        Returns None for unknown chains.
        """
        custom = self.custom_chains.get(chain)
        if custom is not None:
            return {"type": "custom", "name": custom.name}

        config = builtin.get_chain_config(chain)
        if config is not None:
            return {"type": "built-in", "name": config.metadata.name}

        return None

    def get_chain_metadata(self, chain: str) -> Optional[ChainMetadata]:
        return builtin.get_chain_metadata(chain)

    def find_chain_by_chain_id(self, chain_id: int) -> Optional[str]:
        """Find a built-in chain by its numeric network id."""
        for name, config in builtin.BUILT_IN_CHAINS.items():
            if config.metadata.chain_id == chain_id:
                return name
        return None

    def find_chains_by_symbol(self, symbol: str) -> List[str]:
        """Built-in chains whose native symbol matches, case-insensitively."""
        wanted = symbol.lower()
        return [
            name for name, config in builtin.BUILT_IN_CHAINS.items()
            if (config.metadata.symbol or "").lower() == wanted
        ]

    def search_chains_by_name(self, term: str) -> List[str]:
        """Chains (custom first) whose id or display name contains ``term``."""
        needle = term.lower()
        matches = [
            config.chain_id for config in self.custom_chains.get_all()
            if needle in config.chain_id.lower() or needle in config.name.lower()
        ]
        matches.extend(
            name for name, config in builtin.BUILT_IN_CHAINS.items()
            if needle in name or needle in config.metadata.name.lower()
        )
        return matches

    def get_chain_stats(self) -> Dict[str, Any]:
        """Counts of built-in and custom chains."""
        chains = self.get_available_chains()
        built_in = len(builtin.BUILT_IN_CHAINS)
        return {
            "total": len(chains),
            "built_in": built_in,
            "custom": len(chains) - built_in,
            "chains": chains,
        }
