"""
Adapter registry.

Holds one adapter per ecosystem and resolves which adapter applies to an
error of unknown origin by probing the non-EVM adapters in registration
order, with EVM probed last.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from web3_error_helper.adapters.algorand import AlgorandAdapter
from web3_error_helper.adapters.cardano import CardanoAdapter
from web3_error_helper.adapters.cosmos import CosmosAdapter
from web3_error_helper.adapters.evm import EVMAdapter
from web3_error_helper.adapters.near import NearAdapter
from web3_error_helper.adapters.polkadot import PolkadotAdapter
from web3_error_helper.adapters.ripple import RippleAdapter
from web3_error_helper.adapters.solana import SolanaAdapter
from web3_error_helper.adapters.stellar import StellarAdapter
from web3_error_helper.adapters.tezos import TezosAdapter
from web3_error_helper.constants import BlockchainEcosystem
from web3_error_helper.utils.errors import AdapterError

logger = logging.getLogger(__name__)

EVM = BlockchainEcosystem.EVM.value

# Probe order for detection
DEFAULT_ADAPTER_CLASSES = (
    SolanaAdapter,
    CosmosAdapter,
    NearAdapter,
    CardanoAdapter,
    PolkadotAdapter,
    AlgorandAdapter,
    TezosAdapter,
    StellarAdapter,
    RippleAdapter,
)

REQUIRED_CAPABILITIES = (
    "extract_error_message",
    "matches_error_format",
    "get_error_patterns",
    "get_fallback_messages",
)


class AdapterRegistry:
    """Registry of ecosystem adapters."""

    def __init__(self):
        self._adapters: Dict[str, Any] = {
            cls.ecosystem: cls() for cls in DEFAULT_ADAPTER_CLASSES
        }
        self._custom_ecosystems: List[str] = []
        self._evm_override: Optional[Any] = None
        self._evm_adapters: Dict[Optional[Union[str, int]], EVMAdapter] = {}
        self.version = 0

    def detect_adapter(self, error: Any) -> Optional[Any]:
        """Find the adapter whose error format ``error`` matches.

        Args:
            error: The raw error

        Returns:
            The first matching non-EVM adapter, else the EVM adapter if it
            matches, else None
        """
        for adapter in self._adapters.values():
            if self._probe(adapter, error):
                return adapter

        evm_adapter = self.get_adapter(EVM)
        if self._probe(evm_adapter, error):
            return evm_adapter

        return None

    def _probe(self, adapter: Any, error: Any) -> bool:
        try:
            return bool(adapter.matches_error_format(error))
        except Exception:
            logger.debug(f"Adapter {adapter!r} failed while probing error format", exc_info=True)
            return False

    def get_adapter(self, ecosystem: str) -> Optional[Any]:
        """Get the adapter registered for ``ecosystem``."""
        if ecosystem == EVM:
            return self._evm_override or self.get_evm_adapter()
        return self._adapters.get(ecosystem)

    def get_evm_adapter(self, chain_id: Optional[Union[str, int]] = None) -> EVMAdapter:
        """Get the built-in EVM adapter for ``chain_id``, cached per chain id."""
        adapter = self._evm_adapters.get(chain_id)
        if adapter is None:
            adapter = EVMAdapter(chain_id)
            self._evm_adapters[chain_id] = adapter
        return adapter

    def register_adapter(self, adapter: Any) -> None:
        """Register an adapter, replacing any adapter for the same ecosystem.

        Args:
            adapter: An object providing the adapter capability set and an
                ``ecosystem`` attribute

        Raises:
            AdapterError: If the adapter lacks an ecosystem or a capability
        """
        ecosystem = getattr(adapter, "ecosystem", None)
        if not isinstance(ecosystem, str) or not ecosystem:
            raise AdapterError("Adapter must declare a non-empty 'ecosystem' string")

        missing = [
            name for name in REQUIRED_CAPABILITIES
            if not callable(getattr(adapter, name, None))
        ]
        if missing:
            raise AdapterError(
                f"Adapter for '{ecosystem}' is missing required methods: {', '.join(missing)}",
                ecosystem=ecosystem,
            )

        if ecosystem == EVM:
            self._evm_override = adapter
        else:
            if ecosystem not in self._custom_ecosystems:
                self._custom_ecosystems.append(ecosystem)
            self._adapters[ecosystem] = adapter

        self.version += 1
        logger.info(f"Registered adapter for ecosystem '{ecosystem}'")

    def unregister_adapter(self, ecosystem: str) -> bool:
        """Remove a custom adapter, restoring the built-in one if there is one.

        Returns:
            True if a custom adapter was removed, False otherwise
        """
        if ecosystem == EVM:
            if self._evm_override is None:
                return False
            self._evm_override = None
        elif ecosystem in self._custom_ecosystems:
            self._custom_ecosystems.remove(ecosystem)
            builtin = _builtin_adapter_class(ecosystem)
            if builtin is not None:
                self._adapters[ecosystem] = builtin()
            else:
                del self._adapters[ecosystem]
        else:
            return False

        self.version += 1
        logger.info(f"Unregistered adapter for ecosystem '{ecosystem}'")
        return True

    def get_supported_ecosystems(self) -> List[str]:
        """Ecosystems in detection order, EVM last."""
        return list(self._adapters) + [EVM]

    def get_all_adapters(self) -> List[Tuple[str, Any]]:
        """(ecosystem, adapter) pairs in detection order."""
        return [(ecosystem, self.get_adapter(ecosystem)) for ecosystem in self.get_supported_ecosystems()]

    def has_custom_adapter(self, ecosystem: str) -> bool:
        if ecosystem == EVM:
            return self._evm_override is not None
        return ecosystem in self._custom_ecosystems

    def clear_custom_adapters(self) -> None:
        """Drop every custom adapter and restore the built-in set."""
        for ecosystem in list(self._custom_ecosystems):
            self.unregister_adapter(ecosystem)
        if self._evm_override is not None:
            self.unregister_adapter(EVM)


def _builtin_adapter_class(ecosystem: str) -> Optional[type]:
    for cls in DEFAULT_ADAPTER_CLASSES:
        if cls.ecosystem == ecosystem:
            return cls
    return None
