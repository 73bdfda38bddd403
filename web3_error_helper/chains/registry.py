"""
Custom chain registry.

Runtime registrations of chains that are not built in, each with its own
error mappings and optional fallback messages.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from web3_error_helper.models.mapping import CustomChainConfig, CustomFallbacks, ErrorMapping
from web3_error_helper.utils.errors import ChainValidationError, DuplicateChainError

logger = logging.getLogger(__name__)


def format_validation_error(exc: ValidationError) -> str:
    """Render a pydantic error as ``path: reason`` pairs.

    Locations use the camelCase field names, with list indexes in brackets,
    e.g. ``errorMappings[0].pattern: must be a non-empty string``.
    """
    problems = []
    for error in exc.errors():
        path = ""
        for part in error["loc"]:
            if isinstance(part, int):
                path += f"[{part}]"
            else:
                path += f".{part}" if path else str(part)
        reason = error["msg"].removeprefix("Value error, ")
        problems.append(f"{path}: {reason}" if path else reason)
    return "; ".join(problems)


class CustomChainRegistry:
    """In-memory registry of custom chains keyed by chain id."""

    def __init__(self):
        self._chains: Dict[str, CustomChainConfig] = {}
        self.version = 0

    def register(self, config: Union[CustomChainConfig, Mapping]) -> CustomChainConfig:
        """Register a custom chain.

        Args:
            config: A ``CustomChainConfig`` or a mapping with the same fields
                (snake_case or camelCase keys)

        Returns:
            The validated configuration as stored

        Raises:
            ChainValidationError: If the configuration is invalid
            DuplicateChainError: If the chain id is already registered
        """
        if not isinstance(config, CustomChainConfig):
            if not isinstance(config, Mapping):
                raise ChainValidationError(
                    f"Custom chain configuration must be a mapping, got {type(config).__name__}"
                )
            try:
                config = CustomChainConfig.model_validate(dict(config))
            except ValidationError as e:
                chain_id = config.get("chainId", config.get("chain_id"))
                raise ChainValidationError(
                    f"Invalid custom chain configuration: {format_validation_error(e)}",
                    chain_id=chain_id if isinstance(chain_id, str) else None,
                ) from e

        if config.chain_id in self._chains:
            raise DuplicateChainError(config.chain_id)

        self._chains[config.chain_id] = config
        self.version += 1
        logger.info(
            f"Registered custom chain '{config.chain_id}' with {len(config.error_mappings)} mappings"
        )
        return config

    def unregister(self, chain_id: str) -> bool:
        """Remove a custom chain. Returns False if it was not registered."""
        if chain_id not in self._chains:
            return False
        del self._chains[chain_id]
        self.version += 1
        logger.info(f"Unregistered custom chain '{chain_id}'")
        return True

    def get(self, chain_id: str) -> Optional[CustomChainConfig]:
        return self._chains.get(chain_id)

    def get_all(self) -> List[CustomChainConfig]:
        return list(self._chains.values())

    def has(self, chain_id: Any) -> bool:
        return isinstance(chain_id, str) and chain_id in self._chains

    def clear(self) -> None:
        if self._chains:
            self._chains.clear()
            self.version += 1
            logger.info("Cleared all custom chains")

    def get_error_mappings(self, chain_id: str) -> List[ErrorMapping]:
        """Mappings of a custom chain, or an empty list for unknown chains."""
        config = self._chains.get(chain_id)
        return list(config.error_mappings) if config else []

    def get_custom_fallbacks(self, chain_id: str) -> Optional[CustomFallbacks]:
        config = self._chains.get(chain_id)
        return config.custom_fallbacks if config else None

    def __contains__(self, chain_id: Any) -> bool:
        return self.has(chain_id)

    def __len__(self) -> int:
        return len(self._chains)
