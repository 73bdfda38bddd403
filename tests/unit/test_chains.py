"""Unit tests for the chain registries.

This module tests the built-in chain queries, the custom chain registry and
the ChainManager view over both.
"""

import pytest

from web3_error_helper.chains import (
    ChainManager,
    get_built_in_chains,
    get_chain_config,
    get_enabled_error_categories,
    is_built_in_chain,
)
from web3_error_helper.constants import SupportedChain
from web3_error_helper.models import CustomChainConfig, ErrorMapping
from web3_error_helper.utils.errors import (
    ChainValidationError,
    ConfigurationError,
    DuplicateChainError,
)


class TestBuiltInChains:
    """Test suite for the built-in chain queries."""

    def test_built_in_chains(self):
        assert get_built_in_chains() == [
            "ethereum", "polygon", "arbitrum", "optimism", "bsc", "avalanche", "fantom", "base",
        ]

    def test_is_built_in_chain(self):
        assert is_built_in_chain("polygon") is True
        assert is_built_in_chain(SupportedChain.BASE) is True
        assert is_built_in_chain("my-l2") is False

    def test_chain_metadata(self):
        config = get_chain_config("polygon")

        assert config.metadata.chain_id == 137
        assert config.metadata.symbol == "MATIC"

    def test_enabled_categories_sorted_by_priority(self):
        """Test get_enabled_error_categories returns the highest priority first."""
        categories = get_enabled_error_categories("ethereum")

        assert [category.category for category in categories] == [
            "erc20", "gas", "wallet", "network", "transaction", "evm", "contract",
        ]
        assert get_enabled_error_categories("unknown-chain") == []


class TestCustomChainRegistry:
    """Test suite for CustomChainRegistry."""

    def test_register_from_camel_case_mapping(self, custom_chain_registry, custom_chain_config):
        """Test register with a dictionary using camelCase keys."""
        # Execute
        config = custom_chain_registry.register(custom_chain_config)

        # Verify
        assert isinstance(config, CustomChainConfig)
        assert config.chain_id == "test-chain"
        assert config.is_evm_compatible is True
        assert config.error_mappings[1].is_regex is True
        assert config.error_mappings[1].priority == 0
        assert custom_chain_registry.get("test-chain") is config
        assert custom_chain_registry.has("test-chain")
        assert "test-chain" in custom_chain_registry
        assert len(custom_chain_registry) == 1

    def test_register_model_instance(self, custom_chain_registry):
        config = CustomChainConfig(
            chain_id="model-chain",
            name="Model Chain",
            error_mappings=[ErrorMapping(pattern="boom", message="It went boom")],
        )

        assert custom_chain_registry.register(config) is config
        assert custom_chain_registry.get_all() == [config]

    def test_duplicate_chain(self, custom_chain_registry, custom_chain_config):
        """Test register rejects a chain id that is already registered."""
        # Setup
        custom_chain_registry.register(custom_chain_config)

        # Execute
        with pytest.raises(DuplicateChainError) as exc_info:
            custom_chain_registry.register(custom_chain_config)

        # Verify
        assert exc_info.value.message == "Chain 'test-chain' is already registered"
        assert isinstance(exc_info.value, ConfigurationError)
        assert len(custom_chain_registry) == 1

    @pytest.mark.parametrize("config, fragment", [
        ({"chainId": "", "name": "x", "errorMappings": []}, "chainId"),
        ({"chainId": "c", "name": "   ", "errorMappings": []}, "name"),
        ({"chainId": "c", "name": "x", "errorMappings": "not-a-list"}, "errorMappings"),
        ({"chainId": "c", "name": "x"}, "errorMappings"),
        ({"chainId": "c", "name": "x", "errorMappings": [{"pattern": "", "message": "m"}]},
         "errorMappings[0].pattern"),
        ({"chainId": "c", "name": "x", "errorMappings": [{"pattern": "p", "message": "ok"},
                                                         {"pattern": "q"}]},
         "errorMappings[1].message"),
    ])
    def test_invalid_configurations(self, custom_chain_registry, config, fragment):
        """Test register rejects invalid configurations without committing state."""
        # Execute
        with pytest.raises(ChainValidationError) as exc_info:
            custom_chain_registry.register(config)

        # Verify
        assert exc_info.value.message.startswith("Invalid custom chain configuration")
        assert fragment in exc_info.value.message
        assert len(custom_chain_registry) == 0
        assert custom_chain_registry.version == 0

    def test_non_mapping_configuration(self, custom_chain_registry):
        with pytest.raises(ChainValidationError):
            custom_chain_registry.register("test-chain")

    def test_unregister(self, custom_chain_registry, custom_chain_config):
        """Test unregister returns whether a chain was removed."""
        custom_chain_registry.register(custom_chain_config)

        assert custom_chain_registry.unregister("test-chain") is True
        assert custom_chain_registry.unregister("test-chain") is False
        assert custom_chain_registry.get("test-chain") is None

    def test_defaults_for_unknown_chains(self, custom_chain_registry):
        assert custom_chain_registry.get_error_mappings("nope") == []
        assert custom_chain_registry.get_custom_fallbacks("nope") is None
        assert custom_chain_registry.has(None) is False

    def test_custom_fallbacks(self, custom_chain_registry, custom_chain_config):
        custom_chain_registry.register(custom_chain_config)

        fallbacks = custom_chain_registry.get_custom_fallbacks("test-chain")

        assert fallbacks.get("network") == "Test Chain network is unreachable."
        assert fallbacks.get("wallet") is None

    def test_version_tracks_mutations(self, custom_chain_registry, custom_chain_config):
        """Test every successful mutation bumps the registry version."""
        custom_chain_registry.register(custom_chain_config)
        custom_chain_registry.unregister("test-chain")
        custom_chain_registry.clear()

        assert custom_chain_registry.version == 2

    def test_clear(self, custom_chain_registry, custom_chain_config):
        custom_chain_registry.register(custom_chain_config)

        custom_chain_registry.clear()

        assert custom_chain_registry.get_all() == []


class TestChainManager:
    """Test suite for ChainManager."""

    @pytest.fixture
    def manager(self, custom_chain_registry, custom_chain_config):
        custom_chain_registry.register(custom_chain_config)
        return ChainManager(custom_chain_registry)

    def test_available_chains_custom_first(self, manager):
        chains = manager.get_available_chains()

        assert chains[0] == "test-chain"
        assert chains[1:] == get_built_in_chains()

    def test_chain_info(self, manager):
        assert manager.get_chain_info("ethereum") == {"type": "built-in", "name": "Ethereum"}
        assert manager.get_chain_info("test-chain") == {"type": "custom", "name": "Test Chain"}
        assert manager.get_chain_info("nope") is None

    def test_validity(self, manager):
        assert manager.is_valid_chain("test-chain")
        assert manager.is_valid_chain("bsc")
        assert not manager.is_valid_chain("nope")
        assert manager.is_custom_chain("test-chain")
        assert not manager.is_built_in_chain("test-chain")

    def test_find_chain_by_chain_id(self, manager):
        assert manager.find_chain_by_chain_id(137) == "polygon"
        assert manager.find_chain_by_chain_id(999999) is None

    def test_find_chains_by_symbol(self, manager):
        assert manager.find_chains_by_symbol("eth") == ["ethereum", "arbitrum", "optimism", "base"]

    def test_search_chains_by_name(self, manager):
        assert manager.search_chains_by_name("arb") == ["arbitrum"]
        assert manager.search_chains_by_name("test") == ["test-chain"]

    def test_chain_stats(self, manager):
        stats = manager.get_chain_stats()

        assert stats["total"] == 9
        assert stats["built_in"] == 8
        assert stats["custom"] == 1
