"""Unit tests for AdapterRegistry.

This module tests adapter detection order and runtime registration.
"""

import pytest

from web3_error_helper.adapters import (
    AdapterRegistry,
    BaseChainAdapter,
    CosmosAdapter,
    EVMAdapter,
    SolanaAdapter,
)
from web3_error_helper.utils.errors import AdapterError


class AptosAdapter(BaseChainAdapter):
    ecosystem = "aptos"
    name = "Aptos"
    string_keywords = ("move abort",)
    field_keys = ("vm_status",)

    def get_error_patterns(self):
        return {"move abort in module": "The Move module aborted the transaction"}


class BrokenProbeAdapter(AptosAdapter):
    ecosystem = "broken"

    def matches_error_format(self, error):
        raise RuntimeError("probe failed")


class TestAdapterRegistry:
    """Test suite for AdapterRegistry."""

    def test_detects_non_evm_adapter_from_string(self, adapter_registry):
        """Test detect_adapter with a Solana keyword."""
        adapter = adapter_registry.detect_adapter("blockhash not found")

        assert isinstance(adapter, SolanaAdapter)

    def test_detects_structured_error(self, adapter_registry):
        """Test detect_adapter with a Cosmos tx_response."""
        adapter = adapter_registry.detect_adapter({"tx_response": {"raw_log": "out of gas"}})

        assert isinstance(adapter, CosmosAdapter)

    def test_insertion_order_wins(self, adapter_registry):
        """Test detect_adapter returns the first matching adapter in probe order."""
        # Solana, Cosmos and Ripple all claim "insufficient funds"
        adapter = adapter_registry.detect_adapter("insufficient funds")

        assert adapter.ecosystem == "solana"

    def test_evm_is_probed_last(self, adapter_registry):
        """Test detect_adapter falls through to EVM."""
        adapter = adapter_registry.detect_adapter("execution reverted: Ownable")

        assert isinstance(adapter, EVMAdapter)

    def test_no_match_returns_none(self, adapter_registry):
        assert adapter_registry.detect_adapter("completely unknown error") is None
        assert adapter_registry.detect_adapter(None) is None

    def test_evm_adapters_cached_per_chain_id(self, adapter_registry):
        """Test get_evm_adapter returns one instance per chain id."""
        # Execute
        mainnet = adapter_registry.get_evm_adapter(1)
        polygon = adapter_registry.get_evm_adapter(137)

        # Verify
        assert adapter_registry.get_evm_adapter(1) is mainnet
        assert polygon is not mainnet
        assert polygon.chain_id == 137

    def test_get_adapter(self, adapter_registry):
        assert isinstance(adapter_registry.get_adapter("solana"), SolanaAdapter)
        assert isinstance(adapter_registry.get_adapter("evm"), EVMAdapter)
        assert adapter_registry.get_adapter("aptos") is None

    def test_supported_ecosystems_end_with_evm(self, adapter_registry):
        ecosystems = adapter_registry.get_supported_ecosystems()

        assert ecosystems[0] == "solana"
        assert ecosystems[-1] == "evm"
        assert len(ecosystems) == 10

    def test_register_custom_adapter(self, adapter_registry):
        """Test register_adapter adds a new ecosystem to detection."""
        # Setup
        version = adapter_registry.version

        # Execute
        adapter_registry.register_adapter(AptosAdapter())

        # Verify
        assert adapter_registry.version == version + 1
        assert adapter_registry.has_custom_adapter("aptos")
        assert adapter_registry.detect_adapter("move abort in module").ecosystem == "aptos"
        assert adapter_registry.get_supported_ecosystems()[-2:] == ["aptos", "evm"]

    def test_unregister_custom_adapter(self, adapter_registry):
        """Test unregister_adapter removes a custom ecosystem."""
        adapter_registry.register_adapter(AptosAdapter())

        assert adapter_registry.unregister_adapter("aptos") is True
        assert adapter_registry.unregister_adapter("aptos") is False
        assert adapter_registry.get_adapter("aptos") is None

    def test_override_builtin_then_restore(self, adapter_registry):
        """Test replacing a built-in adapter and restoring it on unregister."""
        # Setup
        class QuietSolana(SolanaAdapter):
            string_keywords = ()

        # Execute
        adapter_registry.register_adapter(QuietSolana())

        # Verify
        assert isinstance(adapter_registry.get_adapter("solana"), QuietSolana)
        assert adapter_registry.get_supported_ecosystems()[0] == "solana"

        adapter_registry.unregister_adapter("solana")
        restored = adapter_registry.get_adapter("solana")
        assert type(restored) is SolanaAdapter

    def test_evm_override(self, adapter_registry):
        """Test registering an EVM adapter replaces the default one."""
        custom = EVMAdapter(chain_id="custom")

        adapter_registry.register_adapter(custom)

        assert adapter_registry.get_adapter("evm") is custom
        assert adapter_registry.unregister_adapter("evm") is True
        assert adapter_registry.get_adapter("evm") is not custom

    def test_unregister_builtin_without_override(self, adapter_registry):
        assert adapter_registry.unregister_adapter("solana") is False
        assert adapter_registry.unregister_adapter("evm") is False

    def test_register_rejects_missing_ecosystem(self, adapter_registry):
        with pytest.raises(AdapterError):
            adapter_registry.register_adapter(object())

    def test_register_rejects_missing_capabilities(self, adapter_registry):
        """Test register_adapter lists the missing methods."""
        # Setup
        class Incomplete:
            ecosystem = "partial"

            def extract_error_message(self, error):
                return "x"

        # Execute
        with pytest.raises(AdapterError) as exc_info:
            adapter_registry.register_adapter(Incomplete())

        # Verify
        assert "missing required methods" in exc_info.value.message
        assert "get_error_patterns" in exc_info.value.message
        assert exc_info.value.ecosystem == "partial"
        assert not adapter_registry.has_custom_adapter("partial")

    def test_failing_probe_is_skipped(self, adapter_registry):
        """Test detect_adapter ignores adapters whose probe raises."""
        adapter_registry.register_adapter(BrokenProbeAdapter())

        assert adapter_registry.detect_adapter("blockhash not found").ecosystem == "solana"
        assert adapter_registry.detect_adapter("nothing matches this") is None

    def test_clear_custom_adapters(self, adapter_registry):
        adapter_registry.register_adapter(AptosAdapter())
        adapter_registry.register_adapter(EVMAdapter(chain_id=5))

        adapter_registry.clear_custom_adapters()

        assert not adapter_registry.has_custom_adapter("aptos")
        assert not adapter_registry.has_custom_adapter("evm")
        assert len(adapter_registry.get_all_adapters()) == 10
