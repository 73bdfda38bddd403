"""Unit tests for the ecosystem adapters.

This module tests message extraction and format probing for every adapter.
"""

import pytest

from web3_error_helper.adapters import (
    AlgorandAdapter,
    CardanoAdapter,
    CosmosAdapter,
    EVMAdapter,
    NearAdapter,
    PolkadotAdapter,
    RippleAdapter,
    SolanaAdapter,
    StellarAdapter,
    TezosAdapter,
)
from web3_error_helper.constants import UNKNOWN_ERROR_MESSAGE
from web3_error_helper.data.translations import BASE_TRANSLATIONS

ALL_ADAPTERS = [
    EVMAdapter,
    SolanaAdapter,
    CosmosAdapter,
    NearAdapter,
    CardanoAdapter,
    PolkadotAdapter,
    AlgorandAdapter,
    TezosAdapter,
    StellarAdapter,
    RippleAdapter,
]


class ExplodingError:
    """Error object whose attribute access always fails."""

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        raise RuntimeError(f"cannot read {name}")


class ProviderError:
    def __init__(self, message):
        self.message = message


class TestEVMAdapter:
    """Test suite for EVMAdapter."""

    @pytest.fixture
    def adapter(self):
        return EVMAdapter(chain_id=1)

    def test_string_returned_verbatim(self, adapter):
        """Test extract_error_message when the error is a string."""
        assert adapter.extract_error_message("  execution reverted  ") == "  execution reverted  "

    def test_top_level_message(self, adapter):
        """Test extract_error_message with a JSON-RPC style error."""
        # Setup
        error = {"code": -32000, "message": "nonce too low"}

        # Execute
        message = adapter.extract_error_message(error)

        # Verify
        assert message == "nonce too low"

    def test_reason_and_nested_message(self, adapter):
        """Test extract_error_message falls through to reason and error.message."""
        assert adapter.extract_error_message({"reason": "Pausable: paused"}) == "Pausable: paused"
        assert adapter.extract_error_message({"error": {"message": "out of gas"}}) == "out of gas"

    def test_data_string(self, adapter):
        """Test extract_error_message when data carries the revert string."""
        assert adapter.extract_error_message({"data": "execution reverted"}) == "execution reverted"

    def test_object_attribute(self, adapter):
        """Test extract_error_message with an arbitrary object exposing message."""
        assert adapter.extract_error_message(ProviderError("wallet not connected")) == "wallet not connected"

    def test_exception_text(self, adapter):
        """Test extract_error_message with an exception instance."""
        error = ValueError("ERC20: transfer amount exceeds balance")

        assert adapter.extract_error_message(error) == "ERC20: transfer amount exceeds balance"

    def test_matches_error_format(self, adapter):
        """Test matches_error_format for strings and structured errors."""
        assert adapter.matches_error_format("execution reverted: Ownable") is True
        assert adapter.matches_error_format("something unrelated") is False
        assert adapter.matches_error_format({"code": 4001}) is True
        assert adapter.matches_error_format(None) is False

    def test_error_patterns_skip_regex_entries(self, adapter):
        """Test get_error_patterns is derived from the non-regex category entries."""
        # Execute
        patterns = adapter.get_error_patterns()

        # Verify
        assert patterns["ERC20: transfer amount exceeds balance"].startswith("Insufficient token balance")
        assert "out of gas" in patterns
        assert not any(pattern.startswith("^AccessControl") for pattern in patterns)

    def test_chain_id_is_kept(self, adapter):
        assert adapter.chain_id == 1
        assert EVMAdapter().chain_id is None


class TestSolanaAdapter:
    """Test suite for SolanaAdapter."""

    def test_instruction_error_custom_code(self):
        """Test extract_error_message formats a custom program error code."""
        # Setup
        error = {"InstructionError": [0, {"Custom": 6001}]}

        # Execute
        message = SolanaAdapter().extract_error_message(error)

        # Verify
        assert message == "Program error: 6001"

    def test_nested_rpc_message(self):
        """Test extract_error_message reads data.err.message first."""
        error = {"data": {"err": {"message": "custom program error: 0x1"}}, "message": "outer"}

        assert SolanaAdapter().extract_error_message(error) == "custom program error: 0x1"

    def test_malformed_instruction_error_falls_back(self):
        """Test a malformed InstructionError falls back to the generic fields."""
        error = {"InstructionError": "oops", "message": "Transaction simulation failed"}

        assert SolanaAdapter().extract_error_message(error) == "Transaction simulation failed"

    def test_matches_error_format(self):
        adapter = SolanaAdapter()

        assert adapter.matches_error_format("blockhash not found") is True
        assert adapter.matches_error_format({"slot": 1234}) is True
        assert adapter.matches_error_format("execution reverted") is False

    def test_fallback_messages(self):
        """Test get_fallback_messages exposes the Solana fallback table."""
        fallbacks = SolanaAdapter().get_fallback_messages()

        assert fallbacks["network"].startswith("Solana network error")
        assert fallbacks["contract"] == "Solana program execution failed."

    def test_evm_fallbacks_follow_base_dictionary(self):
        """Test the EVM fallback table uses the base translation entries."""
        fallbacks = EVMAdapter().get_fallback_messages()

        for key in ("network", "gas", "wallet", "contract", "transaction"):
            assert fallbacks[key] == BASE_TRANSLATIONS["errors"][key]
        assert CosmosAdapter().get_fallback_messages()["gas"] == BASE_TRANSLATIONS["errors"]["gas"]


class TestEcosystemAdapters:
    """Test suite for the remaining ecosystem-specific extraction rules."""

    def test_cosmos_code_and_message(self):
        error = {"code": 5, "message": "insufficient funds: 10uatom"}

        assert CosmosAdapter().extract_error_message(error) == "insufficient funds: 10uatom"

    def test_cosmos_raw_log(self):
        error = {"tx_response": {"raw_log": "out of gas in location: WriteFlat"}}

        assert CosmosAdapter().extract_error_message(error) == "out of gas in location: WriteFlat"

    def test_near_execution_error(self):
        """Test extract_error_message walks the Near failure outcome."""
        error = {
            "Failure": {
                "ActionError": {
                    "kind": {"FunctionCallError": {"ExecutionError": "Smart contract panicked: paused"}}
                }
            }
        }

        assert NearAdapter().extract_error_message(error) == "Smart contract panicked: paused"

    def test_near_account_does_not_exist(self):
        error = {"AccountDoesNotExist": {"account_id": "bob.near"}}

        assert NearAdapter().extract_error_message(error) == "Account does not exist on Near Protocol"

    def test_cardano_plutus_failure(self):
        error = {"ScriptFailure": {"PlutusFailure": {"EvaluationError": "validator returned false"}}}

        assert CardanoAdapter().extract_error_message(error) == "validator returned false"

    def test_cardano_validation_error(self):
        assert CardanoAdapter().extract_error_message({"ValidationError": "bad input"}) == "bad input"

    def test_polkadot_bad_origin(self):
        error = {"ExtrinsicFailed": {"DispatchError": {"BadOrigin": "unsigned"}}}

        assert PolkadotAdapter().extract_error_message(error) == "Bad origin: unsigned"

    def test_polkadot_module_error(self):
        error = {"ExtrinsicFailed": {"DispatchError": {"Module": {"error": "InsufficientBalance"}}}}

        assert PolkadotAdapter().extract_error_message(error) == "Module error: InsufficientBalance"

    def test_polkadot_balance_too_low(self):
        assert PolkadotAdapter().extract_error_message({"BalanceTooLow": True}) == (
            "Insufficient balance for transaction"
        )

    def test_algorand_logic_error(self):
        error = {"logic_error": {"message": "assert failed pc=12"}}

        assert AlgorandAdapter().extract_error_message(error) == "assert failed pc=12"

    def test_tezos_michelson_error(self):
        error = {"michelson_error": {"message": "script_rejected"}}

        assert TezosAdapter().extract_error_message(error) == "script_rejected"

    def test_stellar_operation_code(self):
        error = {"operation_error": {"code": "op_underfunded"}}

        assert StellarAdapter().extract_error_message(error) == "Operation error: op_underfunded"

    def test_stellar_result_code(self):
        assert StellarAdapter().extract_error_message({"result": {"result": "tx_failed"}}) == "tx_failed"

    def test_ripple_result_error_first(self):
        """Test Ripple prefers result.error over the transaction result."""
        error = {
            "result": {"error": "actNotFound", "error_message": "Account not found."},
            "transaction_result": {"result": "tecUNFUNDED_PAYMENT"},
        }

        assert RippleAdapter().extract_error_message(error) == "actNotFound"

    def test_ripple_transaction_result(self):
        error = {"transaction_result": {"result": "tecUNFUNDED_PAYMENT"}}

        assert RippleAdapter().extract_error_message(error) == "Transaction result: tecUNFUNDED_PAYMENT"

    def test_ripple_ledger_error(self):
        assert RippleAdapter().extract_error_message({"ledger_error": "ledger closed"}) == "ledger closed"

    def test_string_probes_are_case_sensitive(self):
        """Test keyword probes compare strings as written."""
        assert CosmosAdapter().matches_error_format("ABCI query failed") is True
        assert CosmosAdapter().matches_error_format("abci query failed") is False


@pytest.mark.parametrize("adapter_class", ALL_ADAPTERS)
@pytest.mark.parametrize("error", [
    None,
    0,
    3.5,
    True,
    [],
    {},
    {"error": None},
    {"message": 5},
    {"message": ""},
    object(),
    ExplodingError(),
])
def test_extraction_is_total(adapter_class, error):
    """Test extract_error_message never raises and returns the sentinel for unknown shapes."""
    # Execute
    message = adapter_class().extract_error_message(error)

    # Verify
    assert message == UNKNOWN_ERROR_MESSAGE


@pytest.mark.parametrize("adapter_class", ALL_ADAPTERS)
def test_probe_survives_hostile_objects(adapter_class):
    """Test matches_error_format with an object whose attributes raise."""
    assert adapter_class().matches_error_format(ExplodingError()) is False
