"""
Cardano adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_text


class CardanoAdapter(EcosystemAdapter):
    """Adapter for Cardano ledger and Plutus script errors."""

    ecosystem = "cardano"
    name = "Cardano"
    string_keywords = (
        "insufficient ada",
        "script execution failed",
        "datum hash mismatch",
        "plutus",
        "cardano",
        "utxo",
    )
    field_keys = ("ScriptFailure", "ValidationError", "PlutusFailure", "EvaluationError", "utxo")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        return (
            get_text(error, "ScriptFailure", "PlutusFailure", "EvaluationError")
            or get_text(error, "ValidationError")
        )
