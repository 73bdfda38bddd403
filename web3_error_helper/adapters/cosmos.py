"""
Cosmos SDK adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_field, get_text


class CosmosAdapter(EcosystemAdapter):
    """Adapter for Cosmos SDK chains (ABCI and ``tx_response`` errors)."""

    ecosystem = "cosmos"
    name = "Cosmos"
    string_keywords = (
        "insufficient funds",
        "account sequence mismatch",
        "signature verification failed",
        "invalid sequence",
        "out of gas",
        "ABCI",
        "cosmos",
    )
    field_keys = ("code", "tx_response", "raw_log", "type", "module")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        if get_field(error, "code") is not None:
            message = get_text(error, "message")
            if message:
                return message

        return get_text(error, "tx_response", "raw_log") or get_text(error, "raw_log")
