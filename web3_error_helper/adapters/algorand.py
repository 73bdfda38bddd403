"""
Algorand adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_text


class AlgorandAdapter(EcosystemAdapter):
    """Adapter for Algorand node and TEAL errors."""

    ecosystem = "algorand"
    name = "Algorand"
    string_keywords = (
        "insufficient balance",
        "logic error",
        "invalid signature",
        "algorand",
        "teal",
        "asa",
    )
    field_keys = ("logic_error", "validation_error", "network_error", "asa", "teal")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        return (
            get_text(error, "logic_error", "message")
            or get_text(error, "validation_error")
            or get_text(error, "network_error")
        )
