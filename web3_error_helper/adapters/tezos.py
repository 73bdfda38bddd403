"""
Tezos adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_text


class TezosAdapter(EcosystemAdapter):
    """Adapter for Tezos operation and Michelson errors."""

    ecosystem = "tezos"
    name = "Tezos"
    string_keywords = (
        "insufficient balance",
        "script failed",
        "invalid operation",
        "tezos",
        "michelson",
        "xtz",
    )
    field_keys = ("michelson_error", "validation_error", "network_error", "operation", "xtz")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        return (
            get_text(error, "michelson_error", "message")
            or get_text(error, "validation_error")
            or get_text(error, "network_error")
        )
