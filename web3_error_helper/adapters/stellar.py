"""
Stellar adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_text


class StellarAdapter(EcosystemAdapter):
    """Adapter for Stellar Horizon and operation errors."""

    ecosystem = "stellar"
    name = "Stellar"
    string_keywords = (
        "insufficient balance",
        "operation failed",
        "stellar",
        "horizon",
        "xlm",
        "trustline",
    )
    field_keys = ("operation_error", "horizon_error", "stellar", "xlm", "trustline")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        code = get_text(error, "operation_error", "code")
        if code:
            return f"Operation error: {code}"

        return get_text(error, "result", "result") or get_text(error, "horizon_error")
