"""
Ripple (XRP Ledger) adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_text


class RippleAdapter(EcosystemAdapter):
    """Adapter for XRP Ledger results."""

    ecosystem = "ripple"
    name = "Ripple"
    string_keywords = (
        "insufficient funds",
        "ripple",
        "xrp",
        "ledger",
        "payment",
        "trustline",
    )
    field_keys = ("transaction_result", "ledger_error", "ripple", "xrp", "payment")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        message = get_text(error, "result", "error") or get_text(error, "result", "error_message")
        if message:
            return message

        result = get_text(error, "transaction_result", "result")
        if result:
            return f"Transaction result: {result}"

        return get_text(error, "ledger_error")
