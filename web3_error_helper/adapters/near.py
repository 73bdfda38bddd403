"""
Near Protocol adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_field, get_text


class NearAdapter(EcosystemAdapter):
    """Adapter for Near Protocol execution outcomes."""

    ecosystem = "near"
    name = "Near"
    string_keywords = (
        "insufficient balance",
        "account does not exist",
        "access key",
        "function call",
        "execution error",
        "near",
        "NEAR",
    )
    field_keys = (
        "Failure",
        "AccountDoesNotExist",
        "AccessKeyDoesNotExist",
        "FunctionCallError",
        "ExecutionError",
    )

    def extract_specific_message(self, error: Any) -> Optional[str]:
        message = get_text(
            error, "Failure", "ActionError", "kind", "FunctionCallError", "ExecutionError"
        )
        if message:
            return message

        if get_field(error, "AccountDoesNotExist"):
            return "Account does not exist on Near Protocol"
        if get_field(error, "AccessKeyDoesNotExist"):
            return "Access key does not exist for this account"

        return None
