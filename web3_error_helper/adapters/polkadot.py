"""
Polkadot (Substrate) adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_field, get_text


class PolkadotAdapter(EcosystemAdapter):
    """Adapter for Substrate extrinsic and dispatch errors."""

    ecosystem = "polkadot"
    name = "Polkadot"
    string_keywords = (
        "insufficient balance",
        "extrinsic failed",
        "bad origin",
        "substrate",
        "polkadot",
        "parachain",
    )
    field_keys = ("ExtrinsicFailed", "DispatchError", "BalanceTooLow", "ExistenceRequired", "Module")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        dispatch_error = get_field(get_field(error, "ExtrinsicFailed"), "DispatchError")
        if dispatch_error is not None:
            bad_origin = get_text(dispatch_error, "BadOrigin")
            if bad_origin:
                return f"Bad origin: {bad_origin}"
            module_error = get_text(dispatch_error, "Module", "error")
            if module_error:
                return f"Module error: {module_error}"

        if get_field(error, "BalanceTooLow"):
            return "Insufficient balance for transaction"
        if get_field(error, "ExistenceRequired"):
            return "Account existence required"

        return None
