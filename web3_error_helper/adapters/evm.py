"""
EVM adapter.

Covers Ethereum and every EVM-compatible chain. Understands the error shapes
of the common JSON-RPC client libraries (``message``/``reason``/``data`` at
the top level or nested under ``error``).
"""

from typing import Any, Dict, Optional

from web3_error_helper.adapters.base import BaseChainAdapter, get_text
from web3_error_helper.data.error_mappings import ERROR_MAPPINGS


class EVMAdapter(BaseChainAdapter):
    """Adapter for EVM chains, optionally bound to a numeric chain id."""

    ecosystem = "evm"
    name = "EVM"
    string_keywords = (
        "execution reverted",
        "gas required exceeds allowance",
        "nonce too low",
        "revert",
        "out of gas",
        "gas limit",
    )
    field_keys = ("code", "data", "transaction", "receipt")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        return (
            get_text(error, "message")
            or get_text(error, "reason")
            or get_text(error, "data")
            or get_text(error, "error", "message")
        )

    def get_error_patterns(self) -> Dict[str, str]:
        """Non-regex patterns of the built-in category tables."""
        patterns: Dict[str, str] = {}
        for mappings in ERROR_MAPPINGS.values():
            for mapping in mappings:
                if not mapping.get("isRegex"):
                    patterns.setdefault(mapping["pattern"], mapping["message"])
        return patterns
