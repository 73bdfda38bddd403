"""
Solana adapter.
"""

from typing import Any, Optional

from web3_error_helper.adapters.base import EcosystemAdapter, get_field, get_text


class SolanaAdapter(EcosystemAdapter):
    """Adapter for Solana RPC and program errors."""

    ecosystem = "solana"
    name = "Solana"
    string_keywords = (
        "insufficient funds",
        "account not found",
        "program error",
        "instruction error",
        "blockhash not found",
        "signature verification failed",
    )
    field_keys = ("InstructionError", "ProgramError", "slot", "blockhash", "signature")

    def extract_specific_message(self, error: Any) -> Optional[str]:
        message = get_text(error, "data", "err", "message")
        if message:
            return message

        # InstructionError is encoded as [instruction_index, {"Custom": code}]
        instruction_error = get_field(error, "InstructionError")
        if isinstance(instruction_error, (list, tuple)) and len(instruction_error) >= 2:
            code = get_field(instruction_error[1], "Custom")
            if isinstance(code, int) and not isinstance(code, bool):
                return f"Program error: {code}"

        return None
