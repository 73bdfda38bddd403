"""
Ecosystem-specific error patterns and fallback messages.

Non-EVM adapters serve their ``get_error_patterns`` and
``get_fallback_messages`` from these tables, and the mapping loader folds the
patterns of a detected non-EVM ecosystem into the candidate list at the
lowest priority. EVM patterns live in the category tables of
``error_mappings`` instead, so there is one table per ecosystem. The EVM fallback messages are taken
from the base translation dictionary.
"""

from typing import Dict

from web3_error_helper.data.translations import BASE_TRANSLATIONS

_BASE_ERRORS = BASE_TRANSLATIONS["errors"]

ECOSYSTEM_ERROR_PATTERNS: Dict[str, Dict[str, str]] = {
    "solana": {
        "insufficient funds": "Insufficient SOL balance for transaction",
        "account not found": "Account does not exist on Solana",
        "program error": "Solana program execution failed",
        "instruction error": "Instruction execution failed",
        "blockhash not found": "Blockhash expired or not found",
        "signature verification failed": "Transaction signature is invalid",
        "duplicate signature": "Transaction signature already exists",
        "invalid account owner": "Account owner is invalid",
        "account already in use": "Account is already in use",
        "invalid account data": "Account data is invalid",
    },
    "cosmos": {
        "insufficient funds": "Insufficient balance for transaction",
        "account sequence mismatch": "Account sequence number mismatch",
        "signature verification failed": "Transaction signature verification failed",
        "invalid sequence": "Invalid account sequence number",
        "out of gas": "Transaction ran out of gas",
        "ABCI": "ABCI application error occurred",
        "cosmos": "Cosmos blockchain error occurred",
        "invalid account": "Account address is invalid",
        "insufficient fee": "Transaction fee is too low",
        "memo too large": "Transaction memo exceeds maximum size",
    },
    "near": {
        "insufficient balance": "Insufficient NEAR balance for transaction",
        "account does not exist": "Account does not exist on Near Protocol",
        "access key": "Access key error occurred",
        "function call": "Smart contract function call failed",
        "execution error": "Contract execution error occurred",
        "near": "Near Protocol blockchain error occurred",
        "invalid account": "Account address is invalid",
        "insufficient allowance": "Insufficient token allowance",
        "contract not found": "Smart contract not found",
    },
    "cardano": {
        "insufficient ada": "Insufficient ADA balance for transaction",
        "script execution failed": "Plutus script execution failed",
        "datum hash mismatch": "Datum hash does not match expected value",
        "plutus": "Plutus smart contract error occurred",
        "cardano": "Cardano blockchain error occurred",
        "utxo": "UTXO validation error occurred",
        "invalid signature": "Transaction signature is invalid",
        "expired transaction": "Transaction has expired",
        "fee too small": "Transaction fee is too small",
    },
    "polkadot": {
        "insufficient balance": "Insufficient balance for transaction",
        "extrinsic failed": "Transaction extrinsic failed",
        "bad origin": "Invalid transaction origin",
        "substrate": "Substrate runtime error occurred",
        "polkadot": "Polkadot blockchain error occurred",
        "parachain": "Parachain error occurred",
        "module error": "Substrate module execution failed",
        "existence required": "Account existence required",
        "balance too low": "Insufficient balance for operation",
    },
    "algorand": {
        "insufficient balance": "Insufficient ALGO balance for transaction",
        "logic error": "TEAL smart contract logic error occurred",
        "invalid signature": "Transaction signature is invalid",
        "algorand": "Algorand blockchain error occurred",
        "teal": "TEAL execution error occurred",
        "asa": "Algorand Standard Asset error occurred",
        "account not found": "Account does not exist on Algorand",
        "asset not found": "Asset does not exist",
        "fee too small": "Transaction fee is too small",
    },
    "tezos": {
        "insufficient balance": "Insufficient XTZ balance for transaction",
        "script failed": "Michelson smart contract execution failed",
        "invalid operation": "Invalid Tezos operation",
        "tezos": "Tezos blockchain error occurred",
        "michelson": "Michelson execution error occurred",
        "xtz": "Tezos token error occurred",
        "account not found": "Account does not exist on Tezos",
        "contract not found": "Smart contract not found",
        "fee too small": "Operation fee is too small",
    },
    "stellar": {
        "insufficient balance": "Insufficient XLM balance for transaction",
        "operation failed": "Stellar operation failed",
        "stellar": "Stellar blockchain error occurred",
        "horizon": "Stellar Horizon API error occurred",
        "xlm": "Stellar Lumens (XLM) error occurred",
        "trustline": "Trustline operation failed",
        "account not found": "Account does not exist on Stellar",
        "invalid signature": "Transaction signature is invalid",
        "sequence number": "Invalid sequence number",
        "fee too small": "Transaction fee is too small",
    },
    "ripple": {
        "insufficient funds": "Insufficient XRP balance for transaction",
        "ripple": "Ripple blockchain error occurred",
        "xrp": "XRP Ledger error occurred",
        "ledger": "XRP Ledger error occurred",
        "payment": "Ripple payment failed",
        "trustline": "Trustline operation failed",
        "account not found": "Account does not exist on XRP Ledger",
        "invalid signature": "Transaction signature is invalid",
        "sequence number": "Invalid sequence number",
        "fee too small": "Transaction fee is too small",
    },
}


def _fallbacks(name: str, contract: str, transaction: str = "transaction") -> Dict[str, str]:
    return {
        "network": f"{name} network error occurred. Please check your connection.",
        "gas": f"{transaction.capitalize()} fee estimation failed. Please try again.",
        "wallet": f"{name} wallet error occurred. Please check your wallet connection.",
        "contract": contract,
        "transaction": f"{name} {transaction} failed. Please try again.",
        "evm": f"{name} blockchain error occurred.",
    }


ECOSYSTEM_FALLBACK_MESSAGES: Dict[str, Dict[str, str]] = {
    "evm": {
        **{key: _BASE_ERRORS[key] for key in ("network", "gas", "wallet", "contract", "transaction")},
        "evm": "EVM execution error occurred.",
    },
    "solana": _fallbacks("Solana", "Solana program execution failed."),
    "cosmos": {
        **_fallbacks("Cosmos", "Cosmos module execution failed."),
        "gas": _BASE_ERRORS["gas"],
    },
    "near": _fallbacks("Near Protocol", "Near smart contract execution failed."),
    "cardano": _fallbacks("Cardano", "Cardano smart contract execution failed."),
    "polkadot": _fallbacks("Polkadot", "Polkadot runtime execution failed."),
    "algorand": _fallbacks("Algorand", "Algorand smart contract execution failed."),
    "tezos": _fallbacks("Tezos", "Tezos smart contract execution failed.", "operation"),
    "stellar": _fallbacks("Stellar", "Stellar smart contract execution failed."),
    "ripple": _fallbacks("Ripple", "Ripple smart contract execution failed."),
}
