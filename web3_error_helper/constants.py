"""Constants shared across the Web3 Error Helper package.

This module holds the closed enumerations (built-in chains, ecosystems,
error types) together with the keyword tables and default messages the
translation pipeline falls back to.
"""

from enum import Enum
from typing import Dict, Tuple


class SupportedChain(str, Enum):
    """Built-in chain identifiers."""
    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    BSC = "bsc"
    AVALANCHE = "avalanche"
    FANTOM = "fantom"
    BASE = "base"


class BlockchainEcosystem(str, Enum):
    """Families of blockchains sharing one error-shape convention."""
    EVM = "evm"
    SOLANA = "solana"
    COSMOS = "cosmos"
    NEAR = "near"
    CARDANO = "cardano"
    POLKADOT = "polkadot"
    ALGORAND = "algorand"
    TEZOS = "tezos"
    STELLAR = "stellar"
    RIPPLE = "ripple"


class ErrorType(str, Enum):
    """Coarse error classification used when no mapping matches."""
    WALLET = "wallet"
    CONTRACT = "contract"
    GAS = "gas"
    TRANSACTION = "transaction"
    NETWORK = "network"


DEFAULT_CHAIN = SupportedChain.ETHEREUM.value
BASE_LANGUAGE = "en"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

# Per-call custom mappings always outrank chain and category mappings
CUSTOM_MAPPING_PRIORITY = 100
# Adapter-local ecosystem patterns rank below every built-in category
ECOSYSTEM_PATTERN_PRIORITY = 1

# Checked in order, first hit wins. Substrings must not collide with
# ordinary English words ("red" would match "required").
ERROR_TYPE_KEYWORDS: Tuple[Tuple[ErrorType, Tuple[str, ...]], ...] = (
    (ErrorType.WALLET, (
        "wallet", "user rejected", "user denied", "wallet connection",
        "billetera", "carteira", "portefeuille",
    )),
    (ErrorType.CONTRACT, (
        "contract", "execution reverted", "revert",
        "contrato", "contrat",
    )),
    (ErrorType.GAS, ("gas", "insufficient gas", "out of gas")),
    (ErrorType.TRANSACTION, ("transaction", "tx", "nonce", "transacción", "transação")),
    (ErrorType.NETWORK, (
        "network", "timeout", "connection",
        "error de red", "erro de rede", "conexión", "conexão",
    )),
)

# Fallback keys for each detected type; GAS and TRANSACTION share the generic text
FALLBACK_KEY_BY_TYPE: Dict[ErrorType, str] = {
    ErrorType.WALLET: "wallet",
    ErrorType.CONTRACT: "contract",
    ErrorType.NETWORK: "network",
    ErrorType.GAS: "generic",
    ErrorType.TRANSACTION: "generic",
}

DEFAULT_FALLBACK_MESSAGES: Dict[str, str] = {
    "generic": "An error occurred while processing your request. Please try again.",
    "network": "Network error occurred. Please check your connection and try again.",
    "wallet": "Wallet error occurred. Please check your wallet connection and try again.",
    "contract": "Smart contract error occurred. Please check the transaction details and try again.",
}
