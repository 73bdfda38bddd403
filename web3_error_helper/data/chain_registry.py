"""
Built-in chain registry data.

Raw configuration for every built-in chain, keyed by chain identifier.
Validated into ``ChainConfig`` models by ``web3_error_helper.chains.builtin``.
"""

from typing import Any, Dict, List

# Every built-in EVM chain enables the same categories, highest priority first
EVM_ERROR_CATEGORIES: List[Dict[str, Any]] = [
    {"category": "erc20", "priority": 10, "enabled": True},
    {"category": "gas", "priority": 9, "enabled": True},
    {"category": "wallet", "priority": 8, "enabled": True},
    {"category": "network", "priority": 7, "enabled": True},
    {"category": "transaction", "priority": 6, "enabled": True},
    {"category": "evm", "priority": 5, "enabled": True},
    {"category": "contract", "priority": 4, "enabled": True},
]


def _ether(name: str = "Ether", symbol: str = "ETH") -> Dict[str, Any]:
    return {"name": name, "symbol": symbol, "decimals": 18}


CHAIN_REGISTRY: Dict[str, Dict[str, Any]] = {
    "ethereum": {
        "id": "ethereum",
        "metadata": {
            "name": "Ethereum",
            "symbol": "ETH",
            "chainId": 1,
            "rpcUrls": ["https://mainnet.infura.io/v3/", "https://eth-mainnet.alchemyapi.io/v2/"],
            "blockExplorerUrls": ["https://etherscan.io"],
            "nativeCurrency": _ether(),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "polygon": {
        "id": "polygon",
        "metadata": {
            "name": "Polygon",
            "symbol": "MATIC",
            "chainId": 137,
            "rpcUrls": ["https://polygon-rpc.com", "https://rpc-mainnet.maticvigil.com"],
            "blockExplorerUrls": ["https://polygonscan.com"],
            "nativeCurrency": _ether("MATIC", "MATIC"),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "arbitrum": {
        "id": "arbitrum",
        "metadata": {
            "name": "Arbitrum One",
            "symbol": "ETH",
            "chainId": 42161,
            "rpcUrls": ["https://arb1.arbitrum.io/rpc"],
            "blockExplorerUrls": ["https://arbiscan.io"],
            "nativeCurrency": _ether(),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "optimism": {
        "id": "optimism",
        "metadata": {
            "name": "Optimism",
            "symbol": "ETH",
            "chainId": 10,
            "rpcUrls": ["https://mainnet.optimism.io"],
            "blockExplorerUrls": ["https://optimistic.etherscan.io"],
            "nativeCurrency": _ether(),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "bsc": {
        "id": "bsc",
        "metadata": {
            "name": "Binance Smart Chain",
            "symbol": "BNB",
            "chainId": 56,
            "rpcUrls": ["https://bsc-dataseed.binance.org"],
            "blockExplorerUrls": ["https://bscscan.com"],
            "nativeCurrency": _ether("BNB", "BNB"),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "avalanche": {
        "id": "avalanche",
        "metadata": {
            "name": "Avalanche C-Chain",
            "symbol": "AVAX",
            "chainId": 43114,
            "rpcUrls": ["https://api.avax.network/ext/bc/C/rpc"],
            "blockExplorerUrls": ["https://snowtrace.io"],
            "nativeCurrency": _ether("Avalanche", "AVAX"),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "fantom": {
        "id": "fantom",
        "metadata": {
            "name": "Fantom Opera",
            "symbol": "FTM",
            "chainId": 250,
            "rpcUrls": ["https://rpc.ftm.tools"],
            "blockExplorerUrls": ["https://ftmscan.com"],
            "nativeCurrency": _ether("Fantom", "FTM"),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
    "base": {
        "id": "base",
        "metadata": {
            "name": "Base",
            "symbol": "ETH",
            "chainId": 8453,
            "rpcUrls": ["https://mainnet.base.org"],
            "blockExplorerUrls": ["https://basescan.org"],
            "nativeCurrency": _ether(),
            "isTestnet": False,
        },
        "errorCategories": EVM_ERROR_CATEGORIES,
    },
}
