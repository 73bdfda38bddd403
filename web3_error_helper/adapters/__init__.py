"""
Ecosystem adapters for the Web3 Error Helper.
"""

from web3_error_helper.adapters.base import BaseChainAdapter, EcosystemAdapter
from web3_error_helper.adapters.evm import EVMAdapter
from web3_error_helper.adapters.solana import SolanaAdapter
from web3_error_helper.adapters.cosmos import CosmosAdapter
from web3_error_helper.adapters.near import NearAdapter
from web3_error_helper.adapters.cardano import CardanoAdapter
from web3_error_helper.adapters.polkadot import PolkadotAdapter
from web3_error_helper.adapters.algorand import AlgorandAdapter
from web3_error_helper.adapters.tezos import TezosAdapter
from web3_error_helper.adapters.stellar import StellarAdapter
from web3_error_helper.adapters.ripple import RippleAdapter
from web3_error_helper.adapters.registry import AdapterRegistry

__all__ = [
    "BaseChainAdapter",
    "EcosystemAdapter",
    "EVMAdapter",
    "SolanaAdapter",
    "CosmosAdapter",
    "NearAdapter",
    "CardanoAdapter",
    "PolkadotAdapter",
    "AlgorandAdapter",
    "TezosAdapter",
    "StellarAdapter",
    "RippleAdapter",
    "AdapterRegistry",
]
