"""
Chain configuration models for the Web3 Error Helper.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NativeCurrency(BaseModel):
    """
    Model for the native currency of a chain.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str
    decimals: int = 18


class ChainMetadata(BaseModel):
    """
    Model for descriptive chain metadata.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    symbol: Optional[str] = None
    chain_id: Optional[int] = Field(default=None, alias="chainId")
    rpc_urls: List[str] = Field(default_factory=list, alias="rpcUrls")
    block_explorer_urls: List[str] = Field(default_factory=list, alias="blockExplorerUrls")
    native_currency: Optional[NativeCurrency] = Field(default=None, alias="nativeCurrency")
    is_testnet: bool = Field(default=False, alias="isTestnet")


class ChainErrorConfig(BaseModel):
    """
    Model for one error category enabled on a chain.
    """
    model_config = ConfigDict(frozen=True)

    category: str
    priority: int
    enabled: bool = True


class ChainConfig(BaseModel):
    """
    Model for a built-in chain.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    metadata: ChainMetadata
    error_categories: List[ChainErrorConfig] = Field(alias="errorCategories")
