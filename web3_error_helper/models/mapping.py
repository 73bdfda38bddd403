"""
Error mapping models for the Web3 Error Helper.

This module defines Pydantic models for pattern-to-message mappings and for
custom chain registrations. Field aliases accept the camelCase keys used by
JSON configuration files.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorMapping(BaseModel):
    """
    Model for a single pattern-to-message mapping.

    ``priority`` defaults to 0; higher priorities are tried first.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pattern: str
    message: str
    is_regex: bool = Field(default=False, alias="isRegex")
    priority: int = 0

    @field_validator("pattern", "message")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only text."""
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v: Any) -> Any:
        """Treat an explicit ``None`` as priority 0."""
        return 0 if v is None else v


class CustomFallbacks(BaseModel):
    """
    Model for per-type fallback messages of a custom chain.
    """
    model_config = ConfigDict(frozen=True)

    generic: Optional[str] = None
    network: Optional[str] = None
    wallet: Optional[str] = None
    contract: Optional[str] = None

    def get(self, fallback_type: str) -> Optional[str]:
        """Get the non-empty fallback for ``fallback_type``, if any."""
        if fallback_type not in type(self).model_fields:
            return None
        return getattr(self, fallback_type) or None


class CustomChainConfig(BaseModel):
    """
    Model for a runtime-registered custom chain.

    Contains the chain's own error mappings, which are tried before the
    built-in category tables, and optional fallback messages.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    chain_id: str = Field(alias="chainId")
    name: str
    error_mappings: List[ErrorMapping] = Field(alias="errorMappings")
    custom_fallbacks: Optional[CustomFallbacks] = Field(default=None, alias="customFallbacks")
    is_evm_compatible: bool = Field(default=False, alias="isEVMCompatible")
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("chain_id", "name")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only identifiers."""
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v
