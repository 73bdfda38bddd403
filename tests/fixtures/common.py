"""Common test fixtures for Web3 Error Helper tests.

This module provides fixtures that can be reused across different test modules.
"""

import pytest

import web3_error_helper
from web3_error_helper.adapters.registry import AdapterRegistry
from web3_error_helper.chains.registry import CustomChainRegistry
from web3_error_helper.i18n.manager import I18nManager
from web3_error_helper.services.translation_service import ErrorTranslator
from web3_error_helper.utils.config import TranslatorSettings


@pytest.fixture
def settings():
    """Default settings, independent of the process environment."""
    return TranslatorSettings()


@pytest.fixture
def translator(settings):
    """Create an isolated ErrorTranslator with caching enabled."""
    return ErrorTranslator(settings=settings)


@pytest.fixture
def uncached_translator():
    """Create an isolated ErrorTranslator without a result cache."""
    return ErrorTranslator(settings=TranslatorSettings(cache_enabled=False))


@pytest.fixture
def custom_chain_registry():
    return CustomChainRegistry()


@pytest.fixture
def adapter_registry():
    return AdapterRegistry()


@pytest.fixture
def i18n_manager():
    return I18nManager()


@pytest.fixture
def custom_chain_config():
    """A custom chain configuration written with camelCase keys."""
    return {
        "chainId": "test-chain",
        "name": "Test Chain",
        "errorMappings": [
            {
                "pattern": "test chain rejected the block",
                "message": "The test chain rejected this block.",
                "priority": 15,
            },
            {
                "pattern": r"^custom code \d+$",
                "message": "A custom chain code was returned.",
                "isRegex": True,
            },
        ],
        "customFallbacks": {
            "generic": "Something went wrong on Test Chain.",
            "network": "Test Chain network is unreachable.",
        },
        "isEVMCompatible": True,
    }


@pytest.fixture(autouse=True)
def reset_default_translator_state():
    """Give every test a fresh module-level translator."""
    web3_error_helper.reset_default_translator()
    yield
    web3_error_helper.reset_default_translator()
