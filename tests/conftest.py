"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    settings,
    translator,
    uncached_translator,
    custom_chain_registry,
    adapter_registry,
    i18n_manager,
    custom_chain_config,
    reset_default_translator_state,
)
