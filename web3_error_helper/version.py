"""Version information for the Web3 Error Helper package."""

__version__ = "0.1.0"
__author__ = "Web3 Error Helper Contributors"
__email__ = "maintainers@web3-error-helper.dev"
