"""Utility modules for the Web3 Error Helper package."""
