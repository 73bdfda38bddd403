"""Static data tables for the Web3 Error Helper."""
