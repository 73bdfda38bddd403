"""
Built-in error mapping tables, one per error category.

Each entry maps a raw error pattern to a user-facing message. Non-regex
patterns are compared against the whole extracted message, case-insensitively.
The ``priority`` of every entry equals the priority its category carries in
the chain registry.
"""

from typing import Any, Dict, List

ERROR_MAPPINGS: Dict[str, List[Dict[str, Any]]] = {
    "erc20": [
        {
            "pattern": "ERC20: transfer amount exceeds balance",
            "message": "Insufficient token balance. You don't have enough tokens to complete this transfer.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: transfer amount exceeds allowance",
            "message": "Transfer amount exceeds your approved allowance. Please increase your token allowance first.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: insufficient allowance",
            "message": "Insufficient token allowance. Please approve more tokens before attempting this transaction.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: transfer to the zero address",
            "message": "Cannot transfer tokens to the zero address. Please check the recipient address.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: transfer from the zero address",
            "message": "Cannot transfer tokens from the zero address.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: approve to the zero address",
            "message": "Cannot approve the zero address as a spender. Please check the spender address.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: burn amount exceeds balance",
            "message": "Burn amount exceeds your token balance.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: mint to the zero address",
            "message": "Cannot mint tokens to the zero address.",
            "priority": 10,
        },
        {
            "pattern": "ERC20: decreased allowance below zero",
            "message": "Cannot decrease the allowance below zero.",
            "priority": 10,
        },
    ],
    "gas": [
        {
            "pattern": "gas required exceeds allowance",
            "message": "Transaction requires more gas than you've allocated. Please increase your gas limit.",
            "priority": 9,
        },
        {
            "pattern": "out of gas",
            "message": "Transaction ran out of gas. Please increase your gas limit and try again.",
            "priority": 9,
        },
        {
            "pattern": "intrinsic gas too low",
            "message": "Gas limit is below the minimum required for this transaction. Please increase your gas limit.",
            "priority": 9,
        },
        {
            "pattern": "exceeds block gas limit",
            "message": "Transaction gas limit exceeds the block gas limit. Please lower your gas limit.",
            "priority": 9,
        },
        {
            "pattern": "max fee per gas less than block base fee",
            "message": "Your max fee per gas is lower than the current base fee. Please increase your max fee.",
            "priority": 9,
        },
        {
            "pattern": "transaction underpriced",
            "message": "Gas price is too low for this transaction to be accepted. Please increase your gas price.",
            "priority": 9,
        },
        {
            "pattern": "replacement transaction underpriced",
            "message": "Replacement transaction gas price is too low. Please increase the gas price to replace the pending transaction.",
            "priority": 9,
        },
    ],
    "wallet": [
        {
            "pattern": "user rejected the request",
            "message": "Transaction was rejected by the user. Please try again and confirm the transaction in your wallet.",
            "priority": 8,
        },
        {
            "pattern": "user denied transaction signature",
            "message": "Transaction signature was denied. Please confirm the transaction in your wallet to continue.",
            "priority": 8,
        },
        {
            "pattern": "wallet not connected",
            "message": "Wallet is not connected. Please connect your wallet and try again.",
            "priority": 8,
        },
        {
            "pattern": "wrong network",
            "message": "You're connected to the wrong network. Please switch to the correct network in your wallet.",
            "priority": 8,
        },
        {
            "pattern": "already processing eth_requestAccounts",
            "message": "A wallet connection request is already pending. Please check your wallet.",
            "priority": 8,
        },
    ],
    "network": [
        {
            "pattern": "network error",
            "message": "Network connection error. Please check your internet connection and try again.",
            "priority": 7,
        },
        {
            "pattern": "timeout",
            "message": "Request timed out. The network may be congested. Please try again in a few moments.",
            "priority": 7,
        },
        {
            "pattern": "could not detect network",
            "message": "Unable to detect the network. Please check your RPC endpoint and connection.",
            "priority": 7,
        },
        {
            "pattern": "rate limit exceeded",
            "message": "Too many requests were sent to the network provider. Please wait a moment and try again.",
            "priority": 7,
        },
    ],
    "transaction": [
        {
            "pattern": "nonce too low",
            "message": "Transaction nonce is too low. Please wait for previous transactions to be processed or reset your nonce.",
            "priority": 6,
        },
        {
            "pattern": "nonce too high",
            "message": "Transaction nonce is too high. Please wait for pending transactions or reset your nonce.",
            "priority": 6,
        },
        {
            "pattern": "invalid address",
            "message": "Provided Ethereum address is invalid. Please check the address format and try again.",
            "priority": 6,
        },
        {
            "pattern": "execution reverted",
            "message": "Transaction execution was reverted. Please check the transaction details and try again.",
            "priority": 6,
        },
        {
            "pattern": "insufficient funds",
            "message": "Insufficient funds to cover the transaction amount and gas fees.",
            "priority": 6,
        },
        {
            "pattern": "already known",
            "message": "This transaction has already been submitted and is pending.",
            "priority": 6,
        },
    ],
    "evm": [
        {
            "pattern": "invalid opcode",
            "message": "An invalid operation was executed. This may indicate a contract bug or compatibility issue.",
            "priority": 5,
        },
        {
            "pattern": "stack overflow",
            "message": "Too many items on the EVM stack. This may indicate a contract execution issue.",
            "priority": 5,
        },
        {
            "pattern": "stack underflow",
            "message": "Too few items on the EVM stack. This may indicate a contract execution issue.",
            "priority": 5,
        },
        {
            "pattern": "invalid jump destination",
            "message": "Contract attempted an invalid jump. This may indicate a contract bug.",
            "priority": 5,
        },
        {
            "pattern": "0x01",
            "message": "Assertion failed. A condition that should never be false was violated.",
            "priority": 5,
        },
        {
            "pattern": "0x11",
            "message": "Arithmetic overflow or underflow occurred. Please check the calculation values.",
            "priority": 5,
        },
        {
            "pattern": "0x12",
            "message": "Division or modulo by zero occurred.",
            "priority": 5,
        },
        {
            "pattern": "0x32",
            "message": "Array index is out of bounds.",
            "priority": 5,
        },
    ],
    "contract": [
        {
            "pattern": "Ownable: caller is not the owner",
            "message": "Function can only be called by the contract owner. Please contact the contract owner to perform this action.",
            "priority": 4,
        },
        {
            "pattern": "Pausable: paused",
            "message": "Contract is paused. This action cannot be executed at this time. Please try again later.",
            "priority": 4,
        },
        {
            "pattern": "SafeMath: addition overflow",
            "message": "Arithmetic addition overflow. The result is too large to be stored.",
            "priority": 4,
        },
        {
            "pattern": "SafeMath: subtraction overflow",
            "message": "Arithmetic subtraction overflow. The result would be negative.",
            "priority": 4,
        },
        {
            "pattern": "SafeMath: multiplication overflow",
            "message": "Arithmetic multiplication overflow. The result is too large to be stored.",
            "priority": 4,
        },
        {
            "pattern": "ReentrancyGuard: reentrant call",
            "message": "Reentrant call detected. The contract blocked a nested call to protect its state.",
            "priority": 4,
        },
        {
            "pattern": r"^AccessControl: account 0x[0-9a-f]{40} is missing role 0x[0-9a-f]{64}$",
            "message": "Your account is missing the role required to perform this action.",
            "isRegex": True,
            "priority": 4,
        },
    ],
}
