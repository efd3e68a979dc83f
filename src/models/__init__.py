"""Data models for the banking system."""

from .account import Account
from .transaction import Transaction, TransactionRequest, TransactionType
from .exceptions import (
    BankError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransactionTypeError,
)

__all__ = [
    "Account",
    "Transaction",
    "TransactionRequest",
    "TransactionType",
    "BankError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidTransactionTypeError",
]
