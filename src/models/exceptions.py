"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""

    def __init__(self, account_id: str):
        super().__init__(f"Account with ID {account_id} not found")
        self.account_id = account_id


class AccountAlreadyExistsError(BankError):
    """Raised when attempting to create an account whose number is taken."""
    pass


class InsufficientFundsError(BankError):
    """Raised when amount plus fee exceeds the account balance."""

    def __init__(self, message: str = "Insufficient balance for transaction"):
        super().__init__(message)


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative amount)."""
    pass


class InvalidTransactionTypeError(BankError):
    """Raised when a transaction type name is not recognised."""
    pass
