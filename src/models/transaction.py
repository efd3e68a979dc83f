"""Transaction data models."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from .exceptions import InvalidTransactionTypeError


class TransactionType(Enum):
    """Closed set of transaction categories, each with a fixed fee."""

    BRANCH_DEPOSIT = 0.0
    ATM_DEPOSIT = 2.0
    TRANSFER = 1.5
    PHYSICAL_PURCHASE = 0.0
    ONLINE_PURCHASE = 5.0
    WITHDRAW_ATM = 0.0

    def __new__(cls, fee: float):
        # Members share fee values, so the value is made unique per member.
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__)
        obj.fee = fee
        return obj

    @classmethod
    def parse(cls, name: str) -> "TransactionType":
        """
        Look up a type by name, ignoring case and accepting dashes.

        Raises:
            InvalidTransactionTypeError: If no member has that name
        """
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidTransactionTypeError(
                f"Unknown transaction type: {name}"
            ) from None


@dataclass
class TransactionRequest:
    """What a caller asks to register against an account."""

    type: TransactionType
    amount: float
    description: str = ""


@dataclass(frozen=True)
class Transaction:
    """Represents a registered banking transaction."""

    id: str | None
    type: TransactionType
    amount: float
    fee: float
    timestamp: datetime
    description: str
    account_id: str

    @property
    def total(self) -> float:
        """Amount debited from the account, fee included."""
        return self.amount + self.fee

    @classmethod
    def create(cls, request: TransactionRequest, account_id: str) -> "Transaction":
        """
        Create an unsaved transaction with the current timestamp.

        Args:
            request: The transaction request
            account_id: The owning account's ID

        Returns:
            A new Transaction with id=None and the fee of the request's type
        """
        return cls(
            id=None,
            type=request.type,
            amount=request.amount,
            fee=request.type.fee,
            timestamp=datetime.now(),
            description=request.description,
            account_id=account_id,
        )

    def with_id(self, txn_id: str) -> "Transaction":
        """Return a copy carrying the store-assigned ID."""
        return replace(self, id=txn_id)
