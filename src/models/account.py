"""Account data model."""

from dataclasses import dataclass, field

from .transaction import Transaction


@dataclass
class Account:
    """Represents a bank account."""

    id: str | None
    account_number: str
    owner_name: str
    balance: float
    transactions: list[Transaction] = field(default_factory=list)
