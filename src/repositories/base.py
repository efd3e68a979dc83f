"""Capabilities the services need from a store."""

from typing import Protocol

from src.models.account import Account
from src.models.transaction import Transaction


class AccountStore(Protocol):
    def find_by_id(self, account_id: str) -> Account | None: ...

    def find_with_transactions(self, account_id: str) -> Account | None: ...

    def save(self, account: Account) -> Account: ...

    def exists_by_account_number(self, account_number: str) -> bool: ...


class TransactionStore(Protocol):
    def find_by_id(self, txn_id: str) -> Transaction | None: ...

    def save(self, txn: Transaction) -> Transaction: ...

    def find_by_account(self, account_id: str, limit: int) -> list[Transaction]: ...
