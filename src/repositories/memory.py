"""Dict-backed stores with the same contract as the SQLite repositories."""

import uuid
from dataclasses import replace
from threading import Lock

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError
from src.models.transaction import Transaction


class InMemoryAccountStore:
    """Account store kept in a dict, for tests and throwaway sessions."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}  # account_id -> Account
        self._lock = Lock()

    def find_by_id(self, account_id: str) -> Account | None:
        with self._lock:
            return self._accounts.get(account_id)

    def find_with_transactions(self, account_id: str) -> Account | None:
        # Stored objects keep their transaction list.
        return self.find_by_id(account_id)

    def save(self, account: Account) -> Account:
        with self._lock:
            if account.id is None:
                account = replace(account, id=uuid.uuid4().hex)
            for other in self._accounts.values():
                if other.id != account.id and other.account_number == account.account_number:
                    raise AccountAlreadyExistsError(
                        f"Account {account.account_number} already exists"
                    )
            self._accounts[account.id] = account
            return account

    def exists_by_account_number(self, account_number: str) -> bool:
        with self._lock:
            return any(a.account_number == account_number for a in self._accounts.values())


class InMemoryTransactionStore:
    """Append-only transaction store kept in a list."""

    def __init__(self):
        self._transactions: list[Transaction] = []
        self._lock = Lock()

    def find_by_id(self, txn_id: str) -> Transaction | None:
        with self._lock:
            return next((t for t in self._transactions if t.id == txn_id), None)

    def save(self, txn: Transaction) -> Transaction:
        with self._lock:
            if txn.id is None:
                txn = txn.with_id(uuid.uuid4().hex)
            self._transactions.append(txn)
            return txn

    def find_by_account(self, account_id: str, limit: int) -> list[Transaction]:
        with self._lock:
            owned = [t for t in self._transactions if t.account_id == account_id]
        return list(reversed(owned))[:limit]

    def __len__(self) -> int:
        return len(self._transactions)
