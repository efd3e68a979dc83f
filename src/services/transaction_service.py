"""Transaction service: fee computation, funds validation and debit."""

import logging
from contextlib import nullcontext
from threading import Lock
from typing import Callable, ContextManager

from src.models.account import Account
from src.models.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
)
from src.models.transaction import Transaction, TransactionRequest
from src.repositories.base import AccountStore, TransactionStore

logger = logging.getLogger(__name__)


class TransactionService:
    """Service layer for registering transactions against an account."""

    def __init__(
        self,
        account_repo: AccountStore,
        transaction_repo: TransactionStore,
        atomic: Callable[[], ContextManager] | None = None,
    ):
        """
        Initialize the TransactionService with repositories.

        Args:
            account_repo: Store for account data access
            transaction_repo: Store for transaction data access
            atomic: Factory for a context manager that makes the transaction
                write and the account write one unit (e.g. Database.transaction).
                Without it the two writes are sequential and not atomic.
        """
        self._account_repo = account_repo
        self._transaction_repo = transaction_repo
        self._atomic = atomic or nullcontext
        self._locks: dict[str, Lock] = {}
        self._locks_guard = Lock()

    def _lock_for(self, account_id: str) -> Lock:
        with self._locks_guard:
            return self._locks.setdefault(account_id, Lock())

    def _find_account(self, account_id: str) -> Account:
        account = self._account_repo.find_by_id(account_id) if account_id else None
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def register_transaction(
        self, account_id: str, request: TransactionRequest
    ) -> Transaction:
        """
        Charge a transaction and its fee to an account.

        The transaction is stored first, then the account with its reduced
        balance. The account object returned by the store is mutated in place.

        Args:
            account_id: The ID of the account to debit
            request: Type, amount and description of the transaction

        Returns:
            The stored Transaction

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is negative
            InsufficientFundsError: If amount plus fee exceeds the balance
        """
        # Only existing accounts get a lock; the balance is re-read under it.
        self._find_account(account_id)
        with self._lock_for(account_id):
            account = self._find_account(account_id)

            if request.amount < 0:
                raise InvalidAmountError(
                    f"Cannot register negative amount: {request.amount}. Amount must be positive."
                )

            fee = request.type.fee
            if request.amount + fee > account.balance:
                logger.info(
                    "Rejected %s of %s on account %s: balance %s",
                    request.type.name, request.amount, account_id, account.balance,
                )
                raise InsufficientFundsError()

            previous_balance = account.balance
            saved = None
            try:
                with self._atomic():
                    saved = self._transaction_repo.save(
                        Transaction.create(request, account.id)
                    )
                    account.balance = previous_balance - saved.total
                    account.transactions.append(saved)
                    self._account_repo.save(account)
            except Exception:
                if self._atomic is not nullcontext:
                    # The writes were rolled back, so the in-memory account follows.
                    account.balance = previous_balance
                    if saved is not None and account.transactions[-1:] == [saved]:
                        account.transactions.pop()
                raise

        logger.info(
            "Registered %s %s (fee %s) on account %s, balance now %s",
            saved.type.name, saved.amount, saved.fee, account_id, account.balance,
        )
        return saved

    def get_global_balance(self, account_id: str) -> float:
        """
        Get the current balance of an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        return self._find_account(account_id).balance

    def pull_transactions(self, account_id: str, n: int) -> list[Transaction]:
        """
        Get the N most recent transactions of an account, newest first.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        self._find_account(account_id)
        return self._transaction_repo.find_by_account(account_id, n)
