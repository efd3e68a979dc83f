"""Account service for opening and fetching accounts."""

import logging

from src.models.account import Account
from src.models.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidAmountError,
)
from src.repositories.base import AccountStore

logger = logging.getLogger(__name__)


class AccountService:
    """Service layer for account operations."""

    def __init__(self, account_repo: AccountStore):
        self._account_repo = account_repo

    def create_account(
        self,
        account_number: str,
        owner_name: str,
        balance: float = 0.0,
        account_id: str | None = None,
    ) -> Account:
        """
        Create a new account.

        Args:
            account_number: The unique account number
            owner_name: The account holder's name
            balance: Opening balance (default: 0.0)
            account_id: ID to use; the store assigns one when omitted

        Returns:
            The created Account

        Raises:
            AccountAlreadyExistsError: If the account number is already taken
            InvalidAmountError: If the opening balance is negative
        """
        if self._account_repo.exists_by_account_number(account_number):
            raise AccountAlreadyExistsError(f"Account {account_number} already exists")

        if balance < 0:
            raise InvalidAmountError(
                f"Cannot open an account with negative balance: {balance}."
            )

        account = self._account_repo.save(
            Account(
                id=account_id,
                account_number=account_number,
                owner_name=owner_name,
                balance=balance,
            )
        )
        logger.info("Opened account %s (%s) for %s", account.id, account_number, owner_name)
        return account

    def get_account(self, account_id: str) -> Account:
        """
        Fetch an account by ID, with its transactions oldest first.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        account = self._account_repo.find_with_transactions(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account
