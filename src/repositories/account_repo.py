"""Account repository for database operations."""

import logging
import sqlite3
import uuid
from dataclasses import replace

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError
from src.repositories.database import Database
from src.repositories.transaction_repo import SELECT_COLUMNS, row_to_transaction

logger = logging.getLogger(__name__)


class AccountRepository:
    """Repository for Account data access operations."""

    def __init__(self, db: Database):
        """
        Initialize the repository with a database.

        Args:
            db: Shared Database owning the SQLite connection
        """
        self._db = db
        self._conn = db.conn

    def find_by_id(self, account_id: str) -> Account | None:
        """
        Find an account by ID, without its transaction history.

        Args:
            account_id: The account ID to search for

        Returns:
            Account object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            "SELECT id, AccountNumber, OwnerName, Balance FROM Accounts WHERE id = ?",
            (account_id,),
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return Account(
            id=row["id"],
            account_number=row["AccountNumber"],
            owner_name=row["OwnerName"],
            balance=row["Balance"],
        )

    def find_with_transactions(self, account_id: str) -> Account | None:
        """
        Find an account by ID, with its transactions oldest first.

        Args:
            account_id: The account ID to search for

        Returns:
            Account object if found, None otherwise
        """
        account = self.find_by_id(account_id)
        if account is None:
            return None

        cursor = self._conn.cursor()
        cursor.execute(
            f"SELECT {SELECT_COLUMNS} FROM Transactions WHERE AccountId = ? ORDER BY seq",
            (account_id,),
        )
        account.transactions = [row_to_transaction(row) for row in cursor.fetchall()]
        return account

    def save(self, account: Account) -> Account:
        """
        Insert or update an account.

        Args:
            account: The Account to store; an ID is assigned when it has none

        Returns:
            The stored Account

        Raises:
            AccountAlreadyExistsError: If another account already uses the account number
        """
        if account.id is None:
            account = replace(account, id=uuid.uuid4().hex)

        try:
            with self._db.transaction():
                self._conn.execute(
                    """
                    INSERT INTO Accounts (id, AccountNumber, OwnerName, Balance)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        AccountNumber = excluded.AccountNumber,
                        OwnerName = excluded.OwnerName,
                        Balance = excluded.Balance
                """,
                    (account.id, account.account_number, account.owner_name, account.balance),
                )
        except sqlite3.IntegrityError as err:
            if "UNIQUE" not in str(err):
                raise
            raise AccountAlreadyExistsError(
                f"Account {account.account_number} already exists"
            ) from None
        logger.debug("Stored account %s (balance %s)", account.id, account.balance)
        return account

    def exists_by_account_number(self, account_number: str) -> bool:
        """
        Check if an account number is taken.

        Args:
            account_number: The account number to check

        Returns:
            True if an account uses it, False otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute("SELECT 1 FROM Accounts WHERE AccountNumber = ?", (account_number,))
        return cursor.fetchone() is not None
