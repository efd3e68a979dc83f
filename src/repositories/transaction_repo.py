"""Transaction repository for database operations."""

import logging
import sqlite3
import uuid
from datetime import datetime

from src.models.transaction import Transaction, TransactionType
from src.repositories.database import Database

logger = logging.getLogger(__name__)

SELECT_COLUMNS = "id, Type, Amount, Fee, Timestamp, Description, AccountId"


def row_to_transaction(row: sqlite3.Row) -> Transaction:
    """Build a Transaction from a Transactions row."""
    return Transaction(
        id=row["id"],
        type=TransactionType[row["Type"]],
        amount=row["Amount"],
        fee=row["Fee"],
        timestamp=datetime.fromisoformat(row["Timestamp"]),
        description=row["Description"],
        account_id=row["AccountId"],
    )


class TransactionRepository:
    """Repository for Transaction data access operations."""

    def __init__(self, db: Database):
        """
        Initialize the repository with a database.

        Args:
            db: Shared Database owning the SQLite connection
        """
        self._db = db
        self._conn = db.conn

    def save(self, txn: Transaction) -> Transaction:
        """
        Append a transaction.

        Args:
            txn: The Transaction to store; an ID is assigned when it has none

        Returns:
            The stored Transaction, carrying its ID
        """
        if txn.id is None:
            txn = txn.with_id(uuid.uuid4().hex)

        with self._db.transaction():
            self._conn.execute(
                """
                INSERT INTO Transactions (id, Type, Amount, Fee, Timestamp, Description, AccountId)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    txn.id,
                    txn.type.name,
                    txn.amount,
                    txn.fee,
                    txn.timestamp.isoformat(),
                    txn.description,
                    txn.account_id,
                ),
            )
        logger.debug("Stored transaction %s for account %s", txn.id, txn.account_id)
        return txn

    def find_by_id(self, txn_id: str) -> Transaction | None:
        """
        Find a transaction by ID.

        Args:
            txn_id: The transaction ID to search for

        Returns:
            Transaction object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f"SELECT {SELECT_COLUMNS} FROM Transactions WHERE id = ?",
            (txn_id,),
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return row_to_transaction(row)

    def find_by_account(self, account_id: str, limit: int) -> list[Transaction]:
        """
        Find the most recent transactions of an account.

        Args:
            account_id: The owning account's ID
            limit: Maximum number of transactions to return

        Returns:
            List of transactions, newest first
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f"""SELECT {SELECT_COLUMNS} FROM Transactions
               WHERE AccountId = ? ORDER BY seq DESC LIMIT ?""",
            (account_id, limit),
        )
        return [row_to_transaction(row) for row in cursor.fetchall()]
