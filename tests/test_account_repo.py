"""Tests for AccountRepository."""

import sqlite3

import pytest
from datetime import datetime

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError
from src.models.transaction import Transaction, TransactionType
from src.repositories.account_repo import AccountRepository
from src.repositories.database import Database
from src.repositories.transaction_repo import TransactionRepository


@pytest.fixture
def in_memory_db():
    """Create an in-memory SQLite database for testing."""
    db = Database(":memory:")
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def account_repo(in_memory_db):
    """Create an AccountRepository instance with a fresh database."""
    return AccountRepository(in_memory_db)


def test_save_and_find_account(account_repo):
    """Save account, then find by id."""
    account = Account(
        id="12345",
        account_number="1000008",
        owner_name="John Doe",
        balance=5000.0,
    )

    saved = account_repo.save(account)
    assert saved.id == "12345"

    found = account_repo.find_by_id("12345")
    assert found is not None
    assert found.id == "12345"
    assert found.account_number == "1000008"
    assert found.owner_name == "John Doe"
    assert found.balance == 5000.0
    assert found.transactions == []


def test_save_assigns_id(account_repo):
    """An account without an ID gets one on first insert."""
    saved = account_repo.save(
        Account(id=None, account_number="1000008", owner_name="John Doe", balance=0.0)
    )

    assert saved.id
    assert account_repo.find_by_id(saved.id).account_number == "1000008"


def test_save_updates_existing(account_repo):
    """Saving again with the same id updates the row."""
    account = account_repo.save(
        Account(id="12345", account_number="1000008", owner_name="John Doe", balance=5000.0)
    )
    account.balance = 4000.0
    account_repo.save(account)

    found = account_repo.find_by_id("12345")
    assert found.balance == 4000.0
    count = account_repo._conn.execute("SELECT COUNT(*) FROM Accounts").fetchone()[0]
    assert count == 1


def test_save_duplicate_account_number(account_repo):
    """Should raise AccountAlreadyExistsError."""
    account_repo.save(
        Account(id="1", account_number="1000008", owner_name="Alice", balance=100.0)
    )

    duplicate = Account(id="2", account_number="1000008", owner_name="Bob", balance=200.0)
    with pytest.raises(AccountAlreadyExistsError):
        account_repo.save(duplicate)

    assert account_repo.find_by_id("2") is None


def test_save_missing_account_number_is_not_a_duplicate(account_repo):
    """Only UNIQUE violations become AccountAlreadyExistsError."""
    account = Account(id="1", account_number=None, owner_name="Alice", balance=100.0)

    with pytest.raises(sqlite3.IntegrityError, match="NOT NULL"):
        account_repo.save(account)

    assert account_repo.find_by_id("1") is None


def test_find_by_id_not_found(account_repo):
    """Should return None."""
    assert account_repo.find_by_id("nonexistent") is None


def test_exists_by_account_number(account_repo):
    """Check account number taken/free."""
    assert account_repo.exists_by_account_number("1000008") is False

    account_repo.save(
        Account(id="1", account_number="1000008", owner_name="Alice", balance=100.0)
    )

    assert account_repo.exists_by_account_number("1000008") is True
    assert account_repo.exists_by_account_number("1000009") is False


def test_find_with_transactions(in_memory_db, account_repo):
    """Transactions come back oldest first; find_by_id skips them."""
    account_repo.save(
        Account(id="1", account_number="1000008", owner_name="Alice", balance=100.0)
    )
    transaction_repo = TransactionRepository(in_memory_db)
    for description in ("first", "second"):
        transaction_repo.save(
            Transaction(
                id=None,
                type=TransactionType.TRANSFER,
                amount=10.0,
                fee=1.5,
                timestamp=datetime.now(),
                description=description,
                account_id="1",
            )
        )

    found = account_repo.find_with_transactions("1")
    assert [t.description for t in found.transactions] == ["first", "second"]
    assert account_repo.find_by_id("1").transactions == []
    assert account_repo.find_with_transactions("missing") is None
