"""Tests for the bank Discord commands."""

import asyncio
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from cogs.bankcmd import BankCommands, render_fee_table, render_statement
from config.settings import Settings
from src.models.transaction import Transaction, TransactionType
from src.repositories.memory import InMemoryAccountStore, InMemoryTransactionStore
from src.services.account_service import AccountService
from src.services.transaction_service import TransactionService


@pytest.fixture
def bot():
    account_repo = InMemoryAccountStore()
    transaction_repo = InMemoryTransactionStore()
    return SimpleNamespace(
        settings=Settings(discord_token='test_token'),
        account_service=AccountService(account_repo),
        transaction_service=TransactionService(account_repo, transaction_repo),
    )


@pytest.fixture
def cog(bot):
    return BankCommands(bot)


@pytest.fixture
def ctx():
    return SimpleNamespace(
        author=SimpleNamespace(id=1234567890, display_name='Alice'),
        send=AsyncMock(),
    )


def _run(command, cog, ctx, *args, **kwargs):
    asyncio.run(command.callback(cog, ctx, *args, **kwargs))
    return ctx.send.await_args.args[0]


def test_register_creates_account(cog, ctx, bot):
    reply = _run(cog.register, cog, ctx, 5000.0)

    assert 'created' in reply
    account = bot.account_service.get_account('1234567890')
    assert account.account_number == '234567890'
    assert account.owner_name == 'Alice'
    assert account.balance == 5000.0


def test_register_twice_reports_error(cog, ctx):
    _run(cog.register, cog, ctx)
    reply = _run(cog.register, cog, ctx)

    assert reply == '```Account 234567890 already exists```'


def test_transaction_debits_balance(cog, ctx, bot):
    _run(cog.register, cog, ctx, 5000.0)

    reply = _run(cog.transaction, cog, ctx, 'online-purchase', 100.0, description='Books')

    assert 'ONLINE_PURCHASE' in reply
    assert '5.00' in reply
    assert bot.transaction_service.get_global_balance('1234567890') == pytest.approx(4895.0)


def test_transaction_insufficient_funds(cog, ctx):
    _run(cog.register, cog, ctx, 5000.0)

    reply = _run(cog.transaction, cog, ctx, 'withdraw_atm', 6000.0)

    assert reply == '```Insufficient balance for transaction```'


def test_transaction_unknown_type(cog, ctx):
    _run(cog.register, cog, ctx, 5000.0)

    reply = _run(cog.transaction, cog, ctx, 'lottery', 1.0)

    assert 'Unknown transaction type' in reply


def test_balance_without_account(cog, ctx):
    reply = _run(cog.balance, cog, ctx)

    assert reply == '```Account with ID 1234567890 not found```'


def test_balance(cog, ctx):
    _run(cog.register, cog, ctx, 5000.0)

    reply = _run(cog.balance, cog, ctx)

    assert reply == '```Alice account balance: 5,000.00```'


def test_record(cog, ctx):
    _run(cog.register, cog, ctx, 5000.0)
    _run(cog.transaction, cog, ctx, 'transfer', 10.0, description='rent')

    reply = _run(cog.record, cog, ctx)

    assert 'TRANSFER' in reply
    assert 'rent' in reply


def test_record_empty(cog, ctx):
    _run(cog.register, cog, ctx)

    reply = _run(cog.record, cog, ctx)

    assert reply == '```No transaction found```'


def test_render_statement():
    txn = Transaction(
        id='1',
        type=TransactionType.ATM_DEPOSIT,
        amount=1234.5,
        fee=2.0,
        timestamp=datetime(2024, 1, 15, 10, 30),
        description='cash',
        account_id='12345',
    )

    table = render_statement([txn])
    lines = table.splitlines()

    assert lines[0].split() == ['Time', 'Type', 'Amount', 'Fee', 'Description']
    assert '01/15 10:30' in lines[2]
    assert 'ATM_DEPOSIT' in lines[2]
    assert '1,234.50' in lines[2]


def test_render_fee_table():
    table = render_fee_table()

    for transaction_type in TransactionType:
        assert transaction_type.name in table
