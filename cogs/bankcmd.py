import logging

from discord.ext import commands
from tabulate import tabulate

from src.models.exceptions import BankError
from src.models.transaction import Transaction, TransactionRequest, TransactionType

logger = logging.getLogger(__name__)


def format_amount(n: float) -> str:
    return '{:,.2f}'.format(n)


def render_statement(transactions: list[Transaction]) -> str:
    """Text table of transactions, one row each, in the given order."""
    header = ['Time', 'Type', 'Amount', 'Fee', 'Description']
    rows = [
        [
            t.timestamp.strftime('%m/%d %H:%M'),
            t.type.name,
            format_amount(t.amount),
            format_amount(t.fee),
            t.description,
        ]
        for t in transactions
    ]
    return tabulate(rows, headers=header, stralign='right', disable_numparse=True)


def render_fee_table() -> str:
    rows = [[t.name, format_amount(t.fee)] for t in TransactionType]
    return tabulate(rows, headers=['Type', 'Fee'], stralign='right', disable_numparse=True)


class BankCommands(commands.Cog):
    def __init__(self, bot):
        self.bot = bot

    @staticmethod
    def _account_id(user) -> str:
        return str(user.id)

    async def _error(self, ctx, err: BankError):
        await ctx.send('```' + str(err) + '```')

    @commands.command(name='register', help='$register balance(Optional) open an account')
    async def register(self, ctx, balance: float = 0.0):
        user = ctx.author
        account_id = self._account_id(user)
        try:
            self.bot.account_service.create_account(
                account_number=account_id[-9:],
                owner_name=user.display_name,
                balance=balance,
                account_id=account_id,
            )
        except BankError as err:
            await self._error(ctx, err)
        else:
            await ctx.send('```Congratulations! Your account is created!```')

    @commands.command(name='transaction', help='$transaction type amount description(Optional) charge a transaction plus its fee')
    async def transaction(self, ctx, type_name: str, amount: float, *, description: str = ''):
        user = ctx.author
        try:
            request = TransactionRequest(
                type=TransactionType.parse(type_name),
                amount=amount,
                description=description,
            )
            txn = self.bot.transaction_service.register_transaction(
                self._account_id(user), request
            )
        except BankError as err:
            await self._error(ctx, err)
        else:
            await ctx.send(
                '```' + user.display_name + ' registered ' + txn.type.name
                + ' of ' + format_amount(txn.amount)
                + ' (fee ' + format_amount(txn.fee) + ')```'
            )

    @commands.command(name='balance', help='$balance check account balance')
    async def balance(self, ctx):
        user = ctx.author
        try:
            balance = self.bot.transaction_service.get_global_balance(self._account_id(user))
        except BankError as err:
            await self._error(ctx, err)
        else:
            await ctx.send('```' + user.display_name + ' account balance: ' + format_amount(balance) + '```')

    @commands.command(name='record', help='$record n(Optional) show the n most recent transactions')
    async def record(self, ctx, n: int = 0):
        settings = self.bot.settings
        n = min(max(n, 0) or settings.record_default_count, settings.record_max_output)
        try:
            transactions = self.bot.transaction_service.pull_transactions(
                self._account_id(ctx.author), n
            )
        except BankError as err:
            await self._error(ctx, err)
            return
        if not transactions:
            await ctx.send('```No transaction found```')
            return
        await ctx.send('```' + render_statement(transactions) + '```')

    @commands.command(name='types', help='$types list transaction types and their fees')
    async def types(self, ctx):
        await ctx.send('```' + render_fee_table() + '```')


async def setup(bot):
    await bot.add_cog(BankCommands(bot))
    logger.info('bankcmd is loaded')
