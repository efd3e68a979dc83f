import logging
import discord
from discord.ext import commands
from dotenv import load_dotenv
from config.settings import Settings
from src.repositories.account_repo import AccountRepository
from src.repositories.database import Database
from src.repositories.transaction_repo import TransactionRepository
from src.services.account_service import AccountService
from src.services.transaction_service import TransactionService

extensions = (
    "cogs.bankcmd",
    )


def setup_logging(settings: Settings):
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    for name in ('discord', 'src', 'cogs'):
        logger = logging.getLogger(name)
        logger.setLevel(settings.log_level)
        logger.addHandler(handler)


class BankBot(commands.Bot):
    def __init__(self, *args, **kwargs):
        self.settings = kwargs.pop('settings')
        super().__init__(*args, **kwargs)
        self.db = Database(self.settings.db_path)
        self.db.create_tables()
        account_repo = AccountRepository(self.db)
        transaction_repo = TransactionRepository(self.db)
        self.account_service = AccountService(account_repo)
        self.transaction_service = TransactionService(
            account_repo, transaction_repo, atomic=self.db.transaction
        )

    async def setup_hook(self):
        for extension in extensions:
            await self.load_extension(extension)

    async def close(self):
        await super().close()
        self.db.close()


def main():
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    intents = discord.Intents.default()
    intents.message_content = True

    bot = BankBot(
        command_prefix=settings.command_prefix,
        owner_id=settings.owner_id,
        intents=intents,
        settings=settings,
    )
    bot.run(settings.discord_token, log_handler=None)


if __name__ == '__main__':
    main()
