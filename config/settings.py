"""Configuration management for the bank bot."""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the bank bot.

    Values come from the environment; everything except the Discord token
    has a default.
    """

    # Discord Configuration (required)
    discord_token: str

    # Discord Configuration
    command_prefix: str = '$'
    owner_id: int | None = None

    # Database Configuration
    db_path: str = 'bank.db'

    # Logging Configuration
    log_file: str = 'bankbot.log'
    log_level: str = 'INFO'

    # Output
    record_default_count: int = 5
    record_max_output: int = 20

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If required environment variables are not set.
        """
        discord_token = os.getenv('DISCORD_TOKEN')
        if not discord_token:
            raise ValueError("DISCORD_TOKEN environment variable is required")

        owner_id = os.getenv('BANK_OWNER_ID')

        return cls(
            discord_token=discord_token,
            command_prefix=os.getenv('BANK_COMMAND_PREFIX', cls.command_prefix),
            owner_id=int(owner_id) if owner_id else None,
            db_path=os.getenv('BANK_DB_PATH', cls.db_path),
            log_file=os.getenv('BANK_LOG_FILE', cls.log_file),
            log_level=os.getenv('BANK_LOG_LEVEL', cls.log_level).upper(),
            record_default_count=int(os.getenv('BANK_RECORD_DEFAULT_COUNT', cls.record_default_count)),
            record_max_output=int(os.getenv('BANK_RECORD_MAX_OUTPUT', cls.record_max_output)),
        )
