"""Tasky Telegram Bot."""

import logging
from pathlib import Path

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from .adapters.file_store import FileTaskStore
from .config import Config, load_config
from .session import Session
from .telegram_handlers import command_handler, help_handler, start_handler

logger = logging.getLogger(__name__)


class AuthFilter(filters.MessageFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def filter(self, message) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = message.from_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config: Config, session: Session) -> Application:
    """Create and configure the Telegram bot application."""
    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to tasky.conf"
        )

    app = Application.builder().token(config.telegram_bot_token).build()
    app.bot_data["session"] = session

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(
        MessageHandler(filters.TEXT & ~filters.COMMAND & auth_filter, command_handler)
    )

    async def unauthorized_handler(update: Update, context):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in tasky.conf"
        )

    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def run_bot(config: Config | None = None, data_file: Path | str | None = None):
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    if config is None:
        config = load_config()
    session = Session(FileTaskStore(data_file or config.data_path))
    app = create_application(config, session)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting Tasky Telegram bot...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
