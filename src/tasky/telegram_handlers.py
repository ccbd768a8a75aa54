"""Telegram message handlers."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from .session import Session

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Tasky Commands\n\n"
    "todo <desc> - Add a todo\n"
    "deadline <desc> /by <when> - Add a deadline\n"
    "event <desc> /from <start> /to <end> - Add an event\n"
    "list - Show all tasks\n"
    "find <keyword> - Show matching tasks\n"
    "mark <n> / unmark <n> - Mark task n done or not done\n"
    "delete <n> - Remove task n\n"
    "bye - Save and stop"
)


def get_session(context: ContextTypes.DEFAULT_TYPE) -> Session:
    return context.bot_data["session"]


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text(get_session(context).greet())


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.message.reply_text(HELP_TEXT)


async def command_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle a plain text message as a task command."""
    reply = get_session(context).handle_command(update.message.text)
    await update.message.reply_text(reply.text)

    if reply.exit:
        logger.info("Farewell sent, stopping bot")
        context.application.stop_running()
