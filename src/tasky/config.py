"""Configuration management for Tasky."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TASKY_HOME = Path(os.environ.get("TASKY_HOME", Path.home() / "tasky"))
CONFIG_FILE = TASKY_HOME / "config" / "tasky.conf"
DATA_DIR = TASKY_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "tasks.txt"


@dataclass
class Config:
    """Tasky configuration."""

    data_file: str = str(DEFAULT_DATA_FILE)
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    @property
    def data_path(self) -> Path:
        return Path(self.data_file).expanduser()


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from tasky.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "data_file":
                    config.data_file = value
                case "telegram_bot_token":
                    config.telegram_bot_token = value
                case "telegram_allowed_users":
                    try:
                        config.telegram_allowed_users = [
                            int(u.strip()) for u in value.split(",") if u.strip()
                        ]
                    except ValueError as e:
                        logger.warning(f"Failed to parse TELEGRAM_ALLOWED_USERS: {e}")

    if os.environ.get("TASKY_DATA_FILE"):
        config.data_file = os.environ["TASKY_DATA_FILE"]

    return config
