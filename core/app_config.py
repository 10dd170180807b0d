"""Application configuration as an injectable dataclass."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class AppConfig:
    """Application configuration loaded from environment variables."""

    # Window
    window_title: str = "TsengCoin"
    window_width: int = 400
    window_height: int = 300

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    @staticmethod
    def from_env() -> "AppConfig":
        """Load config from .env file and environment variables."""
        load_dotenv()
        return AppConfig(
            window_title=os.getenv("TSENG_WINDOW_TITLE", "TsengCoin"),
            window_width=_env_int("TSENG_WINDOW_WIDTH", 400),
            window_height=_env_int("TSENG_WINDOW_HEIGHT", 300),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", "").strip(),
        )
