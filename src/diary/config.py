"""Configuration management for Diary."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DIARY_HOME = Path(os.environ.get("DIARY_HOME", Path.home() / "diary"))
CONFIG_FILE = DIARY_HOME / "config" / "diary.conf"
DATA_DIR = DIARY_HOME / "data"

BACKENDS = ("csv", "google")


@dataclass
class Config:
    """Diary configuration."""

    backend: str = "csv"
    sheet_name: str = "diary"
    timezone: str = "Asia/Tokyo"
    csv_dir: str = ""
    # Google Sheets settings
    spreadsheet_id: str = ""
    google_client_secret_file: str = ""
    google_token_dir: str = ""
    # Web server settings
    host: str = "127.0.0.1"
    port: int = 5000


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from diary.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "backend":
                if value.lower() in BACKENDS:
                    config.backend = value.lower()
                else:
                    logger.warning(f"Unknown BACKEND '{value}', using '{config.backend}'")
            case "sheet_name":
                config.sheet_name = value
            case "timezone":
                try:
                    ZoneInfo(value)
                    config.timezone = value
                except (ZoneInfoNotFoundError, ValueError):
                    logger.warning(f"Unknown TIMEZONE '{value}', using '{config.timezone}'")
            case "csv_dir":
                config.csv_dir = value
            case "spreadsheet_id":
                config.spreadsheet_id = value
            case "google_client_secret_file":
                config.google_client_secret_file = value
            case "google_token_dir":
                config.google_token_dir = value
            case "host":
                config.host = value
            case "port":
                try:
                    config.port = int(value)
                except ValueError:
                    logger.warning(f"Invalid PORT '{value}', using {config.port}")

    return config
