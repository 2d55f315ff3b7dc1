"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores the settings that must be known before opening the DB (where the
database file lives, how long to wait on a locked file, refresh cadence).
Config lives in ~/.ledger/config.json; LEDGER_* environment variables fill
in anything the file leaves out.
"""
import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path.home() / ".ledger"
CONFIG_FILE = CONFIG_DIR / "config.json"

logger = logging.getLogger(__name__)


class LedgerConfig(BaseSettings):
    """Connection settings handed to DatabaseManager."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        extra="ignore",
        frozen=True,
    )

    db_folder: Optional[str] = None
    db_name: str = Field(default="finance_tracker.db", min_length=1)
    timeout: float = Field(default=5.0, gt=0)
    refresh_interval_ms: int = Field(default=60_000, gt=0)

    @property
    def db_path(self) -> str:
        if self.db_name == ":memory:":
            return self.db_name
        if self.db_folder:
            return os.path.join(self.db_folder, self.db_name)
        return self.db_name


def load_config(path: Path = CONFIG_FILE) -> dict:
    """Returns {} on missing or corrupt file, never raises."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, path: Path = CONFIG_FILE) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Could not save config %s: %s", path, e)
        tmp.unlink(missing_ok=True)


def get_ledger_config(path: Path = CONFIG_FILE) -> LedgerConfig:
    """Validated settings from the config file; invalid files fall back to defaults."""
    try:
        return LedgerConfig(**load_config(path))
    except ValidationError as e:
        logger.warning("Invalid settings in %s, using defaults: %s", path, e)
        return LedgerConfig()


def ensure_config(path: Path = CONFIG_FILE) -> LedgerConfig:
    """Write the default settings on first run so there is a file to edit."""
    if not path.exists():
        save_config(LedgerConfig().model_dump(), path)
    return get_ledger_config(path)
