import logging
import os
import sqlite3
import sys

import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.ledger_store import LedgerStore
from services.ledger_service import LedgerService
from ui.app_window import AppWindow
from utils.app_config import ensure_config
from utils.constants import APP_NAME

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("ledger")


def main():
    # ── Bootstrap: read connection settings from pre-DB config ───────────────
    config = ensure_config()

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager(config)
    try:
        db.initialize()
    except sqlite3.Error:
        # The window still opens and reports the failure through the store.
        logger.exception("Could not initialize ledger database at %s", db.db_path)

    # ── Store / service ──────────────────────────────────────────────────────
    store = LedgerStore(db)
    ledger_svc = LedgerService(store)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode("dark")
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        ledger_service=ledger_svc,
        refresh_interval_ms=config.refresh_interval_ms,
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    logger.info("Starting %s with database %s", APP_NAME, db.db_path)
    app.mainloop()


if __name__ == "__main__":
    main()
