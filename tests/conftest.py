"""Shared pytest fixtures: a fresh on-disk ledger per test."""

from pathlib import Path

import pytest

from database.db_manager import DatabaseManager
from database.ledger_store import LedgerStore
from services.ledger_service import LedgerService
from utils.app_config import LedgerConfig


@pytest.fixture
def config(tmp_path: Path) -> LedgerConfig:
    return LedgerConfig(db_folder=str(tmp_path), db_name="test_ledger.db")


@pytest.fixture
def db(config: LedgerConfig) -> DatabaseManager:
    manager = DatabaseManager(config)
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def store(db: DatabaseManager) -> LedgerStore:
    return LedgerStore(db)


@pytest.fixture
def service(store: LedgerStore) -> LedgerService:
    return LedgerService(store)


@pytest.fixture
def broken_store(config: LedgerConfig) -> LedgerStore:
    """Store over a database whose schema was never created."""
    manager = DatabaseManager(config)
    yield LedgerStore(manager)
    manager.close()


@pytest.fixture
def unreachable_store(tmp_path: Path) -> LedgerStore:
    """Store pointing at a folder that does not exist."""
    manager = DatabaseManager(
        LedgerConfig(db_folder=str(tmp_path / "missing" / "dir"), db_name="x.db")
    )
    yield LedgerStore(manager)
    manager.close()
