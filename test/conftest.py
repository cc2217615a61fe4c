"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite test database, log directory) before app imports
- Database cleanup for integration tests
- The session-scoped TestClient running the real application lifespan

Architecture:
- Unit tests (@pytest.mark.unit): in-memory repositories, see service/shop/unit/conftest.py
- Integration tests: real SQLAlchemy repositories on SQLite via aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'shop_test_{worker_id}_{os.getpid()}.db'
    if db_path.exists():
        db_path.unlink()
    os.environ['SQLALCHEMY_DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['DB_CREATE_TABLES_ON_STARTUP'] = 'true'
    os.environ.setdefault('DEBUG', 'false')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.db_setting import Base  # noqa: E402
import src.service.shop.driven_adapter.model  # noqa: E402, F401


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # Cleanup runs before any fixture that seeds data
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
def _clean_all_tables() -> None:
    # Sync engine on the same file: no event loop involved
    engine = create_engine(settings.DATABASE_URL_SYNC)
    try:
        Base.metadata.create_all(engine, checkfirst=True)
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())
    finally:
        engine.dispose()


@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
