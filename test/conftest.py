"""
Test Configuration and Fixtures

This module provides:
- A file-backed SQLite database (aiosqlite) shared by the app under test
- Table cleanup between integration tests
- User fixtures (manager, salespeople) and a logged-in HTTP client

Architecture:
- Unit tests (@pytest.mark.unit): pure domain / use case tests with AsyncMock repos
- Integration tests: real app through TestClient with proper cleanup
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings reads DATABASE_URL at import time
# =============================================================================
import os
from pathlib import Path


_TEST_DIR = Path(__file__).parent


def _test_db_path() -> Path:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    return _TEST_DIR / f'test_auditorium_{worker_id}.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_test_db_path()}'

    # Create test log directory
    test_log_dir = _TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import Base  # noqa: E402
from test.shared.utils import create_user, login_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_SALESPERSON_EMAIL,
    ANOTHER_SALESPERSON_NAME,
    DEFAULT_PASSWORD,
    TEST_MANAGER_EMAIL,
    TEST_MANAGER_NAME,
    TEST_SALESPERSON_EMAIL,
    TEST_SALESPERSON_NAME,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    # Start from an empty file, the app lifespan creates the tables
    _test_db_path().unlink(missing_ok=True)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
async def _clean_all_tables() -> None:
    import src.service.auditorium.driven_adapter.model  # noqa: F401

    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(delete(table))
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
def clean_database(client: TestClient) -> Generator[None, None, None]:
    # Depends on client so the lifespan has created the tables
    asyncio.run(_clean_all_tables())
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    # Lazily get client to avoid creating it for unit tests
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# User Fixtures (tables are cleaned per test, so users are per test too)
# =============================================================================
@pytest.fixture
def manager_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, TEST_MANAGER_EMAIL, DEFAULT_PASSWORD, TEST_MANAGER_NAME, 'manager'
    )


@pytest.fixture
def salesperson_user(client: TestClient, manager_user: dict[str, Any]) -> dict[str, Any]:
    return create_user(
        client,
        TEST_SALESPERSON_EMAIL,
        DEFAULT_PASSWORD,
        TEST_SALESPERSON_NAME,
        'salesperson',
        manager_id=manager_user['id'],
    )


@pytest.fixture
def another_salesperson_user(client: TestClient, manager_user: dict[str, Any]) -> dict[str, Any]:
    return create_user(
        client,
        ANOTHER_SALESPERSON_EMAIL,
        DEFAULT_PASSWORD,
        ANOTHER_SALESPERSON_NAME,
        'salesperson',
        manager_id=manager_user['id'],
    )


@pytest.fixture
def login_as(client: TestClient) -> Callable[[dict[str, Any]], TestClient]:
    """Log the shared client in as the given user (cookie auth)"""

    def _login(user: dict[str, Any]) -> TestClient:
        client.cookies.clear()
        login_user(client, user['email'], DEFAULT_PASSWORD)
        return client

    return _login
