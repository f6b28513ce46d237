"""Shared test fixtures and factories."""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI

from gtd.client import TaskApi
from gtd.config.paths import ENV_VAR, get_gtd_home
from gtd.db.engine import Database
from gtd.server import create_app
from gtd.tasks import TaskStore

# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def gtd_home(monkeypatch, tmp_path: Path) -> Path:
    """Point GTD_HOME at a temp dir and drop env overrides for every test."""
    home = tmp_path / "gtd-home"
    monkeypatch.setenv(ENV_VAR, str(home))
    for env_var in ("GTD_DATABASE_URL", "GTD_API_URL", "GTD_LOG_LEVEL"):
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_gtd_home.cache_clear()
    yield home
    get_gtd_home.cache_clear()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Create a temporary test database."""
    db = Database(database_path=tmp_path / "test.db")
    await db.connect()
    await db.create_schema()

    yield db

    await db.disconnect()


@pytest.fixture
def task_store(database: Database) -> TaskStore:
    return TaskStore(database)


# =============================================================================
# Server / Client Fixtures
# =============================================================================


@pytest.fixture
def app(database: Database) -> FastAPI:
    """The API app wired to the test database (lifespan is not run)."""
    return create_app(database)


@pytest.fixture
async def http_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def task_api(http_client: httpx.AsyncClient) -> TaskApi:
    return TaskApi(client=http_client)


# =============================================================================
# CLI Test Helpers
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
