"""Pytest configuration and shared fixtures."""

import asyncio
import inspect

import pytest
from fastapi.testclient import TestClient

from task_manager_api.app.core.config import Settings
from task_manager_api.app.main import create_app
from task_manager_api.app.storage import InMemoryTaskStore, SQLiteTaskStore


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):
    """Execute async tests without external plugins."""
    testfunction = pyfuncitem.obj
    if inspect.iscoroutinefunction(testfunction):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            sig = inspect.signature(testfunction)
            call_kwargs = {name: pyfuncitem.funcargs[name] for name in sig.parameters}
            loop.run_until_complete(testfunction(**call_kwargs))
        finally:
            asyncio.set_event_loop(None)
            loop.close()
        return True
    return None


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing every path into a temporary directory"""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>Task Manager</h1>", encoding="utf-8")
    return Settings(
        task_store="memory",
        database_url=str(tmp_path / "tasks.db"),
        static_dir=str(static_dir),
        log_level="WARNING",
        cors_origins="*",
    )


@pytest.fixture
def memory_store():
    return InMemoryTaskStore()


@pytest.fixture
def sqlite_store(tmp_path):
    store = SQLiteTaskStore(tmp_path / "store.db")
    asyncio.run(store.connect())
    return store


@pytest.fixture
def client(test_settings, memory_store):
    """Test client serving from an in-memory store"""
    app = create_app(settings=test_settings, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client
