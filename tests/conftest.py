from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from todo_registry_api.app.core.config import Settings
from todo_registry_api.app.main import create_app
from todo_registry_api.app.services.dispatcher import CallDispatcher
from todo_registry_api.app.services.registry import TodoRegistry


@pytest.fixture()
def registry() -> TodoRegistry:
    return TodoRegistry()


@pytest.fixture()
def small_registry() -> TodoRegistry:
    return TodoRegistry(capacity=4, page_size=2)


@pytest.fixture()
def dispatcher(registry: TodoRegistry) -> CallDispatcher:
    return CallDispatcher(registry)


@pytest.fixture()
def app_settings() -> Settings:
    return Settings(page_size=3, capacity=5)


@pytest.fixture()
def api(app_settings: Settings) -> TestClient:
    with TestClient(create_app(app_settings)) as client:
        yield client
