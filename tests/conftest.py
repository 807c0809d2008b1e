import pytest
import structlog
from fastapi.testclient import TestClient

from app.main import create_app
from app.store import TodoStore

# cached loggers would bypass structlog.testing.capture_logs
structlog.configure(cache_logger_on_first_use=False)


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def c(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def new_todo():
    return {
        "task": "Buy milk and eggs",
        "description": "Get groceries for the week",
        "priority": "medium",
        "dueDate": "2024-02-01",
        "tags": ["errand"],
    }
