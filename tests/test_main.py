"""
Tests for application assembly and startup
"""
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import Settings
from todo_api.app.core.logging_config import setup_logging
from todo_api.app.main import create_app
from todo_api.app.services.memory_service import InMemoryTodoService
from todo_api.app.services.mongo_service import MongoTodoService


def test_module_level_app_serves_memory_store():
    from todo_api.app import app

    assert isinstance(app.state.todo_service, InMemoryTodoService)


def test_memory_backend_built_from_settings():
    app = create_app(settings=Settings(storage_backend="memory"))
    assert isinstance(app.state.todo_service, InMemoryTodoService)


def test_explicit_store_is_used():
    store = InMemoryTodoService()
    app = create_app(store=store, settings=Settings(storage_backend="mongo"))
    assert app.state.todo_service is store


def test_unknown_backend_is_rejected():
    with pytest.raises(RuntimeError, match="Unknown TODO_STORAGE"):
        create_app(settings=Settings(storage_backend="sqlite"))


def test_mongo_backend_connects_on_startup_and_closes_on_shutdown(fake_collection):
    client = MagicMock()
    settings = Settings(storage_backend="mongo", mongodb_uri="mongodb://localhost:27017")
    app = create_app(settings=settings)
    assert app.state.todo_service is None

    with patch("todo_api.app.core.db.connect", AsyncMock(return_value=(client, fake_collection))) as mock_connect:
        with TestClient(app) as test_client:
            assert isinstance(app.state.todo_service, MongoTodoService)
            response = test_client.post("/api/todos", json={"body": "buy milk"})
            assert response.status_code == 201
            assert len(fake_collection.documents) == 1

    mock_connect.assert_awaited_once_with(settings)
    client.close.assert_called_once()


def test_mongo_startup_failure_is_fatal():
    app = create_app(settings=Settings(storage_backend="mongo", mongodb_uri=""))
    with pytest.raises(RuntimeError, match="MONGODB_URI"):
        with TestClient(app):
            pass


def test_cors_origin_list_parsing():
    settings = Settings(cors_origins="http://a.example, http://b.example ,")
    assert settings.cors_origin_list == ["http://a.example", "http://b.example"]


@pytest.fixture
def root_logging():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    added = []
    yield root, added
    for handler in list(root.handlers):
        if handler not in handlers and (handler in added or isinstance(handler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_log_level_applied_when_handlers_already_exist(root_logging):
    root_logger, added = root_logging
    root_logger.setLevel(logging.WARNING)
    existing = logging.StreamHandler()
    added.append(existing)
    root_logger.addHandler(existing)
    handler_count = len(root_logger.handlers)

    create_app(store=InMemoryTodoService(), settings=Settings(log_level="DEBUG"))

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == handler_count


def test_log_file_handler_added_once(root_logging, tmp_path):
    root_logger, _ = root_logging
    logfile = tmp_path / "todo.log"
    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert [h.baseFilename for h in file_handlers] == [str(logfile.resolve())]


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("verbose", "INFO"), ("", "INFO")],
)
def test_log_level_is_normalized(raw, expected):
    settings = Settings(log_level=raw)
    assert settings.log_level == expected
