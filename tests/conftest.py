"""
Shared pytest fixtures for user directory tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from user_directory.core.config import Settings


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_directory",
        "USER_REPOSITORY_BACKEND": "memory",
        "PERSIST_PARTIAL_UPDATES": "false",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def memory_settings(mock_env):
    """Real Settings instance pointing at the in-memory repository."""
    return Settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.user_repository_backend = "memory"
    mock.persist_partial_updates = False
    mock.log_level = "INFO"
    mock.cors_allow_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_directory.core.config.get_settings", return_value=mock), patch(
        "user_directory.infrastructure.db.mongo_connection.get_settings", return_value=mock
    ):
        yield mock

