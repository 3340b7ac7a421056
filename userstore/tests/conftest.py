"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from userstore.models.domain import User
from userstore.repositories.user_repository import UserRepository
from userstore.services import config_service


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Isolate tests from USERSTORE_* variables and the cached config."""
    monkeypatch.delenv(config_service.CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(config_service.LOG_LEVEL_ENV_VAR, raising=False)
    config_service.reset_config_service()
    yield
    config_service.reset_config_service()


@pytest.fixture
def repo():
    """Empty strict user repository."""
    return UserRepository()


@pytest.fixture
def alice():
    return User(id=1, name="Alice", age=22)


@pytest.fixture
def bob():
    return User(id=2, name="Bob", age=25)


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path."""
    def _write(content: str) -> Path:
        path = tmp_path / "repository_config.json"
        path.write_text(content, encoding='utf-8')
        return path
    return _write
