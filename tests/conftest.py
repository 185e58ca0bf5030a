"""
Pytest configuration and fixtures for the user service tests.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_service.core.config import Settings
from user_service.core.container import Container, clear_container_cache
from user_service.main import create_app

EXAMPLE_USER_ID = "550e8400-e29b-41d4-a716-446655440000"
NIL_USER_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture(autouse=True)
def clear_caches() -> Generator[None, None, None]:
    """
    Clear all caches before and after each test.

    This ensures test isolation by resetting singleton state.
    """
    clear_container_cache()
    yield
    clear_container_cache()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """
    Create a temporary config.yaml file for testing.

    Args:
        tmp_path: Pytest tmp_path fixture.

    Returns:
        Path to the temporary config file.
    """
    config_content = """
server:
  host: "127.0.0.1"
  port: 8181
  log_level: "warning"

docs:
  title: "Test API"
  theme: "laserwave"
"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(config_content)
    return config_path


@pytest.fixture
def test_settings(temp_config_file: Path) -> Settings:
    """
    Create test settings from temporary config file.

    Args:
        temp_config_file: Path to temporary config file.

    Returns:
        Settings instance loaded from temporary config.
    """
    return Settings.from_yaml(temp_config_file)


@pytest.fixture
def test_container(test_settings: Settings) -> Container:
    """
    Create a test container with test settings.

    Args:
        test_settings: Test settings fixture.

    Returns:
        Container instance with test settings.
    """
    return Container(settings=test_settings)


@pytest.fixture
def app() -> FastAPI:
    """Create an application with default settings."""
    return create_app(Container(settings=Settings()))


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for the FastAPI application.

    Yields:
        TestClient instance.
    """
    with TestClient(app) as test_client:
        yield test_client
