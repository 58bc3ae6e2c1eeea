"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from refine_client.client.refine import RefineClient
from refine_client.config.manager import ConfigManager
from refine_client.config.models import ServerProfile

SERVER = "http://localhost:3333"


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ServerProfile:
    """Return a sample server profile for testing."""
    return ServerProfile(name="local", url=SERVER)


@pytest.fixture
def client(sample_profile: ServerProfile):
    with RefineClient(sample_profile) as refine:
        yield refine


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """A small CSV file to upload."""
    path = tmp_path / "addresses.csv"
    path.write_text("name,city\nAda,London\nGrace,Arlington\n", encoding="utf-8")
    return path


@pytest.fixture
def code_ok_body() -> str:
    return '{"code":"ok"}'


@pytest.fixture
def code_error_body() -> str:
    return '{"code":"error","message":"This is the error message."}'


@pytest.fixture
def metadata_body() -> str:
    """Sample get-project-metadata response."""
    return (
        '{"name":"Addresses","created":"2018-06-14T20:38:25Z",'
        '"modified":"2018-06-14T20:38:31Z","creator":"","contributors":"",'
        '"subject":"","description":"","rowCount":2,"title":"","homepage":"",'
        '"image":"","license":"","version":"","tags":["people","geo"],'
        '"customMetadata":{},"importOptionMetadata":[{"separator":","}],'
        '"id":1234567890}'
    )
