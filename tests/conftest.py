"""
Shared pytest fixtures and configuration for all tests.

This module provides fixtures for:
- Temporary directories and connection config files
- Deterministic environment lookups
- Recording adapter builders and a factory wired to them
"""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

from policy_adapter.factories.adapter_factory import AdapterFactory
from tests.fixtures.fake_builders import RecordingFileBuilder, RecordingOrmBuilder, env_lookup


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test."""
    temp_path = Path(tempfile.mkdtemp(prefix="policy_adapter_test_"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_config_dir(temp_dir: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = temp_dir / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def config_path(temp_config_dir: Path) -> Path:
    """Path of the connection config file (not created)."""
    return temp_config_dir / "connection_config.json"


@pytest.fixture
def write_config(config_path: Path) -> Callable[[Any], Path]:
    """Write a connection config file.

    Dicts are serialized as JSON; strings are written verbatim so tests
    can produce malformed content.
    """
    def _write(content: Any) -> Path:
        if isinstance(content, str):
            config_path.write_text(content, encoding='utf-8')
        else:
            config_path.write_text(json.dumps(content), encoding='utf-8')
        return config_path
    return _write


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Connection config with a MySQL DSN and placeholders."""
    return {
        "Driver": "mysql",
        "Connection": "$DB_USER:$DB_PASSWORD@db.internal:3306/",
        "Enforcer": "rbac",
        "DBSpecified": False
    }


@pytest.fixture
def sample_env() -> Dict[str, str]:
    """Environment values matching sample_config_data placeholders."""
    return {
        "DB_USER": "casbin",
        "DB_PASSWORD": "s3cret",
    }


@pytest.fixture
def file_builder() -> RecordingFileBuilder:
    """Recording file adapter builder."""
    return RecordingFileBuilder()


@pytest.fixture
def orm_builder() -> RecordingOrmBuilder:
    """Recording ORM adapter builder."""
    return RecordingOrmBuilder()


@pytest.fixture
def factory(file_builder, orm_builder, config_path, sample_env) -> AdapterFactory:
    """AdapterFactory wired to recording builders, the temp config path and a fixed environment."""
    return AdapterFactory(
        file_builder=file_builder,
        orm_builder=orm_builder,
        lookup=env_lookup(sample_env),
        config_path=str(config_path),
    )
