"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dat_schema.config import Config, load_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and .env file."""
    for name in ("SCHEMA_DIR", "FILE_PATTERN", "MAX_WORKERS", "LOG_LEVEL"):
        monkeypatch.delenv(f"DAT_SCHEMA_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = load_config()

    assert config.schema_dir == Path(".")
    assert config.file_pattern == "*.graphql"
    assert config.max_workers == 1
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DAT_SCHEMA_SCHEMA_DIR", "/data/schema")
    monkeypatch.setenv("DAT_SCHEMA_FILE_PATTERN", "*.gql")
    monkeypatch.setenv("DAT_SCHEMA_MAX_WORKERS", "4")
    monkeypatch.setenv("DAT_SCHEMA_LOG_LEVEL", "debug")

    config = Config()

    assert config.schema_dir == Path("/data/schema")
    assert config.file_pattern == "*.gql"
    assert config.max_workers == 4
    assert config.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("DAT_SCHEMA_MAX_WORKERS=3\n")

    assert Config().max_workers == 3


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("DAT_SCHEMA_MAX_WORKERS", "0")
    with pytest.raises(ValidationError):
        Config()

    monkeypatch.setenv("DAT_SCHEMA_MAX_WORKERS", "1")
    monkeypatch.setenv("DAT_SCHEMA_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Config()


def test_repr():
    assert repr(Config()) == (
        "Config(schema_dir='.', file_pattern='*.graphql', max_workers=1, log_level='WARNING')"
    )
