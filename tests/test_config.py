"""Tests for configuration loading."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from frontapp_mcp_server import config as config_module
from frontapp_mcp_server.config import ConfigurationError, FrontConfig, load_config

ENV_VARS = ["FRONT_API_TOKEN", "DEFAULT_INBOX_ID", "FRONT_API_BASE_URL", "FRONT_REQUEST_TIMEOUT"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear Front env vars and run from an empty directory."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config", None)
    return monkeypatch


def test_defaults():
    config = FrontConfig()
    assert config.api_token is None
    assert config.base_url == "https://api2.frontapp.com"
    assert config.default_inbox_id is None
    assert config.request_timeout_s == 30.0


def test_from_env(clean_env):
    clean_env.setenv("FRONT_API_TOKEN", "secret")
    clean_env.setenv("DEFAULT_INBOX_ID", "inb_9")
    clean_env.setenv("FRONT_API_BASE_URL", "https://front.example")
    clean_env.setenv("FRONT_REQUEST_TIMEOUT", "12.5")

    config = FrontConfig.from_env()

    assert config.api_token == "secret"
    assert config.default_inbox_id == "inb_9"
    assert config.base_url == "https://front.example"
    assert config.request_timeout_s == 12.5


def test_from_env_empty(clean_env):
    config = FrontConfig.from_env()
    assert config == FrontConfig()


def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"api_token": "file-token", "default_inbox_id": "inb_f"}))

    config = FrontConfig.from_file(path)

    assert config.api_token == "file-token"
    assert config.default_inbox_id == "inb_f"
    assert config.base_url == "https://api2.frontapp.com"


def test_from_missing_file(tmp_path):
    assert FrontConfig.from_file(tmp_path / "missing.json") == FrontConfig()


def test_load_config_prefers_local_file(clean_env, tmp_path):
    clean_env.setenv("FRONT_API_TOKEN", "env-token")
    (tmp_path / "config.json").write_text(json.dumps({"api_token": "file-token"}))

    assert load_config().api_token == "file-token"


def test_get_config_is_cached(clean_env):
    clean_env.setenv("FRONT_API_TOKEN", "first")
    first = config_module.get_config()
    clean_env.setenv("FRONT_API_TOKEN", "second")

    assert config_module.get_config() is first
    assert first.api_token == "first"


def test_resolve_inbox_id():
    config = FrontConfig(default_inbox_id="inb_default")
    assert config.resolve_inbox_id("inb_explicit") == "inb_explicit"
    assert config.resolve_inbox_id(None) == "inb_default"


def test_resolve_inbox_id_missing():
    with pytest.raises(ConfigurationError, match="DEFAULT_INBOX_ID"):
        FrontConfig().resolve_inbox_id(None)


def test_repr_hides_token():
    assert "secret" not in repr(FrontConfig(api_token="secret"))
