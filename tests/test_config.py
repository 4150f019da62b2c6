# ==============================================
# Tests for Configuration Management
# ==============================================

import pytest

from linkytime import config as config_module
from linkytime.config import AppConfig, get_config, reset_config

ENV_VARS = [
    "STORAGE_BACKEND", "DATA_FILE", "AUTOSAVE", "OPEN_LINKS_IN_BROWSER",
    "MONGO_HOST", "MONGO_PORT", "MONGO_USER", "MONGO_PASSWORD",
    "MONGO_DATABASE", "MONGO_COLLECTION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty environment and a fresh singleton."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    reset_config()
    yield
    reset_config()


class TestGetConfig:
    def test_defaults(self):
        config = get_config()
        assert config == AppConfig()
        assert config.storage.backend == "json"
        assert config.storage.data_file == "data/linkytime.json"
        assert config.storage.autosave is False
        assert config.open_links_in_browser is True
        assert config.mongo.port == 27017

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "Mongo")
        monkeypatch.setenv("DATA_FILE", "/tmp/meetings.json")
        monkeypatch.setenv("AUTOSAVE", "yes")
        monkeypatch.setenv("OPEN_LINKS_IN_BROWSER", "false")
        monkeypatch.setenv("MONGO_PORT", "27018")
        monkeypatch.setenv("MONGO_USER", "linky")
        monkeypatch.setenv("MONGO_COLLECTION", "entries")

        config = get_config()
        assert config.storage.backend == "mongo"
        assert config.storage.data_file == "/tmp/meetings.json"
        assert config.storage.autosave is True
        assert config.open_links_in_browser is False
        assert config.mongo.port == 27018
        assert config.mongo.user == "linky"
        assert config.mongo.password is None
        assert config.mongo.collection == "entries"

    def test_singleton(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("DATA_FILE", "elsewhere.json")
        assert get_config() is first

        reset_config()
        assert get_config().storage.data_file == "elsewhere.json"

    def test_unsupported_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
        with pytest.raises(ValueError, match="Unsupported STORAGE_BACKEND"):
            get_config()
