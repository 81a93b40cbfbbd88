import pytest

from autocomplete_handler import AutocompleteHandler
from config import Config
from flask_app import FlaskApp
from tests.fakes import FakeDownloader


@pytest.fixture
def env(monkeypatch):
    """Minimal environment for Config, with optional settings cleared."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "8080")
    for key in ("COUNTRIES_API_URL", "REQUEST_TIMEOUT", "SUGGESTION_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def config(env):
    return Config()


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def handler(config, downloader):
    handler = AutocompleteHandler(config, downloader=downloader)
    handler.populate()
    return handler


@pytest.fixture
def client(handler, config):
    app = FlaskApp(handler, config)
    app.flask_app.config["TESTING"] = True
    return app.flask_app.test_client()
