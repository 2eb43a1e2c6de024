import pytest

from app import create_app
from app.catalog import LanguageCatalog


@pytest.fixture
def catalog():
    """The default six-language catalog."""
    return LanguageCatalog()


@pytest.fixture
def app(catalog, monkeypatch):
    """Application wired to the fixture catalog, isolated from any local .env."""
    for var in ("LANGUAGES_HOST", "LANGUAGES_PORT", "LANGUAGES_DEBUG", "LANGUAGES_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("app.ENV_PATH", "/nonexistent/.env")
    return create_app({"TESTING": True}, catalog=catalog)


@pytest.fixture
def client(app):
    return app.test_client()
