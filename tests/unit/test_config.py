import pytest

from app.config import Settings, cors_allow_origins
from app.domain.errors import ConfigurationError


def test_missing_uri_is_fatal(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_blank_uri_is_fatal(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "   ")
    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_defaults(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
    monkeypatch.delenv("DB_NAME", raising=False)
    monkeypatch.delenv("COLLECTION", raising=False)
    s = Settings.from_env()
    assert s.mongodb_uri == "mongodb://localhost:27017"
    assert s.db_name == "meddb"
    assert s.collection == "medicines"


def test_overrides(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db")
    monkeypatch.setenv("DB_NAME", "pharma")
    monkeypatch.setenv("COLLECTION", "drugs")
    s = Settings.from_env()
    assert (s.db_name, s.collection) == ("pharma", "drugs")


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.com/, https://b.com,,")
    assert cors_allow_origins() == ["https://a.com", "https://b.com"]
    monkeypatch.delenv("CORS_ALLOW_ORIGINS")
    assert cors_allow_origins() == ["*"]
