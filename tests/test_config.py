# File: tests/test_config.py

from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "DATABASE_URL", "BACKEND_CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.host == "0.0.0.0"
    assert s.port == 3000
    assert s.database_url == "mysql+pymysql://fab@localhost/go_fiber"
    assert s.backend_cors_origins == ["*"]
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./hello.db")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings()
    assert s.port == 8080
    assert s.database_url == "sqlite:///./hello.db"
    assert s.backend_cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
    assert s.log_level == "DEBUG"
