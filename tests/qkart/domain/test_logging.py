"""Tests for the structlog context helpers."""

import structlog
from qkart.utils.logging import add_context, clear_context, get_log_level


class TestLogContext:
    def teardown_method(self):
        clear_context()

    def test_add_context_binds_values(self):
        add_context(email="crio-user@gmail.com", path="/carts")

        assert structlog.contextvars.get_contextvars() == {"email": "crio-user@gmail.com", "path": "/carts"}

    def test_clear_context_removes_values(self):
        add_context(email="crio-user@gmail.com")
        clear_context()

        assert structlog.contextvars.get_contextvars() == {}


class TestLogLevel:
    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"

    def test_level_follows_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "production")

        assert get_log_level() == "INFO"
