"""Tests for environment-driven configuration."""

import logging

from iats_gateway.config import Settings, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("IATS_AGENT_CODE", "IATS_PASSWORD", "IATS_SERVER_ID", "IATS_TRANSPORT_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)
        assert config.server_id == "NA"
        assert config.transport_timeout == 30

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("IATS_AGENT_CODE", "ENV88")
        monkeypatch.setenv("IATS_PASSWORD", "envpw")
        monkeypatch.setenv("IATS_SERVER_ID", "UK")
        config = Settings(_env_file=None)
        assert config.agent_code == "ENV88"
        assert config.password.get_secret_value() == "envpw"
        assert config.server_id == "UK"

    def test_password_hidden_in_repr(self):
        config = Settings(_env_file=None, password="hunter2")
        assert "hunter2" not in repr(config)


class TestConfigureLogging:
    def test_applies_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(Settings(_env_file=None, log_level="debug"))
        assert calls["level"] == logging.DEBUG
