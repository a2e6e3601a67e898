"""Tests for environment-driven configuration."""

from checkmore.config import CheckConfig


class TestCheckConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CHECKMORE_AUTOLOAD_BUILTINS", raising=False)
        monkeypatch.delenv("CHECKMORE_WARN_ON_DUPLICATE", raising=False)

        config = CheckConfig.from_env()
        assert config.autoload_builtins is True
        assert config.warn_on_duplicate is False

    def test_flags_from_env(self, monkeypatch):
        monkeypatch.setenv("CHECKMORE_AUTOLOAD_BUILTINS", "0")
        monkeypatch.setenv("CHECKMORE_WARN_ON_DUPLICATE", "yes")

        config = CheckConfig.from_env()
        assert config.autoload_builtins is False
        assert config.warn_on_duplicate is True

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("CHECKMORE_AUTOLOAD_BUILTINS", "  ")
        assert CheckConfig.from_env().autoload_builtins is True
