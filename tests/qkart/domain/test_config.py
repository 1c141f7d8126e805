"""Tests for business defaults loaded from the environment."""

from qkart.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.default_payment_option == "PAYMENT_OPTION_DEFAULT"
        assert settings.default_wallet_money == 500.0
        assert settings.default_address == "ADDRESS_NOT_SET"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("QKART_DEFAULT_PAYMENT_OPTION", "PAYMENT_OPTION_CARD")
        monkeypatch.setenv("QKART_DEFAULT_WALLET_MONEY", "1000")

        settings = Settings(_env_file=None)

        assert settings.default_payment_option == "PAYMENT_OPTION_CARD"
        assert settings.default_wallet_money == 1000.0
