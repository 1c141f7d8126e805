"""Business defaults for carts and users, loaded from the environment.

Values can be overridden with ``QKART_``-prefixed environment variables
(e.g. ``QKART_DEFAULT_PAYMENT_OPTION``) or a local ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QKART_", env_file=".env", extra="ignore")

    default_payment_option: str = Field("PAYMENT_OPTION_DEFAULT", description="Payment option for new carts")
    default_wallet_money: float = Field(500.0, ge=0, description="Wallet balance for newly registered users")
    default_address: str = Field("ADDRESS_NOT_SET", description="Placeholder address for new users")


settings = Settings()
