from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gusapi.constants import Environment


class GusSettings(BaseSettings):
    """
    Client configuration loaded from environment variables or a .env file.
    """

    # Service
    GUS_USER_KEY: str | None = Field(None, description="User key issued by GUS for the BIR1 service")
    GUS_ENVIRONMENT: Environment = Field(Environment.PROD, description="Service environment (prod or dev)")
    GUS_BASE_URL: str | None = Field(None, description="Override for the service URL")
    GUS_ADDRESS: str | None = Field(None, description="Override for the WS-Addressing To header")

    # Transport
    GUS_TIMEOUT: float = Field(30.0, description="Request timeout in seconds")
    GUS_VERIFY_SSL: bool = Field(True, description="Verify the service TLS certificate")
    GUS_PROXY: str | None = Field(None, description="Proxy URL for outgoing requests")

    LOG_LEVEL: str = Field("INFO", description="Logging level for scripts")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("GUS_ENVIRONMENT", mode="before")
    @classmethod
    def parse_environment(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def transport_options(self) -> dict[str, Any]:
        """Keyword arguments for the underlying httpx client."""
        options: dict[str, Any] = {
            "timeout": self.GUS_TIMEOUT,
            "verify": self.GUS_VERIFY_SSL,
        }
        if self.GUS_PROXY:
            options["proxy"] = self.GUS_PROXY
        return options


_settings_instance = None


def get_settings() -> GusSettings:
    """
    Return a cached settings instance.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = GusSettings()
    return _settings_instance
