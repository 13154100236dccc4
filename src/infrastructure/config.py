"""
Service configuration read from the environment.

Secrets (API key, target-site credentials, JWT secret) are never compiled in:
they come from the environment, a .env file or, when TRANSLATION_SECRET_ARN is
set, AWS Secrets Manager (loaded into the environment before this is built).
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceConfig(BaseSettings):
    """Typed settings; field names map case-insensitively to environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    openai_api_key: str = Field(description="Bearer key for the chat-completion API")
    target_site_url: str = Field(description="Base URL of the target WordPress site")
    target_site_username: str = Field(description="User owning the application password")
    target_site_app_password: str = Field(description="WordPress application password")
    webhook_jwt_secret: str = Field(description="Shared HS256 secret for bearer tokens")

    openai_model: str = "gpt-4"
    openai_temperature: float = 0.7
    openai_timeout: float = 40.0
    openai_base_url: Optional[str] = None
    target_site_verify_tls: bool = True
    webhook_jwt_audience: Optional[str] = None
    chunk_size: int = 800
    settings_file: str = "data/translation_settings.json"
    log_level: str = "INFO"
    langfuse_public_key: Optional[str] = None

    @field_validator("chunk_size")
    @classmethod
    def _chunk_size_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chunk_size must be a positive integer")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("openai_base_url", "webhook_jwt_audience", "langfuse_public_key")
    @classmethod
    def _blank_as_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @property
    def tracing_enabled(self) -> bool:
        return self.langfuse_public_key is not None
