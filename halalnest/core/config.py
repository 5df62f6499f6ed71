"""Gateway configuration using Pydantic Settings.

Values are loaded from environment variables and an optional .env file.
The settings object is built once at startup and handed to the application;
handlers read it through ``halalnest.core.deps.get_settings``.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Settings for the HalalNest gateway."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ── General ───────────────────────────────
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "halalnest"
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "port"))
    public_dir: str = "public"

    # ── Scholar (OpenRouter) ──────────────────
    openrouter_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "openrouter_api_key"),
    )
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    scholar_model: str = "x-ai/grok-4-fast:free"
    scholar_temperature: float = 0.7
    scholar_max_tokens: int = 800
    scholar_referer: str = "https://halalnest.local"
    scholar_title: str = "HalalNest Scholar Assistant"

    # ── Prayer times (Aladhan) ────────────────
    prayer_times_base_url: str = "https://api.aladhan.com/v1"

    # None disables outbound timeouts entirely
    upstream_timeout: float | None = None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    @property
    def scholar_available(self) -> bool:
        """True when a non-empty model-provider key is configured."""
        key = self.openrouter_api_key
        return key is not None and bool(key.get_secret_value())


settings = GatewaySettings()
