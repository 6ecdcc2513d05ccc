"""Mini README: Centralised configuration for Pocket Ledger.

Structure:
    * TrackerSettings - pydantic-settings model describing runtime options.
    * get_settings - cached accessor used by the entry points.

Usage:
    Entry points call ``get_settings`` once and hand the resulting object to
    ``create_application`` or the dashboard client. Request handling code
    never reads the environment directly. The store endpoint and key are
    also accepted under the ``SUPABASE_URL``/``SUPABASE_KEY`` names used by
    hosted deployments.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:3000/api"


class TrackerSettings(BaseSettings):
    """Runtime configuration for the gateway and the dashboard client."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling reload and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface the gateway binds to.",
    )
    interface_port: int = Field(
        3000,
        description="Port the gateway listens on.",
        ge=1,
        le=65535,
    )
    store_backend: Literal["remote", "memory"] = Field(
        "remote",
        description="Use the hosted table service or a process-local store.",
    )
    store_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("POCKETLEDGER_STORE_URL", "SUPABASE_URL", "store_url"),
        description="Base URL of the hosted table service.",
    )
    store_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("POCKETLEDGER_STORE_KEY", "SUPABASE_KEY", "store_key"),
        description="Access key sent with every store request.",
    )
    store_table: str = Field("transactions", description="Table holding the records.")
    store_timeout_seconds: float = Field(
        10.0,
        description="Transport timeout applied to store requests.",
        gt=0,
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )
    api_url: str = Field(
        DEFAULT_API_URL,
        description="Gateway base URL used by the dashboard client.",
    )
    currency_symbol: str = Field("$", description="Symbol shown by the dashboard.")

    @field_validator("store_url", "store_key", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only values as not configured."""

        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def missing_store_settings(self) -> List[str]:
        """Name the store settings that are absent, without exposing values."""

        missing = []
        if not self.store_url:
            missing.append("store_url")
        if not self.store_key:
            missing.append("store_key")
        return missing


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return the process-wide settings instance."""

    return TrackerSettings()
