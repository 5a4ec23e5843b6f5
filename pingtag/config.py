"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Tag document storage configuration."""

    # Single JSON document holding every tag
    path: str = "tags.json"


class TagLimitSettings(BaseModel):
    """Bounds enforced when creating tags."""

    max_name_length: int = Field(default=50, ge=1)
    max_description_length: int = Field(default=100, ge=0)
    max_tags_per_creator: int = Field(default=10, ge=1)


class BotSettings(BaseModel):
    """Chat reply rendering configuration."""

    # Picked at random when subscribers are summoned by a #tag mention.
    # "{tag}" is replaced with the tag name.
    summon_phrases: list[str] = [
        "Hey! Someone is pinging you over here.",
        "Wake up, warriors of #{tag}!",
        "You again, #{tag}? Fine, come on...",
        "The #{tag} meeting is starting. Whoever is late codes on Friday night!",
        "🔔 Summoning #{tag}! Gather at the obelisk.",
    ]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, e.g.:

        ENVIRONMENT=production
        STORAGE__PATH=/var/lib/pingtag/tags.json
        LIMITS__MAX_TAGS_PER_CREATOR=20
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__PATH syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    storage: StorageSettings = StorageSettings()
    limits: TagLimitSettings = TagLimitSettings()
    bot: BotSettings = BotSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
