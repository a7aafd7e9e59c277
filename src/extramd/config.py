"""Runtime configuration using pydantic-settings.

Values come from ``EXTRAMD_*`` environment variables or a local ``.env``
file. Nothing here is required; the defaults point at the public sites.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the renderer and its HTTP collaborator."""

    model_config = SettingsConfigDict(
        env_prefix="EXTRAMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Tag-hosting sites whose pages replace a document's content
    lesswrong_url: str = "https://www.lesswrong.com"
    ea_forum_url: str = "https://forum.effectivealtruism.org"

    # HTTP timeout for tag fetches, in seconds
    fetch_timeout: float = 30.0

    # Markdown longer than this has its video embeds replaced with plain links
    embed_shrink_threshold: int = 25000

    log_level: str = "WARNING"

    @field_validator("lesswrong_url", "ea_forum_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
