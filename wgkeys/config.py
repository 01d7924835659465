"""Configuration management for wgkeys."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Display priority: the first enabled codec in this order renders str(key)
CODEC_PRIORITY = ("base64", "hex", "base32")


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="WGKEYS_", extra="ignore", frozen=True
    )

    # Text codecs available to parse() and str()
    codecs: list[str] = Field(default_factory=lambda: list(CODEC_PRIORITY))

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(default="INFO")

    # HTTP service
    rate_limit: str = Field(default="60/minute")

    @field_validator("codecs")
    @classmethod
    def check_codecs(cls, value: list[str]) -> list[str]:
        """Reject unknown codec names and require at least one codec."""
        unknown = sorted(set(value) - set(CODEC_PRIORITY))
        if unknown:
            raise ValueError(f"unknown codecs: {', '.join(unknown)}")
        if not value:
            raise ValueError("at least one codec must be enabled")
        return value

    @property
    def display_codec(self) -> str:
        """Name of the codec used to render keys as text."""
        return next(name for name in CODEC_PRIORITY if name in self.codecs)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
