"""Organizer configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class OrganizerSettings(BaseSettings):
    """Settings loaded from FILE_ORGANIZER_* environment variables."""

    # Reserved name of the move log written into the target directory
    log_filename: str = "organizer.log"

    # strftime format of the log header timestamp
    log_timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    model_config = SettingsConfigDict(
        env_prefix="FILE_ORGANIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = OrganizerSettings()
