from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Tone


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables and .env file.

    Only the command line reads these; the analyze/compose pipelines take no
    configuration.
    """

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")

    # CLI defaults
    default_tone: Tone = Field(default=Tone.PROFESSIONAL, alias="DEFAULT_TONE")
    default_persona: Optional[str] = Field(default=None, alias="DEFAULT_PERSONA")
    output_format: Literal["text", "json"] = Field(default="text", alias="OUTPUT_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_config() -> "Config":
    return Config()
