"""Configuration for the query annotation library."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Library and service settings loaded from environment variables."""

    # Date templating
    date_pattern_max_length: int = Field(default=20, description="Longest {pattern} tried as a date format")

    # Obfuscation
    obfuscate_visible_chars: int = Field(default=4, ge=0, description="Trailing characters left visible")
    obfuscate_mask_char: str = Field(default="*", min_length=1, max_length=1, description="Mask character")

    # Parameter extraction
    force_keys_lower_case: bool = Field(default=False, description="Default key case folding for the API")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    model_config = {"env_prefix": "ANNOTATIONS_"}


settings = Settings()
