"""Configuration management using pydantic-settings."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    log_level: str = "INFO"

    # Coordinate Sanitization
    coordinate_precision: int = 6
    coordinate_audit_threshold: float = 1.0

    # String Sanitization
    string_max_length: int = 100
    disallowed_characters: str = "<>\"'%;()&+"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
