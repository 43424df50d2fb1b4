import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings configuration."""

    # API settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Fractal Jigsaw API"

    # CORS settings
    BACKEND_CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Generation limits; the generator itself does no limiting
    MAX_GRID_DIMENSION: int = 50
    MAX_PIECE_LENGTH: int = 50
    FILL_ITERATIONS: int = 10

    # Geometry defaults (output units)
    DEFAULT_FRAME: float = 10
    DEFAULT_RADIUS: float = 15
    LASER_FRAME: float = 0

    class Config:
        """Pydantic configuration class."""

        case_sensitive = True
        env_file = ".env"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @field_validator("MAX_GRID_DIMENSION", "MAX_PIECE_LENGTH", "FILL_ITERATIONS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Limits must be positive."""
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create instance
settings = get_settings()
