from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CODECHECK_",
        "extra": "ignore",
    }

    # Logging (stderr; stdout is reserved for the report)
    log_level: str = "WARNING"


settings = Settings()
