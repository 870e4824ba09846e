from pydantic_settings import BaseSettings
from pydantic import Field
from pathlib import Path
from typing import List


class Config(BaseSettings):
    # Durable medium for the record stores
    database_url: str = Field(
        default=f"sqlite:///{Path(__file__).parent.parent.parent / 'data' / 'leaddesk.db'}",
        alias="DB_URL",
    )
    storage_backend: str = Field(default="sql", alias="STORAGE_BACKEND")

    # Record ids: "timestamp" (ISO-8601, millisecond precision) or "uuid"
    id_strategy: str = Field(default="timestamp", alias="ID_STRATEGY")

    # Open form sessions kept by the HTTP layer before the oldest is dropped
    session_limit: int = Field(default=200, alias="SESSION_LIMIT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cors_origins: List[str] = Field(
        default=["http://localhost", "http://localhost:3000", "http://localhost:5173"],
        alias="CORS_ORIGINS",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")

    @property
    def is_production(self) -> bool:
        """API docs are not served in production."""
        return self.environment.lower() == "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True


# Instantiate the settings
config = Config()
