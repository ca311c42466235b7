# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "Hello Server"
    VERSION: str = "0.1.0"

    # Server (all interfaces, port 3000 unless overridden)
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: os.getenv("PORT", "3000"))

    # CORS
    backend_cors_origins: List[str] = Field(
        default_factory=lambda: os.getenv("BACKEND_CORS_ORIGINS", "*")
    )

    # Database: user "fab", no password, local MySQL server, database "go_fiber"
    database_url: str = Field(
        default_factory=lambda: os.getenv(
            "DATABASE_URL", "mysql+pymysql://fab@localhost/go_fiber"
        )
    )

    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
