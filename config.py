from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Any, Optional
import json


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    APP_NAME: str = "Site Content Admin API"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    PORT: int = 8000

    # Document store
    DATABASE_URL: Optional[str] = None
    DATABASE_NAME: Optional[str] = None
    DATABASE_TIMEOUT_MS: int = 5000

    CORS_ORIGINS: Any = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_cors_origins(cls, v: Any) -> List[str]:
        return parse_cors_origins(v)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
