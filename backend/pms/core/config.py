"""Application configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackendKind(str, Enum):
    MEMORY = "memory"
    FILE = "file"
    SQL = "sql"


class AuthProvider(str, Enum):
    EMAIL = "email"
    FIREBASE = "firebase"


class AssessmentProvider(str, Enum):
    DISABLED = "disabled"
    KEYWORDS = "keywords"
    GEMINI = "gemini"


class LogFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


class RiskScorerKind(str, Enum):
    RANDOM = "random"
    INCOME_RATIO = "income_ratio"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "PMS - Modern Property Suite"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    allowed_origins: str = "http://localhost:3000"
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON
    request_id_header: str = "X-Request-ID"

    # Record store
    store_backend: StoreBackendKind = StoreBackendKind.FILE
    store_key: str = "prop_lifecycle_data"
    store_dir: str = ".pms_data"
    database_url: Optional[str] = "sqlite:///./pms.db"

    # Auth
    auth_provider: AuthProvider = AuthProvider.EMAIL
    auth_header_user_email: str = "X-User-Email"
    firebase_project_id: Optional[str] = None
    google_application_credentials: Optional[str] = None

    # External assessment
    assessment_provider: AssessmentProvider = AssessmentProvider.DISABLED
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    assessment_timeout_seconds: float = 10.0

    # Applications
    risk_scorer: RiskScorerKind = RiskScorerKind.RANDOM

    @property
    def store_path(self) -> Path:
        """Location of the JSON document used by the file backend."""
        return Path(self.store_dir) / f"{self.store_key}.json"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
