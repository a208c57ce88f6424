# app\shared\config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import List, Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "ShipSmart Provincial Routing"
    APP_VERSION: str = "1.0.0"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    @property
    def ENV(self) -> str:
        """Alias for APP_ENV (settings.ENV)."""
        return self.APP_ENV.value

    DEBUG: bool = True

    @property
    def EXPOSE_ERRORS(self) -> bool:
        """Error text goes into 500 bodies only in debug, never in production."""
        return self.DEBUG and self.APP_ENV != AppEnv.PRODUCTION

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    OTEL_SERVICE_NAME: str = "provincial-routing"
    OTEL_CONSOLE_EXPORT: bool = False

    # --- Route Search ---
    # Hop bound used by find-routes when the caller gives none (or garbage).
    DEFAULT_MAX_HOPS: int = 3
    # Requests above this are clamped; DFS cost grows quickly with depth.
    MAX_HOPS_LIMIT: int = 12

    # --- Route Data ---
    # If set, the route table is read from this survey export (TSV)
    # instead of the compiled-in table.
    ROUTES_TSV_PATH: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
