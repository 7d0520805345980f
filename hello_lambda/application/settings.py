from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Optional

from hello_lambda.application.services.logger_service import Level

# Application settings using pydantic-settings for structured configuration

class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Hello Lambda"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = False

    # --- Logging ---
    # Explicit level wins over the debug switch (trace, debug, info, warn, error)
    log_level: Optional[Level] = None
    # One JSON object per line, what CloudWatch expects
    log_json: bool = True

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",     # auto-load from your .env
        case_sensitive=False,  # .env keys can be upper/lower
        extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        # LOG_LEVEL=WARN and LOG_LEVEL=warn both mean Level.WARN
        if isinstance(value, str):
            return value.strip().lower() or None
        return value

    @property
    def effective_log_level(self) -> str:
        """Level name as loguru knows it."""
        if self.log_level is not None:
            return self.log_level.loguru_name
        return Level.DEBUG.loguru_name if self.debug else Level.INFO.loguru_name


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don’t re-parse .env on every invocation."""
    return Settings()
