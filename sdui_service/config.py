"""
Application configuration management using Pydantic Settings.

Every value can be overridden through the environment (prefix ``SDUI_``)
or a local ``.env`` file.
"""
import logging
from typing import Literal, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from dotenv import load_dotenv

# Load .env first
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Shape-shifting store UI service settings"""

    # -------------------------
    # APPLICATION METADATA & RUNTIME
    # -------------------------
    app_name: str = "Shape-Shifting Store UI Service"
    app_version: str = "2.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_dir: str = "logs"
    cors_origins: list[str] = ["*"]

    # -------------------------
    # HTTP SERVER
    # -------------------------
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = "/api"

    # -------------------------
    # UI DESCRIPTOR
    # -------------------------
    ui_schema_version: str = "2.0.0"
    generated_by: str = "SDUI Engine"

    # IANA zone name for the mode clock; server local time when unset
    timezone: Optional[str] = None

    # Pins every request to one presentation mode (demo / QA)
    forced_mode: Optional[str] = None

    # -------------------------
    # VALIDATORS
    # -------------------------
    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = ["development", "staging", "production"]
        if v not in valid_envs:
            logger.warning(f"Invalid environment '{v}', defaulting to 'development'")
            return "development"
        return v

    @field_validator('forced_mode', 'timezone', mode='before')
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SDUI_",
        validate_default=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    logger.info("Initializing settings...")
    return Settings()


settings = get_settings()
