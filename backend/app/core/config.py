from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Root logger level, e.g. "DEBUG", "INFO", "WARNING"
    log_level: str = "INFO"

    # Allowed CORS origins for the frontend
    cors_origins: list[str] = ["*"]

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v in ("", None):
            return "INFO"
        return str(v).upper()

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
