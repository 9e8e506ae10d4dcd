from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Rules (None -> bundled languages/russian/data/rules.json)
    RULES_PATH: str | None = None

    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
