# product_api/config.py
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings read from the environment or a local ``.env`` file."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    seed_products: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
