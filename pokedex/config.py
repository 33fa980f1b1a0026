"""Application configuration, read from environment variables (or a .env file).

Upstream URLs and timeouts are fixed once at startup; nothing here changes per request.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # PokeAPI
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout_seconds: float = 30.0

    # FunTranslations
    yoda_api_url: str = "https://api.funtranslations.com/translate/yoda.json"
    shakespeare_api_url: str = "https://api.funtranslations.com/translate/shakespeare.json"
    translation_timeout_seconds: float = 30.0

    environment: str = "development"

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
