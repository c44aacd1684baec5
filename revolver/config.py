from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from revolver.domain.analysis import AIProvider


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Web server settings
    host: str = "127.0.0.1"
    port: int = 4000

    # Storage settings
    store_path: str = "data/store.json"

    # Analysis settings
    ai_provider: AIProvider = AIProvider.CLAUDE  # cosmetic label, same heuristic either way
    max_analyze_tags: int = 5
    max_related_notes: int = 5

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL

    @field_validator("ai_provider", mode="before")
    @classmethod
    def _lowercase_provider(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


settings = Settings()
