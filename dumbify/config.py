from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    OPENROUTER_API_KEY: str = ""
    LLM_BASE_URL: str = "https://openrouter.ai/api/v1"
    LLM_MODEL: str = "gpt-4"
    LLM_MAX_TOKENS: int = 350
    LLM_TEMPERATURE: float = 0.8
    LLM_TIMEOUT: float = 60.0

    RATE_LIMIT: str = "10/minute"
    HISTORY_DB: str = ".explanations.db"
    HISTORY_LIMIT: int = 50
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
