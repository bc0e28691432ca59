from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "GRC AI Dispatcher"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    SQLALCHEMY_DATABASE_URI: str = "sqlite:///./grc_ai.db"
    # Stand-in for browser storage; only read when the database path is unavailable.
    LOCAL_CACHE_PATH: str = "./.cache/grc_ai_local_storage.json"

    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_PROBE_TIMEOUT: float = 5.0
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    CLAUDE_BASE_URL: str = "https://api.anthropic.com/v1"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    LLM_REQUEST_TIMEOUT: float = 60.0
    LLM_MAX_RETRIES: int = 2
    LLM_RETRY_BACKOFF: float = 0.5

    DEFAULT_TEMPERATURE: float = 0.7
    DEFAULT_MAX_TOKENS: int = 500


settings = Settings()  # type: ignore
