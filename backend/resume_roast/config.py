"""
Store env variables and other config settings.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value shipped in example env files; treated the same as a missing key.
PLACEHOLDER_API_KEY = "your-api-key-here"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars to prevent crashes
    )

    # LLM Configuration
    # NOTE: keys stay optional; without one the service runs in demo mode.
    llm_provider: Literal["groq", "openai", "gemini"] = "groq"
    groq_api_key: SecretStr | None = Field(default=None)
    openai_api_key: SecretStr | None = Field(default=None)
    gemini_api_key: SecretStr | None = Field(default=None)

    groq_base_url: str = "https://api.groq.com/openai/v1"
    openai_base_url: Optional[str] = None

    groq_model: str = "llama3-70b-8192"
    openai_model: str = "gpt-4o"
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.8
    llm_max_tokens: int = 1500
    timeout_seconds: Optional[float] = None  # None -> provider client default

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024
    min_resume_chars: int = 100

    # MLflow
    mlflow_enabled: bool = False
    mlflow_tracking_uri: str = "file:./mlruns"
    experiment_name: str = "resume_roast_v1"

    # API
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    def llm_api_key(self) -> Optional[str]:
        """Key for the selected provider, or None when absent/blank/placeholder."""
        secret = {
            "groq": self.groq_api_key,
            "openai": self.openai_api_key,
            "gemini": self.gemini_api_key,
        }[self.llm_provider]
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        if not value or value == PLACEHOLDER_API_KEY:
            return None
        return value

    def has_llm_credential(self) -> bool:
        return self.llm_api_key() is not None

    def llm_model(self) -> str:
        return {
            "groq": self.groq_model,
            "openai": self.openai_model,
            "gemini": self.gemini_model,
        }[self.llm_provider]


@lru_cache
def get_settings() -> Settings:
    return Settings()
