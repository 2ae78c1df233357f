# scribe/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Vault Scribe")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # completion endpoint; the key only ever comes from env / .env.dev
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: Optional[str] = None
    COMPLETION_URL: str = Field(default="https://api.openai.com/v1/chat/completions")
    REQUEST_TIMEOUT: Optional[float] = None

    # template overrides; None falls back to generate/config.yaml
    SUMMARY_PROMPT: Optional[str] = None
    FLASHCARD_PROMPT: Optional[str] = None

    # vault layout
    SUMMARY_HEADING: str = Field(default="### Summary")
    FLASHCARD_FOLDER: str = Field(default="07-learning")
    FLASHCARD_LINK_LABEL: str = Field(default="Learning Flashcard")
    LEARNING_TAG: str = Field(default="learning")
    TAG_BY_MONTH: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
