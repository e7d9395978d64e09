from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

load_dotenv()

DEFAULT_API_URL = "https://api.transavia.com/v1/flightoffers/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    transavia_api_key: str = Field(..., alias="TRANSAVIA_API_KEY")
    transavia_api_url: str = Field(DEFAULT_API_URL, alias="TRANSAVIA_API_URL")
    request_timeout_s: float = Field(15, alias="REQUEST_TIMEOUT_S")

    mail_host: str = Field("", alias="MAIL_HOST")
    mail_port: int = Field(465, alias="MAIL_PORT")
    mail_user: str = Field("", alias="MAIL_USER")
    mail_pass: str = Field("", alias="MAIL_PASS")
    mail_from: str = Field("", alias="MAIL_FROM")

    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    @field_validator("transavia_api_key")
    @classmethod
    def _key_non_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("TRANSAVIA_API_KEY must be a non-empty string")
        return v.strip()

    @field_validator("mail_port")
    @classmethod
    def _port_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("MAIL_PORT must be greater than 0")
        return v

    @model_validator(mode="after")
    def _default_sender(self) -> "Settings":
        if not self.mail_from:
            self.mail_from = self.mail_user
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return application settings loaded from the environment."""
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings", "DEFAULT_API_URL"]
