# group_mailer/core/config.py
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 9000
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Firebase service account (local path)
    FIREBASE_CREDENTIALS: str = "group_mailer/core/firebase_key.json"

    # Mail relay (SMTP over implicit TLS)
    MAIL_HOST: str = "smtp.gmail.com"
    MAIL_PORT: int = 465
    MAIL_USER: str = ""
    MAIL_PASS: str = ""
    MAIL_FROM: str = ""

    # OAuth2 client used to mint SMTP access tokens
    CLIENT_ID: str = ""
    SECRET_KEY: str = ""
    REFRESH_TOKEN: str = ""
    OAUTH_TOKEN_URI: str = "https://oauth2.googleapis.com/token"

    # When false, history always records "success" and send failures are only logged
    RECORD_SEND_FAILURES: bool = False

    # Values in .env are overridden by real environment variables
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def sender(self) -> str:
        return self.MAIL_FROM or self.MAIL_USER


settings = Settings()
