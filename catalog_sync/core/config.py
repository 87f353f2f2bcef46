from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DB_URL: str
    DB_ECHO: bool = False
    DB_CREATE_ALL: bool = False

    AUTH_USER: str
    AUTH_PASSWORD_HASH: str

    BATCH_SIZE: int = 100
    DELETE_RECORD: bool = True
    AUDIT_LOG_TO_DB: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json, console

    EMAIL_NOTIFICATIONS_ENABLED: bool = False
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    SMTP_FROM_NAME: str = "catalog-sync"
    SMTP_FROM_EMAIL: Optional[str] = None
    EMAIL_RECIPIENT: Optional[str] = None

    class Config:
        env_file = ".env"

settings = Settings()
