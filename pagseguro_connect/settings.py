from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "PagSeguroConnect"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8080

    # Gateway environment: production | sandbox
    PAGSEGURO_ENV: str = "production"
    # Explicit base URLs win over PAGSEGURO_ENV
    PAGSEGURO_API_URL: Optional[str] = None
    PAGSEGURO_SITE_URL: Optional[str] = None

    # Merchant credentials used by the HTTP service when a request omits them
    PAGSEGURO_EMAIL: Optional[str] = None
    PAGSEGURO_TOKEN: Optional[str] = None

    PAGSEGURO_CURRENCY: str = "BRL"

    # Transport
    PAGSEGURO_TIMEOUT_SEC: int = 15
    PAGSEGURO_TRANSPORT_RETRY_MAX: int = 1

settings = Settings()
