from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database settings (provided via .env)
    SURREALDB_URL: str = "ws://localhost:8000/rpc"
    SURREALDB_NS: str = "personal_finance"
    SURREALDB_DB: str = "main"
    SURREALDB_USER: str = "root"
    SURREALDB_PASS: str = "root"

    # Logging
    LOG_LEVEL: str = "INFO"

    # HTTP
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Display
    # IANA zone used to derive month / day-of-month for charts
    DISPLAY_TIMEZONE: str = "UTC"
    CURRENCY_SYMBOL: str = "₹"

    # Dashboard defaults
    TRANSACTIONS_PER_PAGE: int = 10
    RECENT_TRANSACTIONS: int = 3

settings = Settings()
