from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Settings(BaseSettings):
    PROJECT_NAME: str = "Order Book Candles"
    VERSION: str = "1.0.0"

    # backing store
    ORDER_BOOKS_CSV: str = "order_books.csv"
    # IANA zone for candle windows, None = process local time
    TIMEZONE: Optional[str] = None

    FAKE_FLAG: str = "flag{this_is_fake_flag}"

    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @field_validator("TIMEZONE")
    @classmethod
    def check_timezone(cls, value):
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {value}") from e
        return value

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
