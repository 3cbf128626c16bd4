from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    log_level: str = Field("INFO", alias="CASHFLOW_LOG_LEVEL")
    currency_symbol: str = Field("$", alias="CASHFLOW_CURRENCY_SYMBOL")
    amount_places: int = Field(2, ge=0, le=8, alias="CASHFLOW_AMOUNT_PLACES")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
