from pathlib import Path
import os

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    LOG_LEVEL: str = "INFO"

    # Item policy thresholds
    ITEM_MIN_PRICE: int = Field(default=1000, ge=0)
    ITEM_MAX_PRICE: int = Field(default=1_000_000, ge=0)
    ITEM_MAX_QUANTITY: int = Field(default=9999, ge=0)
    ITEM_MIN_TOTAL_PRICE: int = Field(default=10_000, ge=0)

    @model_validator(mode="after")
    def _check_price_bounds(self) -> "Settings":
        if self.ITEM_MIN_PRICE > self.ITEM_MAX_PRICE:
            raise ValueError("ITEM_MIN_PRICE must be <= ITEM_MAX_PRICE")
        return self


settings = Settings()
