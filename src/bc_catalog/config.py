from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "https://api.bigcommerce.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, alias="BIGCOMMERCE_API_BASE_URL")
    store_hash: Optional[str] = Field(default=None, alias="BIGCOMMERCE_STORE_HASH")
    access_token: Optional[str] = Field(default=None, alias="BIGCOMMERCE_ACCESS_TOKEN")

    output_path: Path = Field(default=Path("products.json"), alias="BC_OUTPUT_PATH")
    request_timeout_seconds: int = Field(default=30, alias="BC_REQUEST_TIMEOUT_SECONDS")

    @model_validator(mode="after")
    def validate_runtime(self) -> "Settings":
        if not self.api_base_url.strip():
            raise ValueError("BIGCOMMERCE_API_BASE_URL must not be empty")
        if self.request_timeout_seconds < 1:
            raise ValueError("BC_REQUEST_TIMEOUT_SECONDS must be >= 1")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
