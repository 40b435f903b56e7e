import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "ibm-granite/granite-3.3-8b-instruct"
DEFAULT_BASE_URL = "https://api.replicate.com/v1"


class Settings(BaseModel):
    replicate_api_token: Optional[str] = None
    replicate_model: str = DEFAULT_MODEL
    replicate_base_url: str = DEFAULT_BASE_URL
    replicate_timeout: float = Field(default=120.0, gt=0)
    replicate_poll_interval: float = Field(default=1.0, gt=0)
    max_upload_mb: int = Field(default=20, gt=0)
    port: int = 8000
    log_level: str = "INFO"

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and ``.env``, if any)."""
        load_dotenv(find_dotenv(usecwd=True))

        values = {
            "replicate_api_token": os.getenv("REPLICATE_API_TOKEN") or None,
            "replicate_model": os.getenv("REPLICATE_MODEL"),
            "replicate_base_url": os.getenv("REPLICATE_BASE_URL"),
            "replicate_timeout": os.getenv("REPLICATE_TIMEOUT"),
            "replicate_poll_interval": os.getenv("REPLICATE_POLL_INTERVAL"),
            "max_upload_mb": os.getenv("MAX_UPLOAD_MB"),
            "port": os.getenv("PORT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        # Unset variables fall back to the field defaults.
        return cls(**{k: v for k, v in values.items() if v is not None})
