import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr

from common.constants import (
    DATA_PATH,
    DEFAULT_SAMPLE_SIZE,
    ENV_API_BASE_URL,
    ENV_API_DELAY,
    ENV_API_HOST,
    ENV_API_KEY,
    ENV_API_TIMEOUT,
    ENV_DATA_PATH,
    ENV_OUTPUT_PATH,
    ENV_SAMPLE_SIZE,
    OUTPUT_PATH,
    REQUEST_DELAY_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
    WORDS_API_BASE_URL,
    WORDS_API_HOST,
)


class Settings(BaseModel):
    """
    Run configuration, read once at the orchestration boundary.
    The API key stays a SecretStr so it never ends up in logs or reprs.
    """

    data_path: Path = Path(DATA_PATH)
    output_path: Path = Path(OUTPUT_PATH)
    sample_size: int = Field(default=DEFAULT_SAMPLE_SIZE, ge=0)

    words_api_key: Optional[SecretStr] = None
    words_api_host: str = WORDS_API_HOST
    words_api_base_url: str = WORDS_API_BASE_URL
    request_delay: float = Field(default=REQUEST_DELAY_SECONDS, ge=0.0)
    request_timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0.0)

    @property
    def has_api_key(self) -> bool:
        return bool(self.words_api_key and self.words_api_key.get_secret_value())

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        values = {
            "data_path": os.getenv(ENV_DATA_PATH),
            "output_path": os.getenv(ENV_OUTPUT_PATH),
            "sample_size": os.getenv(ENV_SAMPLE_SIZE),
            "words_api_key": os.getenv(ENV_API_KEY) or None,
            "words_api_host": os.getenv(ENV_API_HOST),
            "words_api_base_url": os.getenv(ENV_API_BASE_URL),
            "request_delay": os.getenv(ENV_API_DELAY),
            "request_timeout": os.getenv(ENV_API_TIMEOUT),
        }
        # Unset variables fall back to the model defaults
        return cls(**{k: v for k, v in values.items() if v is not None})
