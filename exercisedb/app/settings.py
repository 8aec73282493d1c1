"""Runtime settings read from environment variables."""

import os
from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, field_validator

from exercisedb.integrations.cdn.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS

DEFAULT_PORT = 3000
DEFAULT_MEDIA_ROOT = "media"


class Settings(BaseModel):
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)
    # Relative paths are resolved against the working directory at read time.
    media_root: Path = Path(DEFAULT_MEDIA_ROOT)
    media_origin_base_url: str = DEFAULT_BASE_URL
    media_fetch_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("media_origin_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from the environment, falling back to defaults.

        Raises:
            pydantic.ValidationError: If a variable is set to an invalid value.
        """
        values: dict[str, str] = {}
        for field_name, env_var in (
            ("port", "PORT"),
            ("media_root", "MEDIA_ROOT"),
            ("media_origin_base_url", "MEDIA_ORIGIN_BASE_URL"),
            ("media_fetch_timeout_seconds", "MEDIA_FETCH_TIMEOUT_SECONDS"),
        ):
            value = os.getenv(env_var)
            if value:
                values[field_name] = value
        return cls.model_validate(values)
