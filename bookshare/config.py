"""Client settings, resolved as explicit argument, then environment variable, then default."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from bookshare.normalize import MULTI_STYLES
from bookshare.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_OPEN_TIMEOUT,
    DEFAULT_TIMEOUT,
    MAX_REDIRECTS,
    MAX_RETRIES,
)

ENV_PREFIX = "BOOKSHARE_"

_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None  # OAuth2 bearer token
    api_key: str | None = None
    user: str | None = None  # default userIdentifier for account-scoped calls
    timeout: float = DEFAULT_TIMEOUT
    open_timeout: float = DEFAULT_OPEN_TIMEOUT
    max_retries: int = MAX_RETRIES
    max_redirects: int = MAX_REDIRECTS
    strict_params: bool = True
    multi_style: str = "comma"
    debug_dir: Path | None = None

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("multi_style")
    @classmethod
    def _known_style(cls, v: str) -> str:
        if v not in MULTI_STYLES:
            raise ValueError(f"multi_style must be one of {MULTI_STYLES}")
        return v

    @field_validator("strict_params", mode="before")
    @classmethod
    def _parse_flag(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() not in _FALSE
        return v

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from ``BOOKSHARE_*`` environment variables.

        Keyword arguments that are not None take precedence over the
        environment.
        """
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            env_value = os.environ.get(ENV_PREFIX + name.upper())
            if env_value:
                values[name] = env_value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
