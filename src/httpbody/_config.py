import codecs
import os
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ._utils.constants import (
    DEFAULT_CHARSET,
    ENV_CHARSET,
    ENV_DEBUG,
    ENV_FOLLOW_REDIRECTS,
    ENV_MAX_RETRIES,
    ENV_RETRY_BACKOFF,
    ENV_SNIFF_BYTES,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
    SNIFF_PREFIX_BYTES,
)
from ._version import __version__

_ENV_FIELDS = {
    "charset": ENV_CHARSET,
    "sniff_bytes": ENV_SNIFF_BYTES,
    "timeout": ENV_TIMEOUT,
    "max_retries": ENV_MAX_RETRIES,
    "retry_backoff": ENV_RETRY_BACKOFF,
    "follow_redirects": ENV_FOLLOW_REDIRECTS,
    "user_agent": ENV_USER_AGENT,
    "debug": ENV_DEBUG,
}


class Config(BaseModel):
    """Settings shared by every request created from one client."""

    charset: str = DEFAULT_CHARSET
    sniff_bytes: int = Field(default=SNIFF_PREFIX_BYTES, gt=0)
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0)
    retry_backoff: float = Field(default=1.0, ge=0)
    follow_redirects: bool = True
    user_agent: str = f"httpbody/{__version__}"
    debug: bool = False

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown charset: {value}") from e
        return value

    @classmethod
    def from_env(cls, **overrides: Optional[Any]) -> "Config":
        """Build a config from ``HTTPBODY_*`` environment variables.

        Explicit overrides win over the environment; ``None`` overrides are
        ignored so callers can forward optional arguments unchanged.
        """
        values: dict[str, Any] = {}
        for field_name, env_var in _ENV_FIELDS.items():
            env_value = os.getenv(env_var)
            if env_value is not None and env_value != "":
                values[field_name] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
