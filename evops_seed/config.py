import os
from pathlib import Path
from typing import Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel

from .errors import ConfigError

API_URL = "API_URL"
REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
UPLOAD_DELAY = "UPLOAD_DELAY"
SEED_DATA = "SEED_DATA"


class Config(BaseModel):
    api_url: str
    request_timeout: float = 10.0
    upload_delay: float = 0.1
    seed_data: Optional[str] = None


def normalize_api_url(raw: str) -> str:
    """Return `raw` as an absolute http(s) URL ending with a slash.

    Routes are joined relative to the base, so a missing trailing slash would
    drop the last path segment of the base URL.
    """
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise ConfigError(f"variable {API_URL} is not a valid url: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"variable {API_URL} must be an absolute http(s) url, got {raw!r}")
    text = str(url)
    return text if text.endswith("/") else text + "/"


def _seconds(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"variable {name} must be a number of seconds, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"variable {name} must not be negative, got {raw!r}")
    return value


def load_config() -> Config:
    # values already in the environment win over .env
    load_dotenv(Path.cwd() / ".env")
    raw = os.getenv(API_URL)
    if raw is None:
        raise ConfigError(f"variable {API_URL} is not set")
    return Config(
        api_url=normalize_api_url(raw),
        request_timeout=_seconds(REQUEST_TIMEOUT, 10.0),
        upload_delay=_seconds(UPLOAD_DELAY, 0.1),
        seed_data=os.getenv(SEED_DATA) or None,
    )
