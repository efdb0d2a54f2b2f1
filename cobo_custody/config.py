"""Load API credentials from the environment (optionally via a .env file)."""

import math
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

DEFAULT_BASE_URL = "https://api.cobo.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Config:
    api_key: str
    # ECDSA (secp256k1) private key, hex encoded
    api_secret: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_config(
    env_file: str | None = None,
    api_key: str | None = None,
    api_secret: str | None = None,
    base_url: str | None = None,
) -> Config:
    """Build a Config from explicit values, falling back to COBO_* environment variables."""
    if env_file is not None:
        if not os.path.exists(env_file):
            raise ConfigError(f"Env file not found: {env_file}")
        load_dotenv(env_file)
    else:
        path = find_dotenv(usecwd=True)
        if path:
            load_dotenv(path)

    api_key = api_key or os.getenv("COBO_API_KEY")
    api_secret = api_secret or os.getenv("COBO_API_SECRET")
    if not api_key or not api_secret:
        raise ConfigError(
            "Missing API key or secret. Please set COBO_API_KEY and COBO_API_SECRET in .env"
        )

    base_url = base_url or os.getenv("COBO_BASE_URL") or DEFAULT_BASE_URL

    raw_timeout = os.getenv("COBO_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigError(f"COBO_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"COBO_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}")

    return Config(
        api_key=api_key,
        api_secret=api_secret,
        base_url=base_url.rstrip("/"),
        timeout=timeout,
    )
