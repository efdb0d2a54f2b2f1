"""Minimal client for the Cobo custody API."""

from .client import CoboClient, api_request
from .config import Config, load_config
from .errors import ApiError, CoboError, ConfigError, SigningError
from .signing import sign_request
from .wallets import create_wallet, get_deposit_address, withdraw_eth

__all__ = [
    "ApiError",
    "CoboClient",
    "CoboError",
    "Config",
    "ConfigError",
    "SigningError",
    "api_request",
    "create_wallet",
    "get_deposit_address",
    "load_config",
    "sign_request",
    "withdraw_eth",
]
