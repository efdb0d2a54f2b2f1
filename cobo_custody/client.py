"""Signed HTTP requests against the Cobo custody API."""

import json
import logging
from typing import Any

import requests

from .config import Config, load_config
from .errors import ApiError
from .signing import make_nonce, render_value, sign_request

logger = logging.getLogger(__name__)

# Methods whose parameters travel in the query string rather than a JSON body
QUERY_METHODS = ("GET", "DELETE")


def build_headers(config: Config, method: str, path: str, body: dict | None) -> dict:
    """Sign the request and return the BIZ-API-* headers."""
    nonce = make_nonce()
    signature = sign_request(method, path, nonce, body or {}, config.api_secret)
    return {
        "BIZ-API-KEY": config.api_key,
        "BIZ-API-NONCE": nonce,
        "BIZ-API-SIGNATURE": signature,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def api_request(
    method: str,
    path: str,
    body: dict | None = None,
    *,
    config: Config | None = None,
    session: requests.Session | None = None,
) -> Any:
    """Send a signed request and return the decoded JSON response.

    Raises ApiError for non-2xx responses and non-JSON bodies. Network errors
    are logged and re-raised as the underlying requests exception.
    """
    config = config or load_config()
    http = session or requests
    method = method.upper()
    url = config.base_url + path

    headers = build_headers(config, method, path, body)

    kwargs: dict[str, Any] = {"headers": headers, "timeout": config.timeout}
    if body is not None:
        if method in QUERY_METHODS:
            # Query values must match the signed params string byte for byte
            kwargs["params"] = [(key, render_value(value)) for key, value in sorted(body.items())]
        else:
            kwargs["data"] = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    logger.info("Request: %s %s", method, url)
    if body is not None:
        logger.info("Request Body: %s", json.dumps(body, ensure_ascii=False))

    try:
        resp = http.request(method, url, **kwargs)
    except requests.RequestException as e:
        logger.error("Network error during API call: %s", e)
        raise

    logger.info("Response Status: %s %s", resp.status_code, resp.reason)
    try:
        result = resp.json()
    except ValueError:
        logger.error("Invalid JSON response: %s", resp.text)
        raise ApiError(
            f"API returned non-JSON response (status {resp.status_code})", resp.status_code
        )

    if not resp.ok:
        logger.error("API Error Response: %s", json.dumps(result))
        message = None
        if isinstance(result, dict):
            message = result.get("message") or result.get("error_message")
        raise ApiError(
            f"API request failed with status {resp.status_code}: {message or resp.reason}",
            resp.status_code,
            result,
        )

    logger.info("Response Body: %s", json.dumps(result))
    return result


class CoboClient:
    """Holds credentials and a requests session for repeated calls."""

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self.session = session or requests.Session()

    def request(self, method: str, path: str, body: dict | None = None) -> Any:
        return api_request(method, path, body, config=self.config, session=self.session)
