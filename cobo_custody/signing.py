"""Sign Cobo API requests with an ECDSA (secp256k1) private key.

The signed message is ``METHOD|PATH|NONCE|PARAMS`` where ``PARAMS`` is the
request parameters sorted by key and rendered as ``key=value`` pairs joined by
``&``. The message is hashed with SHA-256 and the digest signed; the signature
travels hex-encoded (DER) in the ``BIZ-API-SIGNATURE`` header.
"""

import hashlib
import json
import time
from typing import Any, Mapping

from ecdsa import SECP256k1, BadSignatureError, SigningKey, VerifyingKey
from ecdsa.der import UnexpectedDER
from ecdsa.errors import MalformedPointError
from ecdsa.util import sigdecode_der, sigencode_der

from .errors import SigningError


def make_nonce() -> str:
    """Current time in milliseconds, as sent in BIZ-API-NONCE."""
    return str(int(time.time() * 1000))


def render_value(value: Any) -> str:
    """Render one parameter value the way it appears in the signed params string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_params_string(params: Mapping[str, Any] | None) -> str:
    """Render params as sorted ``key=value`` pairs joined by ``&``."""
    if not params:
        return ""
    return "&".join(f"{key}={render_value(params[key])}" for key in sorted(params))


def build_message(
    method: str, path: str, nonce: str, params: Mapping[str, Any] | None = None
) -> str:
    return f"{method.upper()}|{path}|{nonce}|{build_params_string(params)}"


def _signing_key(api_secret: str) -> SigningKey:
    secret = api_secret.strip()
    if secret.startswith(("0x", "0X")):
        secret = secret[2:]
    try:
        return SigningKey.from_string(bytes.fromhex(secret), curve=SECP256k1)
    except (ValueError, MalformedPointError) as e:
        raise SigningError(f"API secret is not a valid secp256k1 private key: {e}") from e


def sign_request(
    method: str,
    path: str,
    nonce: str,
    params: Mapping[str, Any] | None,
    api_secret: str,
) -> str:
    """Sign a request and return the hex-encoded DER signature.

    Signing is deterministic (RFC 6979), so identical inputs always produce the
    same signature.
    """
    message = build_message(method, path, nonce, params)
    digest = hashlib.sha256(message.encode("utf-8")).digest()
    key = _signing_key(api_secret)
    signature = key.sign_digest_deterministic(
        digest, hashfunc=hashlib.sha256, sigencode=sigencode_der
    )
    return signature.hex()


def public_key_hex(api_secret: str) -> str:
    """Compressed public key matching the secret, hex encoded."""
    return _signing_key(api_secret).get_verifying_key().to_string("compressed").hex()


def verify_signature(
    method: str,
    path: str,
    nonce: str,
    params: Mapping[str, Any] | None,
    signature: str,
    public_key: str,
) -> bool:
    """Check a hex DER signature against a hex (compressed or raw) public key.

    Returns False for a signature that does not verify or is not hex DER.
    Raises SigningError when the public key itself is malformed.
    """
    try:
        vk = VerifyingKey.from_string(bytes.fromhex(public_key), curve=SECP256k1)
    except (ValueError, MalformedPointError) as e:
        raise SigningError(f"Public key is not a valid secp256k1 point: {e}") from e

    message = build_message(method, path, nonce, params)
    digest = hashlib.sha256(message.encode("utf-8")).digest()
    try:
        return vk.verify_digest(bytes.fromhex(signature), digest, sigdecode=sigdecode_der)
    except (ValueError, BadSignatureError, UnexpectedDER):
        return False
