"""Wallet operations built on the generic signed request."""

import logging

from .client import CoboClient

logger = logging.getLogger(__name__)


def _client(client: CoboClient | None) -> CoboClient:
    return client or CoboClient()


def create_wallet(name: str, *, client: CoboClient | None = None) -> dict:
    """Create a custodial wallet. The response carries its ``wallet_id``."""
    logger.info("Creating wallet %r", name)
    body = {"name": name, "wallet_type": "Custodial"}
    result = _client(client).request("POST", "/v2/wallets", body)
    logger.info("Wallet created successfully. ID: %s", result.get("wallet_id"))
    return result


def get_deposit_address(
    wallet_id: str, *, chain_id: str = "ETH", client: CoboClient | None = None
) -> str:
    """Create (or fetch) a deposit address for the wallet on the given chain."""
    logger.info("Retrieving %s deposit address for wallet %s", chain_id, wallet_id)
    body = {"chain_id": chain_id}
    result = _client(client).request("POST", f"/v2/wallets/{wallet_id}/addresses", body)

    # The API answers with a list of address objects
    if isinstance(result, list):
        address_info = result[0] if result else {}
    else:
        address_info = result
    address = (address_info or {}).get("address") or ""
    logger.info("%s deposit address: %s", chain_id, address)
    return address


def withdraw_eth(
    wallet_id: str,
    to_address: str,
    amount: str | float,
    *,
    client: CoboClient | None = None,
) -> dict:
    """Transfer ETH from a custodial wallet to an external address."""
    logger.info("Withdrawing %s ETH from wallet %s to %s", amount, wallet_id, to_address)
    body = {
        "source_wallet_id": wallet_id,
        "token_id": "ETH",
        "to_address": to_address,
        "amount": amount,
    }
    result = _client(client).request("POST", "/v2/transactions/transfer", body)
    logger.info("Withdrawal request submitted")
    return result
