"""Walk through the Cobo helpers: sign, create a wallet, get an address, list wallets.

The withdrawal step only runs when --withdraw-to is given.
"""

import argparse
import json
import sys
import time

import requests

from cobo_custody import CoboError, create_wallet, get_deposit_address, withdraw_eth
from cobo_custody.cli import add_credential_args, client_from_args
from cobo_custody.signing import make_nonce, sign_request


def run(args: argparse.Namespace) -> None:
    client = client_from_args(args)

    print("\n=== Example 0: Using sign_request directly ===")
    signature = sign_request("GET", "/v2/wallets", make_nonce(), {"limit": 10, "offset": 0}, client.config.api_secret)
    print(f"Generated signature: {signature}")
    print("This signature can be used in the 'BIZ-API-SIGNATURE' header for API requests")

    print("\n=== Example 1: Creating a new wallet ===")
    wallet = create_wallet(f"Test Wallet {int(time.time() * 1000)}", client=client)
    wallet_id = wallet.get("wallet_id")
    print(f"Wallet created with ID: {wallet_id}")

    print("\n=== Example 2: Getting a deposit address ===")
    address = get_deposit_address(wallet_id, client=client)
    print(f"Deposit address: {address}")

    print("\n=== Example 3: Using the generic request ===")
    wallets = client.request("GET", "/v2/wallets", {"limit": 10, "offset": 0})
    count = len(wallets) if isinstance(wallets, list) else len(wallets.get("data", []))
    print(f"Retrieved {count} wallets")

    if args.withdraw_to:
        print("\n=== Example 4: Withdrawing ETH ===")
        withdrawal = withdraw_eth(wallet_id, args.withdraw_to, args.amount, client=client)
        print(f"Withdrawal initiated: {json.dumps(withdrawal)}")


def main():
    parser = argparse.ArgumentParser(description="Run the Cobo API examples end to end")
    parser.add_argument("--withdraw-to", default=None, help="External ETH address; enables the withdrawal example")
    parser.add_argument("--amount", default="0.01", help="Amount of ETH to withdraw (default: 0.01)")
    add_credential_args(parser)
    args = parser.parse_args()

    try:
        run(args)
    except (CoboError, requests.RequestException) as e:
        print(f"Error occurred: {e}")
        sys.exit(1)

    print("\nAll operations completed successfully!")


if __name__ == "__main__":
    main()
