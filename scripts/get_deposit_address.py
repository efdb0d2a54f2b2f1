"""Get a deposit address for a Cobo custodial wallet."""

import argparse
import sys

import requests

from cobo_custody import CoboError, get_deposit_address
from cobo_custody.cli import add_credential_args, client_from_args


def main():
    parser = argparse.ArgumentParser(description="Get a deposit address for a wallet")
    parser.add_argument("--wallet-id", required=True, help="Wallet ID")
    parser.add_argument("--chain", default="ETH", help="Chain ID (default: ETH)")
    add_credential_args(parser)
    args = parser.parse_args()

    try:
        client = client_from_args(args)
        address = get_deposit_address(args.wallet_id, chain_id=args.chain, client=client)
    except (CoboError, requests.RequestException) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Deposit address: {address}")


if __name__ == "__main__":
    main()
