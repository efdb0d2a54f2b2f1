"""Withdraw ETH from a Cobo custodial wallet to an external address."""

import argparse
import json
import sys

import requests

from cobo_custody import CoboError, withdraw_eth
from cobo_custody.cli import add_credential_args, client_from_args


def main():
    parser = argparse.ArgumentParser(description="Withdraw ETH to an external address")
    parser.add_argument("--wallet-id", required=True, help="Source wallet ID")
    parser.add_argument("--to", required=True, help="Destination ETH address")
    parser.add_argument("--amount", required=True, help="Amount of ETH to withdraw, e.g. 0.01")
    add_credential_args(parser)
    args = parser.parse_args()

    print(f"Withdrawing {args.amount} ETH from {args.wallet_id} to {args.to}...")
    try:
        client = client_from_args(args)
        result = withdraw_eth(args.wallet_id, args.to, args.amount, client=client)
    except (CoboError, requests.RequestException) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
