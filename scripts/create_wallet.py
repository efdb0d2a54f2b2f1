"""Create a custodial wallet via the Cobo API."""

import argparse
import json
import sys
import time

import requests

from cobo_custody import CoboError, create_wallet
from cobo_custody.cli import add_credential_args, client_from_args


def main():
    parser = argparse.ArgumentParser(description="Create a custodial wallet")
    parser.add_argument("--name", default=None, help="Wallet name (default: 'Test Wallet <timestamp>')")
    add_credential_args(parser)
    args = parser.parse_args()

    name = args.name or f"Test Wallet {int(time.time() * 1000)}"
    try:
        client = client_from_args(args)
        result = create_wallet(name, client=client)
    except (CoboError, requests.RequestException) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
