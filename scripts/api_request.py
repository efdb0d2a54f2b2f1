"""Send an arbitrary signed request to the Cobo API."""

import argparse
import json
import sys

import requests

from cobo_custody import CoboError
from cobo_custody.cli import add_credential_args, client_from_args


def main():
    parser = argparse.ArgumentParser(description="Send a signed Cobo API request")
    parser.add_argument("method", help="HTTP method, e.g. GET")
    parser.add_argument("path", help="Request path, e.g. /v2/wallets")
    parser.add_argument("--body", default=None, help="Parameters as a JSON object (query string for GET/DELETE)")
    add_credential_args(parser)
    args = parser.parse_args()

    body = None
    if args.body:
        try:
            body = json.loads(args.body)
        except json.JSONDecodeError as e:
            parser.error(f"--body is not valid JSON: {e}")
        if not isinstance(body, dict):
            parser.error("--body must be a JSON object")

    try:
        client = client_from_args(args)
        result = client.request(args.method, args.path, body)
    except (CoboError, requests.RequestException) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
