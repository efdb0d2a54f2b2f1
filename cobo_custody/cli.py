"""Argument handling shared by the scripts in ``scripts/``."""

import argparse
import logging

from .client import CoboClient
from .config import load_config


def add_credential_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--api-key", default=None, help="Cobo API key (default: $COBO_API_KEY)")
    parser.add_argument("--api-secret", default=None, help="ECDSA private key as hex string (default: $COBO_API_SECRET)")
    parser.add_argument("--base-url", default=None, help="API base URL (default: $COBO_BASE_URL or https://api.cobo.com)")
    parser.add_argument("--env-file", default=None, help="Path to a .env file (default: search from the working directory)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")


def configure_logging(quiet: bool = False) -> None:
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="[%(asctime)s] %(message)s",
    )


def client_from_args(args: argparse.Namespace) -> CoboClient:
    """Configure logging and build a client from parsed credential flags."""
    configure_logging(args.quiet)
    config = load_config(
        env_file=args.env_file,
        api_key=args.api_key,
        api_secret=args.api_secret,
        base_url=args.base_url,
    )
    return CoboClient(config)
