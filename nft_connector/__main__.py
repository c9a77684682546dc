"""
CLI entry point for the NFT connector.

Usage:
    python -m nft_connector --port 8000
    python -m nft_connector --host 127.0.0.1 --reload
"""

import argparse
import logging

import uvicorn

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def main() -> None:
    """Parse arguments and serve the application with uvicorn."""
    parser = argparse.ArgumentParser(
        prog="nft-connector", description="Serve the NFT connector HTTP API"
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Bind port")
    parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (development)"
    )
    args = parser.parse_args()

    logger.info("Starting NFT connector at http://%s:%d", args.host, args.port)
    uvicorn.run(
        "nft_connector.main:app", host=args.host, port=args.port, reload=args.reload
    )


if __name__ == "__main__":
    main()
