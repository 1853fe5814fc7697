#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

Supports the stdio and http transports. Project tunings are read from
./tunings unless --tunings-dir (or CHUK_HARMONY_TUNINGS_DIR) points
elsewhere.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tunings-dir",
        help="Directory of project tuning YAML files (default: ./tunings)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.tunings_dir:
        os.environ["CHUK_HARMONY_TUNINGS_DIR"] = args.tunings_dir

    # The server module reads its configuration at import time
    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Harmony MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Harmony MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
