#!/usr/bin/env python3
"""
Command-line entry point for the chordstack MCP server.

Serves the chord workbench and recipe tools over stdio (the default) or
http. Installed as the `chordstack` console script.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Parse the command line and serve the chord tools."""
    parser = argparse.ArgumentParser(description="Chordstack MCP Server")
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
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # async_server builds the workbench and recipe loader on import, so the
    # log level must be set first
    from chordstack.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting Chordstack MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Chordstack MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
