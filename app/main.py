#!/usr/bin/env python3
"""
Greeting MCP Server - Entry Point

This is the main entry point for the MCP server. It serves over stdio.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# Add app directory to path for imports when running directly
APP_DIR = Path(__file__).parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from greeting_mcp import SERVER_NAME, __version__
from greeting_mcp.config import load_config
from greeting_mcp.server import create_server
from greeting_mcp.utils import setup_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Greeting MCP Server (greeting, calculator, time, image generation)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with stdio transport
  python main.py

  # Use custom config directory
  python main.py --config-dir /path/to/config

  # Verbose logging (always written to stderr)
  python main.py --log-level debug
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{SERVER_NAME} {__version__}",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Configuration directory path (default: ~/.greeting-mcp/)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (overrides config)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config_dir)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.server.log_level = args.log_level

    setup_logging(config.server.log_level, config.server.log_file)

    try:
        server = create_server(config)

        print(f"Starting {SERVER_NAME} v{__version__}", file=sys.stderr)
        print(f"Transport: {config.server.transport}", file=sys.stderr)

        server.run(transport=config.server.transport)
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"Server error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
