#!/usr/bin/env python3
"""toggl-client - Toggl REST API Client

Command-line entry point: fetches one Toggl resource and prints it as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# Adding src to path for development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from toggl_client.api.client import TogglClient
from toggl_client.api.endpoints import DEFAULT_RESOURCES, WORKSPACES
from toggl_client.core.config_manager import ConfigManager
from toggl_client.core.error_handler import ErrorHandler, TogglError
from toggl_client.core.logging_manager import LoggingManager


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a Toggl resource and print it as JSON")
    parser.add_argument(
        "resource",
        nargs="?",
        default=WORKSPACES,
        choices=sorted(DEFAULT_RESOURCES),
        help="Resource to fetch (default: %(default)s)"
    )
    parser.add_argument("--config", type=Path, help="Directory holding the YAML configuration files")
    parser.add_argument("--env", help="Configuration environment (default: $TOGGL_ENV or development)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the toggl-client command line."""
    args = parse_args(argv)
    error_handler = ErrorHandler()

    try:
        config = ConfigManager(config_path=args.config, environment=args.env).load_config()

        LoggingManager().configure(
            level=args.log_level or config.logging.level,
            log_to_console=config.logging.log_to_console,
            file_path=config.logging.file_path,
            max_bytes=config.logging.max_file_size_mb * 1024 * 1024,
            backup_count=config.logging.backup_count
        )

        with TogglClient.from_config(config) as client:
            data = client.get(args.resource)

    except TogglError as e:
        error_handler.handle_error(e, context=f"Fetching {args.resource}")
        summary = error_handler.summarize(e)
        print(f"Error: {summary['message']}", file=sys.stderr)
        print(f"   {summary['user_action']}", file=sys.stderr)
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
