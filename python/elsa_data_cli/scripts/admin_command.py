#!/usr/bin/env python3
"""
Elsa Data Admin Command CLI

Executes admin commands inside a deployed Elsa Data environment. The command
is handed to the command Lambda registered in Cloud Map, and the command's
log output is printed once it has finished.

Usage:
    elsa-data-cli [-n namespace] [-s service] command words...

Example:
    elsa-data-cli -n elsa-data-dev datasets sync 10g
"""

import argparse
import sys
from typing import List, Optional

from botocore.exceptions import BotoCoreError

from elsa_data_cli.aws import create_clients
from elsa_data_cli.config import AdminDefaults, load_config
from elsa_data_cli.exceptions import (
    AdminCommandError,
    CommandFailedError,
    ConfigurationError,
)
from elsa_data_cli.logging_config import get_logger, parse_level
from elsa_data_cli.logs import create_console
from elsa_data_cli.pipeline import run_admin_command


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the admin command CLI."""
    parser = argparse.ArgumentParser(
        prog="elsa-data-cli",
        description="An administration tool for Elsa Data instances",
    )

    parser.add_argument(
        "-n",
        "--namespace",
        help=f"CloudMap namespace for Elsa Data instance (default: {AdminDefaults.NAMESPACE})",
    )
    parser.add_argument(
        "-s",
        "--service",
        help=f"CloudMap service for commands (default: {AdminDefaults.SERVICE})",
    )
    parser.add_argument("--region", help="AWS region (default: from AWS config)")
    parser.add_argument("--profile", help="AWS named profile (default: from AWS config)")
    parser.add_argument(
        "--timeout",
        type=int,
        help=f"Seconds to wait for the command to finish (default: {AdminDefaults.READ_TIMEOUT})",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable coloured log output",
    )
    parser.add_argument(
        "--log-level",
        choices=["ERROR", "WARNING", "INFO", "DEBUG"],
        help="Log level for the tool's own diagnostics",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="The admin command to execute",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the admin command CLI.

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.error("an admin command is required")

    logger = get_logger()
    if args.log_level:
        logger.setLevel(parse_level(args.log_level))

    try:
        config = load_config(
            namespace=args.namespace,
            service=args.service,
            region=args.region,
            profile=args.profile,
            read_timeout=args.timeout,
            color=args.color,
        )
        clients = create_clients(config)
        console = create_console(color=config.color)
        run_admin_command(config, args.command, clients, console)
        return 0

    except CommandFailedError as e:
        logger.debug(f"Command rejected by Lambda: {e}")
        print(str(e), file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 1
    except AdminCommandError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except BotoCoreError as e:
        logger.error(f"AWS configuration error: {e}")
        print(f"ERROR: AWS configuration error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
