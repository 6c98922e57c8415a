# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
import argparse
import logging
import sys
from typing import Optional, Sequence

from common import __version__
from common.config import ServerConfig, config
from common.logging_config import configure_logging
from common.port_utils import BindError
from greeter.server import start

logger = logging.getLogger("greeter")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the greeter service.

    Returns:
        Parsed arguments namespace with host and port, None where not given.
    """
    parser = argparse.ArgumentParser(
        description="HTTP server answering every request with a fixed greeting"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help=f"Host to bind the server to (default: {config.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to bind the server to (default: {config.PORT})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the greeter service CLI."""
    args = parse_arguments(argv)
    configure_logging(
        service_name="greeter",
        service_version=__version__,
        notify_loggers=("greeter",),
    )

    try:
        server_config = ServerConfig.from_config(
            config, host=args.host, port=args.port
        )
    except ValueError as e:
        logger.error("Invalid listen address: %s", e)
        sys.exit(2)

    try:
        handle = start(server_config, startup_timeout=config.STARTUP_TIMEOUT)
    except BindError as e:
        logger.error("%s", e)
        sys.exit(1)

    if not handle.wait():
        logger.error("Server on %s stopped unexpectedly", handle.url)
        sys.exit(1)


if __name__ == "__main__":
    main()
