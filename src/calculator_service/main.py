"""
Command-line entrypoint of the calculator service.

This script:
- Loads the configuration from the environment and the command line
- Opens the console and file log sinks
- Serves HTTP requests until interrupted
- Closes the log sinks on exit
"""

import argparse
from typing import List, Optional

from pydantic import ValidationError

from calculator_service.common.config import ServiceConfig
from calculator_service.common.logger import close_logging, configure_logging, logger
from calculator_service.server.dispatcher import Dispatcher
from calculator_service.server.server import CalculatorServer


def parse_args(argv: Optional[List[str]] = None) -> ServiceConfig:
    """
    Parse command-line arguments and validate them into a configuration.

    Arguments left out fall back to the environment, then to defaults.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated configuration
    :rtype: ServiceConfig
    """
    parser = argparse.ArgumentParser(description="Arithmetic operations over HTTP")

    parser.add_argument("--host", help="Address to bind (env HOST, default 0.0.0.0)")
    parser.add_argument("--port", help="Port to listen on (env PORT, default 3000)")
    parser.add_argument("--log-dir", help="Directory for error.log and combined.log (env LOG_DIR, default logs)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        help="Minimum log level (env LOG_LEVEL, default INFO)",
    )

    args = parser.parse_args(argv)

    try:
        return ServiceConfig.from_env(
            host=args.host,
            port=args.port,
            log_dir=args.log_dir,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Run the calculator service.
    """
    config = parse_args(argv)
    service_logger = configure_logging(config.log_dir, config.log_level)

    try:
        server = CalculatorServer(config=config, dispatcher=Dispatcher(logger=service_logger))
        server.start()
    finally:
        # Ensure buffered log lines reach the files
        logger.info("🛑 Server stopped")
        close_logging()


if __name__ == "__main__":
    main()
