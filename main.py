#!/usr/bin/env python3
"""Project entry point. Serves the public directory on port 3000."""

import logging
import signal
import sys

from core import ServerConfig
from web import serve

logger = logging.getLogger("publicserve")


def _interrupt(signum, _frame) -> None:
    raise KeyboardInterrupt(f"signal {signum}")


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s %(message)s',
        stream=sys.stdout,
    )


def main() -> int:
    config = ServerConfig.from_env()
    configure_logging(config.log_level)
    logger.info({"evt": "startup", "component": "publicserve", "log_level": config.log_level})
    # SIGTERM stops the listener the same way Ctrl+C does.
    signal.signal(signal.SIGTERM, _interrupt)
    return serve(config)


if __name__ == "__main__":
    sys.exit(main())
