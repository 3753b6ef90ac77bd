"""Logging setup shared by the server entry point."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_LEVEL_CHOICES: Iterable[str] = tuple(LOG_LEVELS.keys())

# werkzeug writes one access line per request at INFO
ACCESS_LOGGER = "werkzeug"

# client > method url: status, written at DEBUG after each response
REQUEST_LOG_FORMAT = "%s > %s %s: %s"


def add_logging_args(parser) -> None:
    """Add --log-level, -v and -q to an argparse parser."""
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set log verbosity (debug, info, warning, error, critical)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v logs every request with its status)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Reduce log verbosity (-q hides access lines, -qq errors only)",
    )


def resolve_log_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Map an explicit level name, or the -v/-q balance, to a logging level."""
    if log_level:
        return LOG_LEVELS[log_level.lower()]

    offset = verbose - quiet
    if offset >= 1:
        return logging.DEBUG
    if offset == 0:
        return logging.INFO
    if offset == -1:
        return logging.WARNING
    return logging.ERROR


def configure_logging(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Configure the root and access loggers; return the active level."""
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    logging.getLogger(ACCESS_LOGGER).setLevel(level)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return level

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
    )
    return level


def log_request(
    logger: logging.Logger,
    remote_addr: str | None,
    method: str,
    url: str,
    status: int,
) -> None:
    """Write the request line for one handled request (shown with -v)."""
    logger.debug(REQUEST_LOG_FORMAT, remote_addr or "-", method, url, status)
