"""Shared helpers: logger setup and wire timestamp parsing."""

# Bracket Graph
# Copyright (C) 2025  Bracket Graph developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
from datetime import datetime
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil import tz

PACKAGE_LOGGER = "bracketgraph"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A logger nested under the package logger
    """
    return logging.getLogger(name)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        debug: Log at DEBUG instead of INFO

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 wire timestamp.

    Naive timestamps are taken as UTC. ``None`` and empty strings mean
    the field was not set.

    Raises:
        ValueError: If the value is not a parseable timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = date_parser.isoparse(value)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Inverse of :func:`parse_timestamp` for serialization."""
    if value is None:
        return None
    return value.isoformat()
