"""Configuration constants and environment resolution.

Settings come from command-line options first and fall back to environment
variables, then to the defaults below.
"""

import logging
import os

from .exceptions import InvalidLogLevelError, InvalidOutputFormatError

PROG_NAME = "deis"
"""Program name shown in usage lines (``Usage: deis limits:set ...``)."""

OUTPUT_FORMATS = ("yaml", "json")
"""Formats the dry-run commander can render requests in."""

DEFAULT_OUTPUT_FORMAT = "yaml"

OUTPUT_ENV_VAR = "DEIS_LIMITS_OUTPUT"
"""Environment variable for overriding the output format."""

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVEL_ENV_VAR = "DEIS_LIMITS_LOG_LEVEL"
"""Environment variable for overriding the log level (e.g. ``DEBUG``)."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_output_format(output: str | None = None) -> str:
    """
    Resolve the output format.

    Args:
        output: Explicit format (e.g. from ``--output``), or None to read
            ``DEIS_LIMITS_OUTPUT``

    Returns:
        Lower-cased format name

    Raises:
        InvalidOutputFormatError: If the format is not supported
    """
    if output is None:
        output = os.environ.get(OUTPUT_ENV_VAR) or DEFAULT_OUTPUT_FORMAT
    output = output.lower()
    if output not in OUTPUT_FORMATS:
        raise InvalidOutputFormatError(output, OUTPUT_FORMATS)
    return output


def get_log_level(verbose: bool = False) -> int:
    """Resolve the logging level; ``--verbose`` always means DEBUG."""
    if verbose:
        return logging.DEBUG
    name = (os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise InvalidLogLevelError(name)
    return level
