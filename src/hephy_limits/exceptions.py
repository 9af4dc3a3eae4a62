"""Exceptions for hephy-limits."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class HephyLimitsError(Exception):
    """
    Base exception for all hephy-limits errors.

    Grammar errors are not part of this hierarchy: they are raised by click
    (``click.UsageError`` and its subclasses) while an argument vector is
    parsed, before any commander is called.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class CommanderError(HephyLimitsError):
    """
    Base exception for commander (executor) failures.

    Commanders raise subclasses of this error when the delegated
    list/set/unset operation fails. The router propagates them unchanged.
    """

    pass


class ConfigurationError(HephyLimitsError):
    """Base exception for invalid configuration values."""

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class InvalidOutputFormatError(ConfigurationError):
    """Raised when an unsupported output format is configured."""

    def __init__(self, output: str, choices: tuple[str, ...]) -> None:
        self.output = output
        self.choices = choices
        super().__init__(
            f"Invalid output format {output!r}: must be one of {', '.join(choices)}"
        )


class InvalidLogLevelError(ConfigurationError):
    """Raised when the configured log level is not a known logging level."""

    def __init__(self, level: str) -> None:
        self.level = level
        super().__init__(f"Invalid log level {level!r}")
