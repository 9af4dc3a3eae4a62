"""
hephy-limits: command surface for per-process CPU and memory limits.

Routes ``limits`` argument vectors (``limits:list``, ``limits:set``,
``limits:unset``) to a commander that talks to the platform:

Example:
    from hephy_limits import DryRunCommander, limits

    limits(["limits:set", "--cpu", "web=500m/1"], DryRunCommander())
"""

from .commander import CommanderProtocol, DryRunCommander
from .exceptions import (
    CommanderError,
    ConfigurationError,
    HephyLimitsError,
    InvalidLogLevelError,
    InvalidOutputFormatError,
)
from .limits_cli import limits
from .models import LimitKind, LimitRequest, Subcommand, split_limit_spec

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Router
    "limits",
    # Commanders
    "CommanderProtocol",
    "DryRunCommander",
    # Models
    "LimitKind",
    "LimitRequest",
    "Subcommand",
    "split_limit_spec",
    # Exceptions - Base
    "HephyLimitsError",
    # Exceptions - Categories
    "CommanderError",
    "ConfigurationError",
    # Exceptions - Configuration
    "InvalidOutputFormatError",
    "InvalidLogLevelError",
]
