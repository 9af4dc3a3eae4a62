"""Core models for hephy-limits."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

GROUP = "limits"
"""Name of the command group, also accepted as an alias for ``limits:list``."""


class LimitKind(Enum):
    """Resource axis a limit applies to."""

    MEMORY = "memory"
    CPU = "cpu"

    @classmethod
    def resolve(cls, cpu: bool) -> "LimitKind":
        """Pick the kind for one invocation: ``--cpu`` wins, memory otherwise."""
        return cls.CPU if cpu else cls.MEMORY


class Subcommand(Enum):
    """Sub-commands of the ``limits`` group."""

    LIST = "list"
    SET = "set"
    UNSET = "unset"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> "Subcommand":
        """
        Map the first element of an argument vector to a sub-command.

        The bare group name is an alias for ``limits:list``. Anything that is
        not a known ``limits:<verb>`` token is UNKNOWN.
        """
        if token == GROUP:
            return cls.LIST
        prefix, sep, verb = token.partition(":")
        if prefix != GROUP or not sep:
            return cls.UNKNOWN
        try:
            return cls(verb)
        except ValueError:
            return cls.UNKNOWN

    @property
    def command_name(self) -> str:
        """Canonical token for this sub-command (e.g. ``limits:set``)."""
        return f"{GROUP}:{self.value}"


@dataclass(frozen=True)
class LimitRequest:
    """
    Normalized request handed to a commander.

    Attributes:
        action: Sub-command that produced the request
        app: Target application, or None to let the commander pick its default
        values: Raw ``<type>=<value>`` specs (set) or process types (unset),
            verbatim and in input order
        kind: Resource axis, None for list requests
    """

    action: Subcommand
    app: str | None = None
    values: tuple[str, ...] = ()
    kind: LimitKind | None = None

    def as_dict(self) -> dict[str, Any]:
        """Serialize to a plain payload (for YAML/JSON rendering)."""
        payload: dict[str, Any] = {
            "action": self.action.value,
            "app": self.app,
        }
        if self.kind is not None:
            payload["kind"] = self.kind.value
        if self.action is Subcommand.SET:
            limits = []
            for spec in self.values:
                process_type, request, limit = split_limit_spec(spec)
                limits.append({"type": process_type, "request": request, "limit": limit})
            payload["limits"] = limits
        elif self.action is Subcommand.UNSET:
            payload["types"] = list(self.values)
        return payload


def split_limit_spec(spec: str) -> tuple[str, str, str]:
    """
    Split a ``<type>=<value>`` spec into process type, request and limit.

    ``<value>`` is either a single quantity, used as both request and limit,
    or a ``<request>/<limit>`` pair split at the first ``/``. Both sides are
    returned as written: ``web=1G/`` gives an empty limit and ``web=1/2/3``
    gives the limit ``2/3``.

    Example:
        >>> split_limit_spec("web=2G")
        ('web', '2G', '2G')
        >>> split_limit_spec("db=1G/2G")
        ('db', '1G', '2G')
        >>> split_limit_spec("web=1G/")
        ('web', '1G', '')

    Raises:
        ValueError: If the spec has no ``=`` or an empty type or value
    """
    process_type, sep, value = spec.partition("=")
    if not sep or not process_type or not value:
        raise ValueError(f"expected <type>=<value>, got {spec!r}")
    request, slash, limit = value.partition("/")
    if not slash:
        return process_type, request, request
    return process_type, request, limit
