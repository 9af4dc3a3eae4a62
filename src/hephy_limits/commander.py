"""Commander protocol and the dry-run commander.

A commander executes the request the router parsed: listing, setting or
unsetting limits on the platform. The router only depends on
CommanderProtocol, so any object with the three methods below can be
injected (an API client, a test double, or DryRunCommander).
"""

import json
import logging
from typing import IO, Any, Protocol, runtime_checkable

import click
import yaml

from .config import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from .exceptions import InvalidOutputFormatError
from .models import LimitKind, LimitRequest, Subcommand

logger = logging.getLogger(__name__)


@runtime_checkable
class CommanderProtocol(Protocol):
    """
    Protocol for objects that execute limits requests.

    ``app`` is None when no ``--app`` was given and ``""`` for an explicit
    ``--app=``; both mean "use the default app", and resolving it is the
    commander's job. ``kind`` is always exactly ``"memory"`` or ``"cpu"``.
    ``limits`` holds ``<type>=<value>`` specs for set and bare process types
    for unset, verbatim and in input order.

    Example:
        class RecordingCommander:
            def limits_list(self, app):
                ...

            def limits_set(self, app, limits, kind):
                ...

            def limits_unset(self, app, limits, kind):
                ...

        assert isinstance(RecordingCommander(), CommanderProtocol)  # True
    """

    def limits_list(self, app: str | None) -> Any:
        """List the limits of an app."""
        ...

    def limits_set(self, app: str | None, limits: list[str], kind: str) -> Any:
        """Set limits of one kind for the given process types."""
        ...

    def limits_unset(self, app: str | None, limits: list[str], kind: str) -> Any:
        """Unset limits of one kind for the given process types."""
        ...


class DryRunCommander:
    """
    Commander that renders requests instead of sending them.

    Each call is recorded in ``requests`` and echoed as YAML or JSON.

    Args:
        output: Output format, one of ``OUTPUT_FORMATS``
        file: Stream to write to (default: stdout)
    """

    def __init__(self, output: str = DEFAULT_OUTPUT_FORMAT, file: IO[str] | None = None) -> None:
        if output not in OUTPUT_FORMATS:
            raise InvalidOutputFormatError(output, OUTPUT_FORMATS)
        self.output = output
        self.file = file
        self.requests: list[LimitRequest] = []

    def limits_list(self, app: str | None) -> LimitRequest:
        return self._render(LimitRequest(action=Subcommand.LIST, app=app))

    def limits_set(self, app: str | None, limits: list[str], kind: str) -> LimitRequest:
        return self._render(
            LimitRequest(
                action=Subcommand.SET,
                app=app,
                values=tuple(limits),
                kind=LimitKind(kind),
            )
        )

    def limits_unset(self, app: str | None, limits: list[str], kind: str) -> LimitRequest:
        return self._render(
            LimitRequest(
                action=Subcommand.UNSET,
                app=app,
                values=tuple(limits),
                kind=LimitKind(kind),
            )
        )

    def _render(self, request: LimitRequest) -> LimitRequest:
        self.requests.append(request)
        payload = request.as_dict()
        logger.debug("Dry run %s request: %s", request.action.value, payload)
        if self.output == "json":
            text = json.dumps(payload, indent=2)
        else:
            text = yaml.safe_dump(payload, default_flow_style=False, sort_keys=False).rstrip()
        click.echo(text, file=self.file)
        return request
