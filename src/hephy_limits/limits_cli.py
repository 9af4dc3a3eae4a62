"""Routing and argument parsing for the ``limits`` command group.

``limits(argv, commander)`` takes a raw argument vector whose first element
names the sub-command (``limits:list``, ``limits:set``, ``limits:unset`` or
the bare ``limits`` alias), parses the rest with that sub-command's click
grammar and hands the normalized ``(app, limits, kind)`` arguments to the
commander. Grammar errors are click exceptions raised before the commander
is called; commander errors propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import click
from click.core import ParameterSource

from .commander import CommanderProtocol
from .config import PROG_NAME
from .models import GROUP, LimitKind, Subcommand, split_limit_spec

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")

CONTEXT_SETTINGS = {"help_option_names": list(HELP_FLAGS)}

GROUP_USAGE = """
Valid commands for limits:

limits:list        list resource limits for an app
limits:set         set resource limits for an app
limits:unset       unset resource limits for an app

Use 'deis help [command]' to learn more.
"""

GENERAL_USAGE = f"""Found no matching command, try '{PROG_NAME} help'
Usage: {PROG_NAME} <command> [<args>...]"""


def _app_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--app",
        "-a",
        metavar="<app>",
        help="The uniquely identifiable name of the application.",
    )(f)


@click.command("limits:list", context_settings=CONTEXT_SETTINGS)
@_app_option
@click.pass_obj
def limits_list(commander: CommanderProtocol, app: str | None) -> Any:
    """Lists resource limits for an application."""
    logger.debug("limits:list app=%r", app)
    return commander.limits_list(app)


def _validate_limit_specs(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[str]:
    for spec in value:
        try:
            split_limit_spec(spec)
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    return list(value)


def _validate_process_types(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[str]:
    if any(not process_type for process_type in value):
        raise click.BadParameter("process type must not be empty", ctx=ctx, param=param)
    return list(value)


@click.command("limits:set", context_settings=CONTEXT_SETTINGS)
@_app_option
@click.option("--cpu", is_flag=True, help="Value applies to CPU.")
@click.option(
    "--memory",
    "-m",
    is_flag=True,
    default=True,
    flag_value=True,
    help="Value applies to memory.  [default: true]",
)
@click.argument(
    "limits",
    nargs=-1,
    required=True,
    metavar="<type>=<value>...",
    callback=_validate_limit_specs,
)
@click.pass_obj
def limits_set(
    commander: CommanderProtocol,
    app: str | None,
    cpu: bool,
    memory: bool,
    limits: list[str],
) -> Any:
    """Sets resource requests and limits for an application.

    A resource limit is a finite resource within a pod which we can apply
    restrictions through Kubernetes. A resource request is used by the
    Kubernetes scheduler to select a node that can guarantee the requested
    resource. If only one value is provided, it is used as both request and
    limit. Requests and limits apply to each individual pod, so setting a
    memory limit of 1G means that each pod gets 1G of memory. Values need to
    be within 0 <= request <= limit.

    \b
    <type> is the process type as defined in your Procfile, such as 'web'
    or 'worker'. Dockerfile apps have a default 'cmd' process type.

    \b
    <value> is either <limit> or <request>/<limit>, e.g. web=2G db=1G/2G.
    Only one kind of limit can be set per call (memory by default).

    \b
    With --memory, units are Bytes (B), Kilobytes (K), Megabytes (M) or
    Gigabytes (G): 'deis limits:set cmd=1G' restricts every "cmd" process
    to 1 Gigabyte of memory.

    \b
    With --cpu, units are a number of CPUs or milli-CPUs:
    'deis limits:set --cpu cmd=500m' restricts every "cmd" process to half
    a CPU.
    """
    # --cpu and --memory may both be set here; --cpu takes precedence.
    kind = LimitKind.resolve(cpu=cpu)
    logger.debug("limits:set app=%r kind=%s limits=%r", app, kind.value, limits)
    return commander.limits_set(app, limits, kind.value)


@click.command("limits:unset", context_settings=CONTEXT_SETTINGS)
@_app_option
@click.option("--cpu", is_flag=True, help="Limits CPU shares.")
@click.option(
    "--memory",
    "-m",
    is_flag=True,
    default=True,
    flag_value=True,
    help="Limits memory.  [default: true]",
)
@click.argument(
    "types",
    nargs=-1,
    required=True,
    metavar="<type>...",
    callback=_validate_process_types,
)
@click.pass_context
def limits_unset(
    ctx: click.Context,
    app: str | None,
    cpu: bool,
    memory: bool,
    types: list[str],
) -> Any:
    """Unsets resource limits for an application.

    \b
    <type> is the process type as defined in your Procfile, such as 'web'
    or 'worker'. Dockerfile apps have a default 'cmd' process type.

    --memory and --cpu are mutually exclusive.
    """
    if cpu and ctx.get_parameter_source("memory") is ParameterSource.COMMANDLINE:
        raise click.UsageError("--memory and --cpu are mutually exclusive", ctx=ctx)
    kind = LimitKind.resolve(cpu=cpu)
    logger.debug("limits:unset app=%r kind=%s types=%r", app, kind.value, types)
    commander: CommanderProtocol = ctx.obj
    return commander.limits_unset(app, types, kind.value)


COMMANDS: dict[Subcommand, click.Command] = {
    Subcommand.LIST: limits_list,
    Subcommand.SET: limits_set,
    Subcommand.UNSET: limits_unset,
}


def run_command(
    subcommand: Subcommand, argv: Sequence[str], commander: CommanderProtocol
) -> Any:
    """
    Parse ``argv[1:]`` with the sub-command's grammar and run it.

    Returns:
        Whatever the commander returned, or None when help was requested

    Raises:
        click.UsageError: If the arguments do not match the grammar
    """
    command = COMMANDS[subcommand]
    prog_name = f"{PROG_NAME} {subcommand.command_name}"
    args = list(argv[1:])
    # Help wins over any grammar error elsewhere in the arguments.
    if any(arg in HELP_FLAGS for arg in args):
        ctx = click.Context(command, info_name=prog_name, obj=commander)
        click.echo(command.get_help(ctx))
        return None
    with command.make_context(prog_name, args, obj=commander) as ctx:
        return command.invoke(ctx)


def print_help(argv: Sequence[str], usage: str) -> bool:
    """Print ``usage`` if the second argument is a help flag."""
    if len(argv) > 1 and argv[1] in HELP_FLAGS:
        click.echo(usage)
        return True
    return False


def print_usage() -> None:
    """Print the general usage block for an unmatched command."""
    click.echo(GENERAL_USAGE, err=True)


def limits(argv: Sequence[str], commander: CommanderProtocol) -> Any:
    """
    Route a ``limits`` argument vector to its sub-command.

    Unknown sub-commands are not errors: the usage is printed and None is
    returned without calling the commander.

    Args:
        argv: Argument vector, starting with the sub-command token
        commander: Executor for the parsed request

    Returns:
        Whatever the commander returned, or None for help and unknown
        sub-commands

    Raises:
        click.UsageError: If the arguments do not match the grammar
    """
    token = argv[0] if argv else ""
    subcommand = Subcommand.from_token(token)
    logger.debug("Dispatching %r as %s", token, subcommand.name)

    if subcommand is not Subcommand.UNKNOWN and token != GROUP:
        return run_command(subcommand, argv, commander)

    if print_help(argv, GROUP_USAGE):
        return None

    if subcommand is Subcommand.LIST:
        return run_command(subcommand, [subcommand.command_name, *argv[1:]], commander)

    print_usage()
    return None
