from __future__ import annotations

import sys
from collections.abc import Sequence

import click
import typer

from syscli import __version__
from syscli.cli.context import CLIContext, build_context
from syscli.core.dispatcher import Dispatcher
from syscli.core.errors import ErrorCode, UsageError
from syscli.core.operation import InvocationArguments, Operation
from syscli.core.result import Err
from syscli.handlers import load_handlers
from syscli.output.console import Style
from syscli.output.diagnostics import trace

PROG_NAME = "syscli"

app = typer.Typer(
    name=PROG_NAME,
    help="System management CLI",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def _root(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    del version


# Commands only select the operation; main() dispatches it.
@app.command("release", help=Operation.RELEASE.summary)
def release() -> InvocationArguments:
    return InvocationArguments(Operation.RELEASE)


@app.command("update", help=Operation.UPDATE.summary)
def update() -> InvocationArguments:
    return InvocationArguments(Operation.UPDATE)


def parse(argv: Sequence[str]) -> InvocationArguments:
    """Map command-line tokens (without the program name) to an operation.

    Raises:
        UsageError: missing or unknown subcommand, bad option
        typer.Exit: --help/--version were handled (exit code 0)
    """
    try:
        result = app(args=list(argv), prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        usage = e.ctx.get_usage() if e.ctx is not None else None
        raise UsageError(e.format_message(), usage=usage) from e

    if isinstance(result, InvocationArguments):
        return result
    # Informational exit: click returns the exit code in non-standalone mode.
    raise typer.Exit(code=int(result or 0))


def _print_usage_error(ctx: CLIContext, error: UsageError) -> None:
    if error.usage:
        ctx.console.print(error.usage)
    ctx.console.print(f"Try '{PROG_NAME} --help' for help.", Style.DIM)
    ctx.console.error(error.message)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)

    ctx = build_context()
    trace(ctx.logger, "Starting system CLI...")

    try:
        args = parse(argv)
    except typer.Exit as e:
        return int(e.exit_code)
    except UsageError as e:
        _print_usage_error(ctx, e)
        return int(e.exit_code)

    dispatcher = Dispatcher(handlers=load_handlers(ctx.logger), logger=ctx.logger)
    result = dispatcher.dispatch(args.operation)
    if isinstance(result, Err):
        ctx.console.error(result.error.pretty())
        return int(result.error.exit_code)

    return int(ErrorCode.OK)
