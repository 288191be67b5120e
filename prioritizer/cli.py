"""
Command-line interface for prioritize.

Boosts the priority of jobs of the selected types by setting the do_now flag on
all current jobs of those types that are waiting to be picked up, and can keep
doing so for new jobs as the host creates them.

The watched job types live in process memory and are cleared whenever the
world unloads. An embedding host should call run_command() for each invocation
so that the watch list survives between commands.
"""

from typing import List, Optional

import typer
from typing_extensions import Annotated

from prioritizer.contexts.host.session import get_world
from prioritizer.contexts.prioritizing.commandline import (
    parse_commandline,
    run_action,
    wants_help,
)
from prioritizer.contexts.prioritizing.logger import setup_prioritizing_logger
from prioritizer.contexts.prioritizing.prioritizer import make_prioritizer
from prioritizer.contexts.prioritizing.reports import format_unknown_job_type
from prioritizer.utils.config import load_settings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# ctx.meta key holding the action flags given, in command-line order
ACTION_FLAGS_KEY = "prioritize.action_flags"

app = typer.Typer(
    add_completion=False,
    help="Boost the priority of jobs of the selected types",
    context_settings=CONTEXT_SETTINGS,
)


def _record_action(ctx: typer.Context, param: typer.CallbackParam, value: bool) -> bool:
    """Remember which action flags were given; the last one given wins."""
    if value:
        ctx.meta.setdefault(ACTION_FLAGS_KEY, []).append(param.name)
    return value


@app.command(context_settings=CONTEXT_SETTINGS)
def prioritize(
    ctx: typer.Context,
    job_types: Annotated[
        Optional[List[str]],
        typer.Argument(
            help="Job type names (run with --registry for the full list)",
            show_default=False,
        ),
    ] = None,
    add: Annotated[
        bool,
        typer.Option(
            "--add",
            "-a",
            callback=_record_action,
            help="Prioritize all current and future new jobs of the specified job types",
        ),
    ] = False,
    delete: Annotated[
        bool,
        typer.Option(
            "--delete",
            "-d",
            callback=_record_action,
            help="Stop automatically prioritizing new jobs of the specified job types",
        ),
    ] = False,
    jobs: Annotated[
        bool,
        typer.Option(
            "--jobs",
            "-j",
            callback=_record_action,
            help="Print how many jobs of each type there are (only the specified types, if any)",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress informational output (errors are still printed)",
        ),
    ] = False,
    registry: Annotated[
        bool,
        typer.Option(
            "--registry",
            "-r",
            callback=_record_action,
            help="Print the full list of valid job types",
        ),
    ] = False,
):
    """
    Set the do_now flag on current jobs of the specified types, and optionally keep
    prioritizing new jobs of those types as they are created.

    With no options and no job types, prints which job types are being
    automatically prioritized and how many jobs of each type have been
    prioritized since watching began.

    Examples:\n

        $ prioritize                                        # Show watched job types

        $ prioritize -j                                     # Count current jobs by type

        $ prioritize ConstructBuilding DestroyBuilding      # Boost current jobs once

        $ prioritize -a StoreItemInVehicle                  # Boost current and future jobs

        $ prioritize -d StoreItemInVehicle                  # Stop boosting future jobs
    """
    tokens = job_types or []
    if wants_help(tokens):
        typer.echo(ctx.get_help())
        raise typer.Exit()

    settings = load_settings()
    setup_prioritizing_logger(
        settings.logging.log_dir,
        console_level=settings.logging.console_level,
        handler_key=settings.handler_key,
    )

    world = get_world(settings)
    options = parse_commandline(
        tokens,
        world.job_types,
        action_flags=ctx.meta.get(ACTION_FLAGS_KEY, []),
        quiet=quiet,
    )

    # Unknown job types are reported even in quiet mode
    for token in options.unknown_tokens:
        typer.secho(format_unknown_job_type(token), fg=typer.colors.RED, err=True)

    for line in run_action(options, make_prioritizer(world, settings)):
        typer.echo(line)


def run_command(args: List[str]) -> int:
    """
    Run one prioritize invocation in-process and return its exit code.

    Unlike calling app() directly this never raises SystemExit, so the host
    process (and the watch state in it) keeps running. Usage errors are printed
    to stderr by the app itself and reported as exit code 2.
    """
    try:
        app(args=args, prog_name="prioritize")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0


if __name__ == "__main__":
    app()
