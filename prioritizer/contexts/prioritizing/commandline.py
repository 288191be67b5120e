"""
Command-line resolution for the prioritize command.

Turns parsed flags and positional job type tokens into a CommandOptions
(validated job type ids plus the action to run), and runs the action against a
Prioritizer, returning the lines to print.

Action selection:
    no flag, no job types   -> status
    no flag, job types      -> boost
    -a/--add                -> watch
    -d/--delete             -> unwatch
    -j/--jobs               -> job counts
    -r/--registry           -> registry

When several action flags are given, the last one on the command line wins.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from prioritizer.contexts.host.exceptions import UnknownJobTypeError
from prioritizer.contexts.host.job_types import JobTypeRegistry
from prioritizer.contexts.prioritizing.logger import _log_debug
from prioritizer.contexts.prioritizing.prioritizer import Prioritizer
from prioritizer.contexts.prioritizing.reports import (
    format_boost,
    format_job_counts,
    format_registry,
    format_status,
    format_unwatch,
    format_watch,
)


class Action(Enum):
    STATUS = "status"
    BOOST = "boost"
    WATCH = "watch"
    UNWATCH = "unwatch"
    JOBS = "jobs"
    REGISTRY = "registry"


# Action flag name -> action it selects
ACTION_FLAGS = {
    "add": Action.WATCH,
    "delete": Action.UNWATCH,
    "jobs": Action.JOBS,
    "registry": Action.REGISTRY,
}

# Actions whose output is informational and therefore silenced by --quiet
QUIETABLE_ACTIONS = {Action.BOOST, Action.WATCH, Action.UNWATCH}


@dataclass
class CommandOptions:
    action: Action
    job_types: List[int] = field(default_factory=list)
    unknown_tokens: List[str] = field(default_factory=list)
    quiet: bool = False
    help: bool = False


def wants_help(tokens: Sequence[str]) -> bool:
    """``prioritize help`` behaves like ``prioritize --help``."""
    return bool(tokens) and tokens[0] == "help"


def validate_job_types(tokens: Sequence[str], registry: JobTypeRegistry):
    """
    Resolve job type names to ids, dropping unknown ones.

    Duplicates are collapsed and command-line order is kept.

    Returns:
        Tuple of (job type ids, unknown tokens)
    """
    job_types: List[int] = []
    unknown: List[str] = []
    for token in tokens:
        try:
            job_type = registry.id_of(token)
        except UnknownJobTypeError as e:
            _log_debug(str(e))
            unknown.append(token)
            continue
        if job_type not in job_types:
            job_types.append(job_type)
    return job_types, unknown


def resolve_action(action_flags: Sequence[str] = (), has_job_types: bool = False) -> Action:
    """
    Pick the action from the action flags, given in command-line order.

    Raises:
        KeyError: If a flag is not one of ACTION_FLAGS
    """
    if action_flags:
        return ACTION_FLAGS[action_flags[-1]]
    return Action.BOOST if has_job_types else Action.STATUS


def parse_commandline(
    tokens: Sequence[str],
    registry: JobTypeRegistry,
    action_flags: Sequence[str] = (),
    quiet: bool = False,
) -> CommandOptions:
    """
    Build CommandOptions from flags and positional tokens.

    Args:
        tokens: Positional job type names
        registry: Host job type registry to validate against
        action_flags: Action flag names (see ACTION_FLAGS) in command-line order
        quiet: Silence informational output

    Help short-circuits validation: when help is requested nothing else is resolved.
    """
    if wants_help(tokens):
        return CommandOptions(action=Action.STATUS, quiet=quiet, help=True)

    job_types, unknown = validate_job_types(tokens, registry)
    action = resolve_action(
        action_flags,
        # Only valid job types count: "prioritize Bogus" still shows status
        has_job_types=bool(job_types),
    )
    return CommandOptions(action=action, job_types=job_types, unknown_tokens=unknown, quiet=quiet)


def run_action(options: CommandOptions, prioritizer: Prioritizer) -> List[str]:
    """
    Run the selected action.

    Returns:
        Lines to print on stdout (empty for informational actions in quiet mode)
    """
    name_of = prioritizer.name_of
    action = options.action

    if action == Action.BOOST:
        lines = format_boost(prioritizer.boost(options.job_types))
    elif action == Action.WATCH:
        lines = format_watch(prioritizer.watch(options.job_types), name_of)
    elif action == Action.UNWATCH:
        lines = format_unwatch(prioritizer.unwatch(options.job_types), name_of)
    elif action == Action.JOBS:
        lines = format_job_counts(prioritizer.current_job_counts(options.job_types), name_of)
    elif action == Action.REGISTRY:
        lines = format_registry(prioritizer.registry())
    else:
        lines = format_status(prioritizer.status(), name_of)

    if options.quiet and action in QUIETABLE_ACTIONS:
        return []
    return lines
