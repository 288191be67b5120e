"""
Prioritizing Context

Responsibilities:
- Boosts live jobs of selected job types
- Maintains the watch list and reacts to job creation and world unload events
- Resolves command-line flags and job type names into actions

Owns: Watch state and the do_now decisions
Never: Creates, claims or deletes jobs
"""

from prioritizer.contexts.prioritizing.commandline import (
    Action,
    CommandOptions,
    parse_commandline,
    run_action,
)
from prioritizer.contexts.prioritizing.prioritizer import (
    Prioritizer,
    UnwatchResult,
    WatchResult,
    make_prioritizer,
    reset_prioritizing,
)
from prioritizer.contexts.prioritizing.watch_state import (
    WatchState,
    get_watch_state,
    reset_watch_state,
)

__all__ = [
    "Action",
    "CommandOptions",
    "Prioritizer",
    "UnwatchResult",
    "WatchResult",
    "WatchState",
    "get_watch_state",
    "make_prioritizer",
    "parse_commandline",
    "reset_prioritizing",
    "reset_watch_state",
    "run_action",
]
