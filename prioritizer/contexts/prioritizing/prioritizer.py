"""
Job prioritization over the host job queue.

The Prioritizer sets the do_now flag on live postings of selected job types
(boost), and keeps a watch list of job types whose newly created jobs are
boosted from the host's job creation event (watch/unwatch). Event handlers are
registered with the host if and only if the watch list is non-empty; this is
re-checked after every change instead of tracked incrementally.

Usage:
    from prioritizer.contexts.host import get_world
    from prioritizer.contexts.prioritizing import Prioritizer

    world = get_world()
    prioritizer = Prioritizer(world)
    prioritizer.boost([world.job_types.id_of("DestroyBuilding")])
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from prioritizer.contexts.host.events import EventType
from prioritizer.contexts.host.postings import Job, JobPosting
from prioritizer.contexts.host.world import World
from prioritizer.contexts.prioritizing.logger import _log_debug, _log_info
from prioritizer.contexts.prioritizing.watch_state import WatchState, get_watch_state

DEFAULT_HANDLER_KEY = "prioritize"
DEFAULT_JOB_INITIATED_FREQUENCY = 5
DEFAULT_UNLOAD_FREQUENCY = 1


@dataclass
class WatchResult:
    """Outcome of watch(): jobs boosted right away plus per-type watch list changes."""

    boosted: int
    requested: List[int] = field(default_factory=list)
    added: List[int] = field(default_factory=list)
    already_watched: List[int] = field(default_factory=list)


@dataclass
class UnwatchResult:
    requested: List[int] = field(default_factory=list)
    removed: List[int] = field(default_factory=list)
    not_watched: List[int] = field(default_factory=list)


def boost_job_if_member(job: Job, job_types) -> bool:
    """Set do_now on ``job`` if its type is in ``job_types`` and it is not already set."""
    if job.job_type in job_types and not job.flags.do_now:
        job.flags.do_now = True
        return True
    return False


def _remove_handlers(world: World, handler_key: str) -> None:
    world.events.unsubscribe(EventType.UNLOAD, handler_key)
    world.events.unsubscribe(EventType.JOB_INITIATED, handler_key)


class Prioritizer:
    """
    Boosts jobs in a world and reacts to its job creation and unload events.

    The watch state defaults to the process-wide singleton so that handlers
    registered by one Prioritizer keep working after the invocation that
    created it has returned.
    """

    def __init__(
        self,
        world: World,
        state: Optional[WatchState] = None,
        handler_key: str = DEFAULT_HANDLER_KEY,
        job_initiated_frequency: int = DEFAULT_JOB_INITIATED_FREQUENCY,
        unload_frequency: int = DEFAULT_UNLOAD_FREQUENCY,
    ):
        self.world = world
        self.state = state if state is not None else get_watch_state()
        self.handler_key = handler_key

        self.world.events.enable_event(EventType.UNLOAD, unload_frequency)
        self.world.events.enable_event(EventType.JOB_INITIATED, job_initiated_frequency)

    # =========================================================================
    # EVENT HANDLERS
    # =========================================================================

    def on_new_job(self, job: Job) -> None:
        """Boost a newly created job if its type is watched, and count it."""
        if boost_job_if_member(job, self.state):
            count = self.state.record_boost(job.job_type)
            _log_debug(
                f"Boosted new {self.world.job_types.name_of(job.job_type)} job {job.id} "
                f"({count} since watching began)"
            )

    def clear(self) -> None:
        """Forget all watched job types and remove both event handlers."""
        self.state.clear()
        _remove_handlers(self.world, self.handler_key)

    def on_unload(self) -> None:
        _log_info("World unloaded, clearing watched job types")
        self.clear()

    def update_handlers(self) -> None:
        """Install handlers when something is watched, otherwise clear everything."""
        if len(self.state):
            self.world.events.subscribe(EventType.UNLOAD, self.handler_key, self.on_unload)
            self.world.events.subscribe(EventType.JOB_INITIATED, self.handler_key, self.on_new_job)
        else:
            self.clear()

    def handlers_installed(self) -> Tuple[bool, bool]:
        """(job creation handler registered, unload handler registered)"""
        events = self.world.events
        return (
            events.is_subscribed(EventType.JOB_INITIATED, self.handler_key),
            events.is_subscribed(EventType.UNLOAD, self.handler_key),
        )

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def live_postings(self) -> Iterator[JobPosting]:
        # Read through on every call: the host mutates its postings between calls
        for posting in self.world.postings:
            if posting.is_live:
                yield posting

    def boost(self, job_types: Iterable[int]) -> int:
        """
        Set do_now on every live posting of the given job types.

        Returns:
            Number of jobs whose flag was newly set
        """
        job_types = set(job_types)
        count = 0
        for posting in self.live_postings():
            if boost_job_if_member(posting.job, job_types):
                count += 1
        _log_debug(f"Boosted {count} current job(s)")
        return count

    def watch(self, job_types: Iterable[int]) -> WatchResult:
        """Boost current jobs of the given types, then boost future ones too."""
        job_types = list(dict.fromkeys(job_types))
        result = WatchResult(boosted=self.boost(job_types), requested=job_types)
        for job_type in job_types:
            if self.state.add(job_type):
                result.added.append(job_type)
                _log_info(f"Watching {self.world.job_types.name_of(job_type)}")
            else:
                result.already_watched.append(job_type)
        self.update_handlers()
        return result

    def unwatch(self, job_types: Iterable[int]) -> UnwatchResult:
        """Stop boosting future jobs of the given types."""
        result = UnwatchResult(requested=list(dict.fromkeys(job_types)))
        for job_type in result.requested:
            if self.state.remove(job_type):
                result.removed.append(job_type)
                _log_info(f"No longer watching {self.world.job_types.name_of(job_type)}")
            else:
                result.not_watched.append(job_type)
        self.update_handlers()
        return result

    def status(self) -> List[Tuple[int, int]]:
        """(job_type, boosted count) for every watched job type."""
        return list(self.state.items())

    def current_job_counts(self, job_types: Iterable[int] = ()) -> Dict[int, int]:
        """
        Count live postings per job type.

        Args:
            job_types: Restrict the count to these types; empty means all types

        Returns:
            Mapping job_type -> count, in enumeration order, with no zero entries
        """
        wanted = set(job_types)
        counts = Counter(
            posting.job.job_type
            for posting in self.live_postings()
            if not wanted or posting.job.job_type in wanted
        )
        return dict(sorted(counts.items()))

    def registry(self) -> List[str]:
        """Public job type names in host enumeration order."""
        return self.world.job_types.public_names()

    def name_of(self, job_type: int) -> str:
        return self.world.job_types.name_of(job_type)


def make_prioritizer(world: World, settings=None) -> Prioritizer:
    """Build a Prioritizer for ``world`` using handler key and event frequencies from settings."""
    if settings is None:
        return Prioritizer(world)
    return Prioritizer(
        world,
        handler_key=settings.handler_key,
        job_initiated_frequency=settings.events.job_initiated_frequency,
        unload_frequency=settings.events.unload_frequency,
    )


def reset_prioritizing(world: World, handler_key: str = DEFAULT_HANDLER_KEY) -> None:
    """
    Forget every watched job type and remove both event handlers from ``world``.

    Unlike reset_watch_state(), this leaves no handler subscribed with nothing
    to watch.
    """
    get_watch_state().clear()
    _remove_handlers(world, handler_key)
