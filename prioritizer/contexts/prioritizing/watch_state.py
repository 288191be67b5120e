"""
Watched job types and their boost counters.

The watch state outlives a single command invocation: it is a process-wide
singleton so that job types added by one invocation are still watched when the
host fires job creation events later. It is emptied explicitly, either by the
world unload handler or by reset_watch_state(). The latter resets the state
only; use prioritizing.reset_prioritizing() to also remove the event handlers.
"""

from typing import Dict, Iterator, Tuple


class WatchState:
    """
    Mapping of watched job type id -> number of jobs boosted since watching began.

    A job type is watched iff it is a key. Removing a key discards its counter;
    watching the job type again starts over from 0.
    """

    def __init__(self):
        self._counts: Dict[int, int] = {}

    def __contains__(self, job_type: int) -> bool:
        return job_type in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def add(self, job_type: int) -> bool:
        """Start watching a job type. Returns False if it was already watched."""
        if job_type in self._counts:
            return False
        self._counts[job_type] = 0
        return True

    def remove(self, job_type: int) -> bool:
        """Stop watching a job type. Returns False if it was not watched."""
        if job_type not in self._counts:
            return False
        del self._counts[job_type]
        return True

    def record_boost(self, job_type: int) -> int:
        """
        Count one more boosted job for a watched job type.

        Raises:
            KeyError: If the job type is not watched
        """
        self._counts[job_type] += 1
        return self._counts[job_type]

    def count(self, job_type: int) -> int:
        return self._counts[job_type]

    def items(self) -> Iterator[Tuple[int, int]]:
        """(job_type, count) pairs in enumeration (id) order."""
        return iter(sorted(self._counts.items()))

    def clear(self) -> None:
        self._counts.clear()


_watch_state = WatchState()


def get_watch_state() -> WatchState:
    """Return the process-wide watch state."""
    return _watch_state


def reset_watch_state() -> None:
    """Forget every watched job type and counter. Event handlers are left as they are."""
    _watch_state.clear()
