"""
Human-readable report lines for prioritizer results.

Every function returns a list of lines; printing (and quiet mode) is up to the
caller.
"""

from typing import Callable, Dict, List, Tuple

from prioritizer.contexts.prioritizing.prioritizer import UnwatchResult, WatchResult

NameOf = Callable[[int], str]


def format_unknown_job_type(token: str) -> str:
    return (
        f'Ignoring unknown job type: "{token}". Run "prioritize -r" for a list of valid job types.'
    )


def format_boost(count: int) -> List[str]:
    return [f"Prioritized {count} job{'' if count == 1 else 's'}."]


def format_watch(result: WatchResult, name_of: NameOf) -> List[str]:
    lines = format_boost(result.boosted)
    for job_type in result.requested:
        if job_type in result.added:
            lines.append(f"Automatically prioritizing future jobs of type: {name_of(job_type)}")
        else:
            lines.append(f"Skipping already-watched type: {name_of(job_type)}")
    return lines


def format_unwatch(result: UnwatchResult, name_of: NameOf) -> List[str]:
    lines = []
    for job_type in result.requested:
        if job_type in result.removed:
            lines.append(f"No longer automatically prioritizing jobs of type: {name_of(job_type)}")
        else:
            lines.append(f"Skipping unwatched type: {name_of(job_type)}")
    return lines


def format_status(status: List[Tuple[int, int]], name_of: NameOf) -> List[str]:
    if not status:
        return ["Not automatically prioritizing any jobs."]
    return ["Automatically prioritized jobs:"] + [
        f"{count}\t{name_of(job_type)}" for job_type, count in status
    ]


def format_job_counts(counts: Dict[int, int], name_of: NameOf) -> List[str]:
    if not counts:
        return ["No current jobs."]
    return ["Current job counts by type:"] + [
        f"{count}\t{name_of(job_type)}" for job_type, count in counts.items()
    ]


def format_registry(names: List[str]) -> List[str]:
    return ["Valid job types:"] + [f"  {name}" for name in names]
