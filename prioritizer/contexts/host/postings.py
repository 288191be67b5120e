"""
Job and job posting records.

These are owned by the host: the host creates them, decides when they die and
drops them when a job is claimed. Other contexts may read them and set
``Job.flags.do_now``, nothing else.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class JobFlags:
    # When set, the host scheduler hands this job out before any other
    do_now: bool = False


@dataclass
class Job:
    id: int
    job_type: int
    flags: JobFlags = field(default_factory=JobFlags)


@dataclass
class PostingFlags:
    dead: bool = False


@dataclass
class JobPosting:
    """An unclaimed job waiting for a worker. ``job`` is None once the slot is released."""

    job: Optional[Job]
    flags: PostingFlags = field(default_factory=PostingFlags)

    @property
    def is_live(self) -> bool:
        return self.job is not None and not self.flags.dead
