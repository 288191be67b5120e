"""
Host Context

Responsibilities:
- Defines the job type enumeration and job posting records
- Owns the live postings list and the event source
- Tracks which world is currently loaded in this process

Owns: Job lifecycle and event dispatch
Never: Decides which jobs get prioritized
"""

from prioritizer.contexts.host.events import EventManager, EventSource, EventType
from prioritizer.contexts.host.exceptions import UnknownJobTypeError
from prioritizer.contexts.host.job_types import JobTypeRegistry
from prioritizer.contexts.host.postings import Job, JobFlags, JobPosting, PostingFlags
from prioritizer.contexts.host.session import attach_world, detach_world, get_world
from prioritizer.contexts.host.world import World

__all__ = [
    "EventManager",
    "EventSource",
    "EventType",
    "Job",
    "JobFlags",
    "JobPosting",
    "JobTypeRegistry",
    "PostingFlags",
    "UnknownJobTypeError",
    "World",
    "attach_world",
    "detach_world",
    "get_world",
]
