"""
In-memory host world.

Holds the job type registry, the live job postings list and the event source.
The world owns its postings: callers receive references into ``postings`` and
must re-read it on every call because the world mutates it between calls.
"""

from itertools import count
from pathlib import Path
from typing import List, Union

from omegaconf import OmegaConf

from prioritizer.contexts.host.events import EventManager, EventType
from prioritizer.contexts.host.job_types import JobTypeRegistry
from prioritizer.contexts.host.postings import Job, JobFlags, JobPosting, PostingFlags


class World:
    """A loaded simulation world with a job queue."""

    def __init__(self, job_types: JobTypeRegistry, events: EventManager = None):
        self.job_types = job_types
        self.events = events if events is not None else EventManager()
        self.postings: List[JobPosting] = []
        self._job_ids = count(1)

    @classmethod
    def from_snapshot(cls, path: Path, job_types: JobTypeRegistry) -> "World":
        """
        Build a world whose postings are seeded from a YAML snapshot.

        Snapshot format:
            postings:
              - type: ConstructBuilding
              - type: DestroyBuilding
                do_now: true
              - type: Dig
                dead: true

        Seeded postings are existing jobs, so no creation events are fired.
        """
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        world = cls(job_types)
        for entry in data.get("postings") or []:
            job = Job(
                id=next(world._job_ids),
                job_type=job_types.id_of(entry["type"]),
                flags=JobFlags(do_now=bool(entry.get("do_now", False))),
            )
            world.postings.append(
                JobPosting(job=job, flags=PostingFlags(dead=bool(entry.get("dead", False))))
            )
        return world

    def _resolve(self, job_type: Union[int, str]) -> int:
        if isinstance(job_type, str):
            return self.job_types.id_of(job_type)
        self.job_types.name_of(job_type)
        return job_type

    def post_job(self, job_type: Union[int, str]) -> Job:
        """Create a job, post it to the queue and fire the job creation event."""
        job = Job(id=next(self._job_ids), job_type=self._resolve(job_type))
        self.postings.append(JobPosting(job=job))
        self.events.dispatch(EventType.JOB_INITIATED, job)
        return job

    def claim(self, job: Job) -> None:
        """A worker picked up the job: its posting dies and releases the job."""
        for posting in self.postings:
            if posting.job is job:
                posting.flags.dead = True
                posting.job = None

    def unload(self) -> None:
        """End the session: fire the unload event, then drop every posting."""
        self.events.dispatch(EventType.UNLOAD)
        self.postings.clear()
