"""Shared fixtures: a small job type registry and a fresh world per test."""

import pytest
from loguru import logger

from prioritizer.contexts.host import (
    Job,
    JobFlags,
    JobPosting,
    JobTypeRegistry,
    PostingFlags,
    World,
)
from prioritizer.contexts.host.session import detach_world
from prioritizer.contexts.prioritizing.watch_state import reset_watch_state

# Ids: BuildA=0, DestroyB=1, HaulC=2, (gap)=3, SENTINEL=4, Dig=5
TEST_JOB_TYPES = ["BuildA", "DestroyB", "HaulC", None, "SENTINEL", "Dig"]


@pytest.fixture(autouse=True)
def clean_process_state():
    """Watch state, current world and log sinks are process-wide: reset them around each test."""
    reset_watch_state()
    detach_world()
    logger.remove()
    yield
    reset_watch_state()
    detach_world()
    logger.remove()


@pytest.fixture
def job_types():
    return JobTypeRegistry(TEST_JOB_TYPES)


@pytest.fixture
def world(job_types):
    return World(job_types)


@pytest.fixture
def seed(world):
    """Add pre-existing postings to the world without firing creation events."""
    next_id = iter(range(1000, 2000))

    def _seed(name: str, n: int = 1, do_now: bool = False, dead: bool = False, job: bool = True):
        postings = []
        for _ in range(n):
            posting = JobPosting(
                job=Job(
                    id=next(next_id),
                    job_type=world.job_types.id_of(name),
                    flags=JobFlags(do_now=do_now),
                )
                if job
                else None,
                flags=PostingFlags(dead=dead),
            )
            world.postings.append(posting)
            postings.append(posting)
        return postings

    return _seed
