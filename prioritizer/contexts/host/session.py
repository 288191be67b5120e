"""
Process-wide handle on the currently loaded world.

An embedding host attaches its world once; command invocations then look it up
with get_world(). When nothing is attached, a world is built from settings: the
configured job type registry, seeded from the configured snapshot if any.
"""

from pathlib import Path
from typing import Optional

from omegaconf import DictConfig

from prioritizer.contexts.host.job_types import JobTypeRegistry
from prioritizer.contexts.host.world import World
from prioritizer.utils.config import load_settings, resolve_job_types_path

_current_world: Optional[World] = None


def attach_world(world: World) -> World:
    """Make ``world`` the current world."""
    global _current_world
    _current_world = world
    return world


def detach_world() -> None:
    global _current_world
    _current_world = None


def get_world(settings: DictConfig = None) -> World:
    """Return the current world, building and attaching one from settings if needed."""
    if _current_world is not None:
        return _current_world

    if settings is None:
        settings = load_settings()

    job_types = JobTypeRegistry.from_file(resolve_job_types_path(settings))
    snapshot_path = settings.world.get("snapshot_path")
    if snapshot_path:
        return attach_world(World.from_snapshot(Path(snapshot_path), job_types))
    return attach_world(World(job_types))
