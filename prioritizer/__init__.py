"""
prioritizer - automatic job prioritization for a host simulation's job queue

Sets the "do now" flag on live job postings of selected job types, and can keep
watching the job queue so that new jobs of those types are boosted as soon as
the host creates them.

Architecture:
- Host Context: Job type registry, job postings, event source, in-memory world
- Prioritizing Context: Watch state, boost/watch operations, command resolution
"""

__version__ = "0.1.0"
