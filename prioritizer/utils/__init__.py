"""
Shared utilities for prioritizer.

Common functionality used across contexts:
- Configuration loading
- Logger setup
"""

from prioritizer.utils.config import load_settings

__all__ = ["load_settings"]
