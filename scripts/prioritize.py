#!/usr/bin/env python3
"""
Command-line entry point for prioritize, runnable from a checkout.

Usage:
    prioritize.py [<options>] [<job_type> ...]

See prioritizer/cli.py (or run with --help) for options.
"""

from prioritizer.cli import app

if __name__ == "__main__":
    app()
