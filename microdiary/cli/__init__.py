"""CLI commands for Micro Diary.

This package provides the command-line interface for writing the daily
entry, reviewing history and checking streaks, badges and trends.
"""

from microdiary.cli.main import cli, main

__all__ = ["cli", "main"]
