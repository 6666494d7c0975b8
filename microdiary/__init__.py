"""Micro Diary - one line a day, with streaks, badges and trends."""

__version__ = "0.1.0"
