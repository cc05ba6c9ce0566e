"""
Benchmark package public API.

    from moviestore.bench import timed, time_sort_call
"""

from .measure import time_sort_call, timed

__all__ = ["timed", "time_sort_call"]
