"""
Common observability utilities.

Re-exports logging helpers from the infra layer so that the ranking
core can log without importing infra modules directly.
"""

from courserank.infra.observability import LogPerformance, get_logger

__all__ = [
    "LogPerformance",
    "get_logger",
]
