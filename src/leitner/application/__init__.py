# Application Package
from .buckets import get_bucket_range, to_bucket_sets
from .hints import get_hint
from .scheduler import practice
from .stats import ProgressCalculator, compute_progress
from .updater import update

__all__ = [
    "ProgressCalculator",
    "compute_progress",
    "get_bucket_range",
    "get_hint",
    "practice",
    "to_bucket_sets",
    "update",
]
