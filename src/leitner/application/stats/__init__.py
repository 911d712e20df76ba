# Application Stats Package
from .progress_calculator import ProgressCalculator, compute_progress

__all__ = ["ProgressCalculator", "compute_progress"]
