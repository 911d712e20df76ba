# Domain Stats Package
from .models import ProgressStats

__all__ = ["ProgressStats"]
