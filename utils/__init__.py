"""
movconvert Utilities
Encoder lookup, progress display and CLI helpers.
"""

from .system_check import SystemCheck
from .progress import ProgressTracker

__all__ = ['SystemCheck', 'ProgressTracker']
