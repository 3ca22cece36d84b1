"""
Utilities package - Common utilities for the Simon game
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .interval_timer import IntervalTimer

__all__ = [
    'HybridLogger',
    'ClassLogger', 
    'ColoredFormatter',
    'IntervalTimer'
]
