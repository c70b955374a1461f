"""
Utility modules.
"""

from .logger import get_logger, setup_logger, StreamLogger
from .helpers import parse_int, parse_float

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "StreamLogger",
    # Parameter parsing
    "parse_int",
    "parse_float",
]
