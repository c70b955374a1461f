"""
Window structures for incremental indicators.

Window is the implementation indicators use when none is passed
explicitly. It is fixed at import time by BuildConfig.unsafe_performance:
SlidingWindow (checked, default) or UnsafeSlidingWindow (unchecked).
"""

from ..config import get_config
from ..utils.logger import get_logger
from .window import RunningSum, SlidingWindow
from .unsafe_window import UnsafeSlidingWindow


def select_window_type(unsafe_performance: bool) -> type[SlidingWindow]:
    """Return the window class for the given build flag."""
    return UnsafeSlidingWindow if unsafe_performance else SlidingWindow


Window = select_window_type(get_config().build.unsafe_performance)

if Window is UnsafeSlidingWindow:
    get_logger().warning(
        "STREAMTA_UNSAFE_PERFORMANCE enabled: indicators default to "
        "UnsafeSlidingWindow (no validity checks on push/evict)"
    )

__all__ = [
    "RunningSum",
    "SlidingWindow",
    "UnsafeSlidingWindow",
    "Window",
    "select_window_type",
]
