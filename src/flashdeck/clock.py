"""Wall clock access for the interface layers.

The scheduling engine never reads time itself; front ends call now_ms() once
per user action and pass the value down.
"""

import time


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000
