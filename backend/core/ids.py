"""
Record identifiers
Ids are millisecond timestamps; path segments are read the way parseInt reads them
"""
import re
import threading
import time
from typing import Callable, Optional

# leading whitespace, optional sign, then hex or ASCII decimal digits; the rest is ignored
_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]*))")


def current_millis() -> int:
    return int(time.time() * 1000)


class IdAllocator:
    """
    Hands out millisecond-timestamp ids

    Two ids requested within the same millisecond would collide, so an id that
    does not move past the last one issued is bumped to last + 1.
    """

    def __init__(self, clock: Callable[[], int] = current_millis):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = self._clock()
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate


def parse_record_id(raw: str) -> Optional[int]:
    """
    Parse a path segment into a record id

    Args:
        raw: Path segment as received, e.g. "42", " 42abc", "0x2A"

    Returns:
        Parsed integer, or None if the segment does not start with a number
    """
    sign, hex_digits, decimal_digits = _INT_PREFIX.match(raw).groups()

    if hex_digits is not None:
        # "0x" with nothing after it is not a number
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    elif decimal_digits:
        value = int(decimal_digits)
    else:
        return None

    return -value if sign == "-" else value
