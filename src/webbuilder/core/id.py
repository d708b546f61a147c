"""Component ID generation.

Component ids have the form ``{type}-{epoch milliseconds}``. The timestamp
part is monotonic within the process: two ids minted in the same millisecond
get consecutive values, so ids stay unique inside an editing session.
"""

import threading
import time
from typing import NewType

ComponentID = NewType("ComponentID", str)
"""Canvas component identifier"""


class Generator:
    """Monotonic millisecond timestamp source."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_timestamp(self) -> int:
        """Return current epoch milliseconds, strictly greater than the previous call."""
        now = int(time.time() * 1000)
        with self._lock:
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now


_generator = Generator()


def new_component_id(component_type: str) -> ComponentID:
    """Mint a new component id for the given type."""
    return ComponentID(f"{component_type}-{_generator.next_timestamp()}")


def split_component_id(id_str: str) -> tuple[str, int] | None:
    """Split ``{type}-{timestamp}`` into its parts.

    Types may themselves contain dashes (``row-2``), so the split happens
    on the last dash.

    Returns:
        (type, timestamp) or None if the id does not follow the scheme
    """
    component_type, sep, stamp = id_str.rpartition("-")
    if not sep or not component_type or not stamp.isdigit():
        return None
    return component_type, int(stamp)


def extract_type(id_str: str) -> str | None:
    """Extract the component type encoded in an id."""
    parts = split_component_id(id_str)
    return parts[0] if parts else None
