"""Undo/redo history of component-list snapshots.

Snapshots are tuples of immutable ``Component`` objects. Consecutive
snapshots share every component that did not change, so an edit costs one
tuple plus the replaced components rather than a copy of the whole page.
The history is a bounded ring: once ``limit`` snapshots are stored, pushing
a new one drops the oldest.
"""

from collections import deque

from .models import Component

Snapshot = tuple[Component, ...]


class History:
    """Linear snapshot history with a cursor."""

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._entries: deque[Snapshot] = deque(maxlen=limit)
        self._index = -1

    @property
    def index(self) -> int:
        """Cursor position, -1 when empty."""
        return self._index

    @property
    def entries(self) -> tuple[Snapshot, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> Snapshot | None:
        if self._index < 0:
            return None
        return self._entries[self._index]

    def push(self, snapshot: Snapshot) -> None:
        """Append a snapshot, discarding any redo branch past the cursor."""
        while len(self._entries) > self._index + 1:
            self._entries.pop()
        # deque(maxlen) drops the oldest entry on overflow
        self._entries.append(snapshot)
        self._index = len(self._entries) - 1

    def seed(self, snapshot: Snapshot) -> None:
        """Replace everything with a single snapshot."""
        self._entries.clear()
        self._entries.append(snapshot)
        self._index = 0

    def clear(self) -> None:
        self._entries.clear()
        self._index = -1

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Snapshot | None:
        """Step back; None at the boundary."""
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Snapshot | None:
        """Step forward; None at the boundary."""
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def __len__(self) -> int:
        return len(self._entries)
