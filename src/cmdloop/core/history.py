"""Line history with previous/next recall.

The cursor is either None (the fresh position: nothing recalled) or an
index into the entries. Transitions:

    recall_previous: fresh -> newest, i -> i - 1, 0 -> 0
    recall_next:     i -> i + 1, newest -> fresh (""), fresh -> oldest

So k previous presses followed by k next presses always return to the
fresh position.
"""

from __future__ import annotations

from collections import deque

DEFAULT_HISTORY_SIZE = 1000


class HistoryNavigator:
    """Bounded, append-only log of submitted scripts with a recall cursor.

    Example:
        >>> history = HistoryNavigator()
        >>> history.append("a")
        >>> history.append("b")
        >>> history.recall_previous()
        'b'
        >>> history.recall_previous()
        'a'
        >>> history.recall_next()
        'b'
    """

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._entries: deque[str] = deque(maxlen=max_size)
        self._cursor: int | None = None

    @property
    def entries(self) -> tuple[str, ...]:
        """Entries, oldest first."""
        return tuple(self._entries)

    @property
    def cursor(self) -> int | None:
        """Index of the recalled entry, or None at the fresh position."""
        return self._cursor

    @property
    def at_fresh(self) -> bool:
        return self._cursor is None

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or DEFAULT_HISTORY_SIZE

    def append(self, script: str) -> None:
        """Record a submitted script and reset the cursor to fresh."""
        self._entries.append(script)
        self._cursor = None

    def reset_cursor(self) -> None:
        self._cursor = None

    def recall_previous(self, current: str = "") -> str:
        """Move toward older entries.

        Args:
            current: Text currently in the input, returned unchanged when
                there is no history.
        """
        if not self._entries:
            return current
        if self._cursor is None:
            self._cursor = len(self._entries) - 1
        elif self._cursor > 0:
            self._cursor -= 1
        return self._entries[self._cursor]

    def recall_next(self, current: str = "") -> str:
        """Move toward newer entries, wrapping from fresh to the oldest."""
        if not self._entries:
            return current
        if self._cursor is None:
            self._cursor = 0
        elif self._cursor < len(self._entries) - 1:
            self._cursor += 1
        else:
            self._cursor = None
            return ""
        return self._entries[self._cursor]

    def __len__(self) -> int:
        return len(self._entries)
