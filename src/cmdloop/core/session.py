"""Session key/value store shared by all commands of one REPL."""

from __future__ import annotations

from typing import Any, Final


class _Missing:
    """Type of the MISSING sentinel."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
"""Returned by Session.get for keys that were never set."""


class Session:
    """In-memory key/value store, process lifetime.

    Values are never cleared automatically; handlers mutate the store
    through get/set.

    Example:
        >>> session = Session()
        >>> session.get("count") is MISSING
        True
        >>> session.set("count", 0)
        >>> session.get("count")
        0
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str, default: Any = MISSING) -> Any:
        """Return the value for key, or default (MISSING) if never set."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)

    def status(self) -> str:
        """Return the stored keys, one per line."""
        return "\n".join(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Session(keys={self.keys()!r})"
