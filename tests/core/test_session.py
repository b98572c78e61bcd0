"""Tests for the session store."""

from __future__ import annotations

from cmdloop.core.session import MISSING, Session


class TestSession:
    """Tests for Session."""

    def test_unset_key_is_missing(self):
        """A key never set returns MISSING."""
        assert Session().get("nope") is MISSING

    def test_missing_distinct_from_falsy_values(self):
        """Stored falsy values are returned as-is, not as MISSING."""
        session = Session()
        for key, value in [("f", False), ("z", 0), ("e", ""), ("n", None)]:
            session.set(key, value)
            assert session.get(key) is not MISSING
            assert session.get(key) == value

    def test_explicit_default(self):
        """get() returns the provided default for unset keys."""
        assert Session().get("nope", 42) == 42

    def test_set_replaces_value(self):
        """Setting a key twice keeps the latest value."""
        session = Session()
        session.set("k", 1)
        session.set("k", 2)
        assert session.get("k") == 2
        assert len(session) == 1

    def test_status_lists_keys(self):
        """status() has one key per line, in insertion order."""
        session = Session()
        session.set("alpha", 1)
        session.set("beta", {"x": 1})
        assert session.status() == "alpha\nbeta"

    def test_status_empty(self):
        """status() of an empty session is empty."""
        assert Session().status() == ""

    def test_contains(self):
        """'in' reports whether a key was set."""
        session = Session()
        session.set("k", None)
        assert "k" in session
        assert "other" not in session


class TestMissing:
    """Tests for the MISSING sentinel."""

    def test_falsy(self):
        """MISSING is falsy."""
        assert not MISSING

    def test_repr(self):
        """MISSING has a readable repr."""
        assert repr(MISSING) == "MISSING"

    def test_singleton(self):
        """Creating the sentinel type again returns the same object."""
        assert type(MISSING)() is MISSING
