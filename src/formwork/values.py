"""Submitted values — an ordered store of ``(name, value)`` pairs.

Not a mapping: a name may appear any number of times (checkbox groups,
repeated inputs) and entries are never merged. The store is most-recent
first. ``add_*`` prepend, so single-value lookups see the newest value::

    values = Values().add_int("one", 100).add_string("one", "Hello")
    values.field_value("one")   # "Hello"
    values.field_values("one")  # ["Hello", "100"]

Immutable: every ``add_*``/``set_values`` returns a new ``Values``.
"""

from collections.abc import Iterable, Iterator

type Entry = tuple[str, str]


class Values:
    """Immutable ordered sequence of submitted ``(name, value)`` entries."""

    __slots__ = ("_entries",)

    _entries: tuple[Entry, ...]

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        object.__setattr__(self, "_entries", tuple(entries))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Values is immutable"
        raise AttributeError(msg)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Values):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Values({list(self._entries)!r})"

    # -- Building --

    def add_string(self, name: str, value: str) -> "Values":
        """Return a store with *value* added as the most recent entry for *name*."""
        return Values(((name, value), *self._entries))

    def add_int(self, name: str, value: int) -> "Values":
        """Like ``add_string``, with *value* formatted in base 10."""
        return self.add_string(name, str(value))

    def add_values(self, pairs: Iterable[Entry]) -> "Values":
        """Prepend a batch of entries, keeping the batch's own order."""
        return Values((*pairs, *self._entries))

    def set_values(self, pairs: Iterable[Entry]) -> "Values":
        """Return a store holding exactly *pairs*."""
        return Values(pairs)

    # -- Lookup --

    def all(self) -> list[Entry]:
        return list(self._entries)

    def has(self, name: str) -> bool:
        """True if *name* was submitted at all, even with an empty value."""
        return any(key == name for key, _ in self._entries)

    def field_value(self, name: str) -> str:
        """Most recent value for *name*, or ``""`` if it was not submitted."""
        for key, value in self._entries:
            if key == name:
                return value
        return ""

    def field_values(self, name: str) -> list[str]:
        """All values for *name*, most recent first."""
        return [value for key, value in self._entries if key == name]
