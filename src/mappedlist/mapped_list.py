"""MappedList — an ordered list of key/value pairs with repeated keys.

Entries are immutable ``(key, value)`` tuples kept in insertion order.
Every key and value passes through the class's validators exactly once,
when it is inserted by ``append()`` or ``set()``. Lookups are linear scans.

Concrete classes come from ``mapped_list_factory()``, which binds the
validators as class attributes. Subclassing directly works too::

    class Lowered(MappedList[str]):
        validate_key = staticmethod(str.lower)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from operator import itemgetter
from typing import Any, ClassVar, Self

from mappedlist._internal.immutability import WithImmutability
from mappedlist._internal.types import (
    MISSING,
    Init,
    ValidateKey,
    ValidateValue,
    passthrough,
)
from mappedlist.errors import MissingKeyError


class MappedList[V](WithImmutability):
    """Ordered multi-map with pluggable validation and an immutability lock.

    Mutating methods (``append``, ``delete``, ``set``, ``clear``, ``sort``)
    raise ``ImmutableError`` once ``make_immutable()`` has been called.
    Query and iteration methods never do.

    Construction accepts ``None``, a ``Mapping`` (one pair per item) or any
    other iterable of 2-item pairs::

        MappedList([("a", "1"), ("a", "2")])
        MappedList({"a": "1", "b": "2"})
    """

    __slots__ = ("_entries",)

    validate_key: ClassVar[ValidateKey] = staticmethod(passthrough)
    validate_value: ClassVar[ValidateValue] = staticmethod(passthrough)

    def __init__(self, init: Init | None = None) -> None:
        super().__init__()
        self._entries: list[tuple[str, V]] = []
        if init is None:
            return
        if isinstance(init, Mapping):
            self._extend(init.items())
        elif isinstance(init, (str, bytes)) or not isinstance(init, Iterable):
            msg = (
                f"{type(self).__name__} expects an iterable of (key, value) pairs "
                f"or a mapping, got {type(init).__name__}"
            )
            raise TypeError(msg)
        else:
            self._extend(init)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, V]]) -> Self:
        """Build an instance from an iterable of ``(key, value)`` pairs."""
        instance = cls()
        instance._extend(pairs)
        return instance

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, V]) -> Self:
        """Build an instance with one pair per item of *mapping*, in its order."""
        instance = cls()
        instance._extend(mapping.items())
        return instance

    def _extend(self, pairs: Iterable[Any]) -> None:
        for pair in pairs:
            key, value = _unpack(pair)
            self.append(key, value)

    # -- Validation ------------------------------------------------------

    def _check_key(self, key: str) -> str:
        return type(self).validate_key(key)

    def _check_value(self, value: V) -> V:
        return type(self).validate_value(value)

    # -- Properties ------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of entries in this list."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # -- Mutation --------------------------------------------------------

    def append(self, key: str, value: V) -> Self:
        """Append a key/value pair at the end. Never deduplicates."""
        self.raise_if_immutable()
        key = self._check_key(key)
        value = self._check_value(value)
        self._entries.append((key, value))
        return self

    def delete(self, key: str, value: Any = MISSING) -> int:
        """Remove every entry matching *key* (and *value*, if given).

        Returns:
            The number of entries removed.
        """
        self.raise_if_immutable()
        key = self._check_key(key)
        if value is not MISSING:
            value = self._check_value(value)
        return self._delete(key, value)

    def _delete(self, key: str, value: Any) -> int:
        kept = [entry for entry in self._entries if not _matches(entry, key, value)]
        removed = len(self._entries) - len(kept)
        if removed:
            self._entries[:] = kept
        return removed

    def set(self, key: str, value: V) -> Self:
        """Replace every entry for *key* with one entry, moved to the end."""
        self.raise_if_immutable()
        key = self._check_key(key)
        value = self._check_value(value)
        self._delete(key, MISSING)
        self._entries.append((key, value))
        return self

    def clear(self) -> None:
        """Remove all entries."""
        self.raise_if_immutable()
        self._entries.clear()

    def sort(self) -> Self:
        """Sort entries by key (code point order). Stable for equal keys."""
        self.raise_if_immutable()
        # sorted() first so a failing comparison leaves the entries untouched
        self._entries[:] = sorted(self._entries, key=itemgetter(0))
        return self

    # -- Queries ---------------------------------------------------------

    def get(self, key: str) -> V:
        """Return the first value for *key*.

        Raises:
            MissingKeyError: No entry matches *key*.
        """
        key = self._check_key(key)
        for entry_key, entry_value in self._entries:
            if entry_key == key:
                return entry_value
        raise MissingKeyError(key)

    def get_optional(self, key: str, default: Any = None) -> V | Any:
        """Return the first value for *key*, or *default* if missing."""
        key = self._check_key(key)
        for entry_key, entry_value in self._entries:
            if entry_key == key:
                return entry_value
        return default

    def get_all(self, key: str) -> list[V]:
        """Return all values for *key*, in order. Empty if missing."""
        key = self._check_key(key)
        return [entry_value for entry_key, entry_value in self._entries if entry_key == key]

    def has(self, key: str, value: Any = MISSING) -> bool:
        """True if an entry matches *key* (and *value*, if given)."""
        key = self._check_key(key)
        if value is not MISSING:
            value = self._check_value(value)
        return any(_matches(entry, key, value) for entry in self._entries)

    def __contains__(self, key: object) -> bool:
        """``key in lst``: False for non-str keys and keys the validator rejects."""
        if not isinstance(key, str):
            return False
        try:
            return self.has(key)
        except (TypeError, ValueError):
            return False

    # -- Iteration -------------------------------------------------------

    def keys(self) -> Iterator[str]:
        """Iterate over keys, in order, as of this call."""
        return (key for key, _ in tuple(self._entries))

    def values(self) -> Iterator[V]:
        """Iterate over values, in order, as of this call."""
        return (value for _, value in tuple(self._entries))

    def entries(self) -> Iterator[tuple[str, V]]:
        """Iterate over ``(key, value)`` pairs, in order, as of this call."""
        return iter(tuple(self._entries))

    def __iter__(self) -> Iterator[tuple[str, V]]:
        return self.entries()

    def for_each(self, callback: Callable[[V, str], object]) -> None:
        """Call ``callback(value, key)`` once per entry, in order."""
        for key, value in tuple(self._entries):
            callback(value, key)

    # -- Misc ------------------------------------------------------------

    def copy(self) -> Self:
        """Return a mutable copy with the same entries (not re-validated)."""
        clone = type(self)()
        clone._entries = list(self._entries)
        return clone

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._entries == other._entries  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


def _matches(entry: tuple[str, Any], key: str, value: Any) -> bool:
    return entry[0] == key and (value is MISSING or entry[1] == value)


def _unpack(pair: Any) -> tuple[str, Any]:
    """Split a construction pair, rejecting anything but exactly two items."""
    if isinstance(pair, (str, bytes)):
        msg = f"Expected a (key, value) pair, got {type(pair).__name__} {pair!r}"
        raise TypeError(msg)
    try:
        key, value = pair
    except (TypeError, ValueError) as exc:
        msg = f"Expected a (key, value) pair, got {pair!r}"
        raise TypeError(msg) from exc
    return key, value
