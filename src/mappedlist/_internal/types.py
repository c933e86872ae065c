"""Shared type aliases used across mappedlist modules."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

# Key validator: receives the raw key, returns the key to store (or raises)
ValidateKey: TypeAlias = Callable[[str], str]

# Value validator: receives the raw value, returns the value to store (or raises)
ValidateValue: TypeAlias = Callable[[Any], Any]

# Accepted construction input
Init: TypeAlias = Iterable[tuple[str, Any]] | Mapping[str, Any]


class _Missing:
    """Marker type for an argument that was not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Absent value filter for ``delete()``/``has()``; ``None`` remains a real value
MISSING = _Missing()


def passthrough[T](value: T) -> T:
    """Default validator: return *value* unchanged."""
    return value
