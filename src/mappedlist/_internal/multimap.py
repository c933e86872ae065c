"""MultiValueMapping protocol — shared read-only interface for mapped lists.

A structural protocol so utilities can accept any ordered multi-valued
list of pairs (a factory-made container, ``Headers``, ``QueryParams``)
without coupling to the concrete type.
"""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only ordered list of ``(key, value)`` pairs with repeated keys.

    ``get`` returns the first value for a key and raises if it is missing.
    ``get_all`` returns every value for a key, in order.

    Only the query surface is described; mutation and locking are not
    part of the protocol.
    """

    @property
    def size(self) -> int: ...
    def __len__(self) -> int: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[tuple[str, Any]]: ...
    def get(self, key: str) -> Any: ...
    def get_optional(self, key: str, default: Any = None) -> Any: ...
    def get_all(self, key: str) -> list[Any]: ...
    def has(self, key: str, value: Any = ...) -> bool: ...
    def keys(self) -> Iterator[str]: ...
    def values(self) -> Iterator[Any]: ...
    def entries(self) -> Iterator[tuple[str, Any]]: ...
