"""Ordered, mutable query string parameters.

A ``MappedList`` of ``str`` pairs that keeps the order parameters appear
in the query string, so ``str(QueryParams.parse(qs))`` reproduces it in
canonical encoded form.
"""

from typing import Self
from urllib.parse import parse_qsl, urlencode

from mappedlist.factory import mapped_list_factory

_TRUTHY = frozenset({"true", "1", "yes", "on"})


def _require_str(value: str) -> str:
    if not isinstance(value, str):
        msg = f"Query parameters must be str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


class QueryParams(
    mapped_list_factory(
        validate_key=_require_str,
        validate_value=_require_str,
        name="QueryParams",
    )
):
    """Query string parameters in order of appearance.

    ``get`` returns the first value for a key.
    ``get_all``/``get_list`` return all values for a key.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, query_string: str | bytes = b"") -> Self:
        """Parse an ``application/x-www-form-urlencoded`` query string.

        Blank values are kept (``flag=`` yields ``("flag", "")``).
        """
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        return cls.from_pairs(parse_qsl(query_string, keep_blank_values=True))

    def to_query_string(self) -> str:
        """Encode the parameters, in order, as a query string."""
        return urlencode(list(self.entries()))

    def __str__(self) -> str:
        return self.to_query_string()

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (alias of ``get_all``)."""
        return self.get_all(key)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return the first value as int, or *default* if missing or not numeric."""
        text = self.get_optional(key, "")
        try:
            return int(text)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return the first value as bool (``true``/``1``/``yes``/``on`` -> True)."""
        if not self.has(key):
            return default
        return self.get(key).lower() in _TRUTHY
