"""Ordered, case-insensitive HTTP header list.

A ``MappedList`` whose keys are lowercased header names. Satisfies the
``MultiValueMapping`` protocol and converts to and from the raw latin-1
byte pairs used in an ASGI scope.
"""

import re
from collections.abc import Iterable
from typing import Self

from mappedlist.factory import mapped_list_factory

# RFC 9110 token characters
TOKEN_CHARS = r"!#$%&'*+\-.^_`|~0-9A-Za-z"
_TOKEN_RE = re.compile(rf"[{TOKEN_CHARS}]+")
_FORBIDDEN_VALUE_CHARS = frozenset("\r\n\0")


def validate_header_name(name: str) -> str:
    """Return *name* lowercased. Raises ``ValueError`` if it is not a token."""
    if not isinstance(name, str) or not _TOKEN_RE.fullmatch(name):
        msg = f"Invalid header name: {name!r}"
        raise ValueError(msg)
    return name.lower()


def validate_header_value(value: str) -> str:
    """Return *value* without surrounding whitespace.

    Raises ``ValueError`` on CR, LF or NUL (header injection) and on
    characters outside latin-1, which ``raw`` could not encode.
    """
    if not isinstance(value, str):
        msg = f"Header value must be str, got {type(value).__name__}"
        raise TypeError(msg)
    if any(char in _FORBIDDEN_VALUE_CHARS for char in value):
        msg = f"Invalid header value: {value!r}"
        raise ValueError(msg)
    try:
        value.encode("latin-1")
    except UnicodeEncodeError as exc:
        msg = f"Header value is not latin-1: {value!r}"
        raise ValueError(msg) from exc
    return value.strip(" \t")


class Headers(
    mapped_list_factory(
        validate_key=validate_header_name,
        validate_value=validate_header_value,
        name="Headers",
    )
):
    """Ordered, case-insensitive HTTP headers.

    ``get`` returns the first matching value.
    ``get_all``/``get_list`` return all values for a header
    (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ()

    @classmethod
    def from_raw(cls, raw: Iterable[tuple[bytes, bytes]]) -> Self:
        """Build headers from ASGI-style latin-1 byte pairs."""
        return cls.from_pairs(
            (name.decode("latin-1"), value.decode("latin-1")) for name, value in raw
        )

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Header pairs as latin-1 bytes, for ASGI compatibility."""
        return tuple(
            (name.encode("latin-1"), value.encode("latin-1")) for name, value in self.entries()
        )

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (alias of ``get_all``)."""
        return self.get_all(key)
