"""Media type parameters — the ``; key=value`` tail of a Content-Type.

Parameter names are case-insensitive tokens (stored lowercased); values
are case-sensitive and quoted on output when they are not tokens::

    params = MediaTypeParameters.parse('; charset=UTF-8; boundary="a b"')
    params.get("Charset")  # "UTF-8"
    params.to_string()     # '; charset=UTF-8; boundary="a b"'
"""

import re
from typing import Self

from mappedlist.factory import mapped_list_factory
from mappedlist.http.headers import TOKEN_CHARS, validate_header_name

_TOKEN_RE = re.compile(rf"[{TOKEN_CHARS}]+")
# One ";" segment; the parameter itself is optional (RFC 9110 allows "; ;")
_PARAM_RE = re.compile(
    rf'\s*;\s*(?:(?P<key>[{TOKEN_CHARS}]+)='
    rf'(?:"(?P<quoted>(?:[^"\\]|\\.)*)"|(?P<token>[{TOKEN_CHARS}]+)))?\s*'
)
_QUOTED_PAIR_RE = re.compile(r"\\(.)")


def _validate_parameter_value(value: str) -> str:
    if not isinstance(value, str):
        msg = f"Parameter value must be str, got {type(value).__name__}"
        raise TypeError(msg)
    if any(char in "\r\n\0" for char in value):
        msg = f"Invalid parameter value: {value!r}"
        raise ValueError(msg)
    return value


def _quote(value: str) -> str:
    if _TOKEN_RE.fullmatch(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class MediaTypeParameters(
    mapped_list_factory(
        validate_key=validate_header_name,
        validate_value=_validate_parameter_value,
        name="MediaTypeParameters",
    )
):
    """Ordered media type parameters with case-insensitive names."""

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``; key=value`` parameters. The leading ``;`` is optional.

        Raises:
            ValueError: *text* is not a valid parameter list.
        """
        text = text.strip()
        if text and not text.startswith(";"):
            text = f";{text}"
        pairs: list[tuple[str, str]] = []
        pos = 0
        while pos < len(text):
            match = _PARAM_RE.match(text, pos)
            if match is None:
                msg = f"Invalid media type parameters at offset {pos}: {text!r}"
                raise ValueError(msg)
            pos = match.end()
            if match["key"] is None:
                continue
            quoted = match["quoted"]
            value = match["token"] if quoted is None else _QUOTED_PAIR_RE.sub(r"\1", quoted)
            pairs.append((match["key"], value))
        return cls.from_pairs(pairs)

    def to_string(self) -> str:
        """Render as ``; key=value`` pairs, quoting non-token values."""
        return "".join(f"; {key}={_quote(value)}" for key, value in self.entries())

    def __str__(self) -> str:
        return self.to_string()
