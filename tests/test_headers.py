"""Tests for mappedlist.http.headers — ordered, case-insensitive Headers."""

import pytest

from mappedlist._internal.multimap import MultiValueMapping
from mappedlist.errors import ImmutableError
from mappedlist.http.headers import Headers, validate_header_name, validate_header_value


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from latin-1 encoded string pairs."""
    return Headers.from_raw((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)


class TestHeaders:
    def test_get(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h.get("Content-Type") == "text/html"

    def test_case_insensitive(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h.get("content-type") == "text/html"
        assert h.get("CONTENT-TYPE") == "text/html"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h.get("X-Missing")

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "Accept" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_contains_invalid_name_is_false(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "bad name" not in h

    def test_len_counts_every_pair(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("Accept", "*/*"))
        assert len(h) == 3

    def test_keys_are_lowercase_and_ordered(self) -> None:
        h = _h(("Accept", "*/*"), ("Content-Type", "text/html"), ("Accept", "text/xml"))
        assert list(h.keys()) == ["accept", "content-type", "accept"]

    def test_get_optional_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get_optional("accept") == "*/*"
        assert h.get_optional("x-missing") is None
        assert h.get_optional("x-missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("Accept", "*/*"))
        assert h.get_list("Set-Cookie") == ["a=1", "b=2"]
        assert h.get_list("Accept") == ["*/*"]
        assert h.get_list("X-Missing") == []

    def test_raw_property(self) -> None:
        h = Headers.from_raw(((b"A", b"1"), (b"b", b"2")))
        assert h.raw == ((b"a", b"1"), (b"b", b"2"))

    def test_latin1_round_trip(self) -> None:
        h = Headers.from_raw(((b"x-name", "café".encode("latin-1")),))
        assert h.get("x-name") == "café"
        assert h.raw == ((b"x-name", "café".encode("latin-1")),)

    def test_empty_headers(self) -> None:
        h = Headers()
        assert len(h) == 0
        assert list(h) == []

    def test_set_replaces(self) -> None:
        h = Headers([("Vary", "Accept"), ("Vary", "Cookie")])
        h.set("VARY", "*")
        assert h.get_list("vary") == ["*"]

    def test_mapping_input(self) -> None:
        h = Headers({"Content-Type": "text/plain", "X-Id": "7"})
        assert list(h) == [("content-type", "text/plain"), ("x-id", "7")]

    def test_immutable(self) -> None:
        h = _h(("Accept", "*/*")).make_immutable()
        with pytest.raises(ImmutableError):
            h.append("Accept", "text/html")

    def test_satisfies_multivalue_mapping(self) -> None:
        h = _h(("A", "1"))
        assert isinstance(h, MultiValueMapping)

    def test_repr(self) -> None:
        h = _h(("Accept", "*/*"))
        assert repr(h) == "Headers([('accept', '*/*')])"


class TestHeaderValidation:
    @pytest.mark.parametrize("name", ["", "Bad Header", "x:y", "naïve", "a\r\n"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid header name"):
            Headers().append(name, "v")

    def test_non_str_name(self) -> None:
        with pytest.raises(ValueError):
            validate_header_name(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["a\r\nSet-Cookie: x", "a\nb", "a\0b"])
    def test_injection_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid header value"):
            Headers().append("X-Test", value)

    def test_non_str_value(self) -> None:
        with pytest.raises(TypeError):
            Headers().append("X-Test", 1)  # type: ignore[arg-type]

    def test_non_latin1_value_rejected(self) -> None:
        h = Headers()
        with pytest.raises(ValueError, match="not latin-1"):
            h.append("x-name", "\u20acuro")
        assert h.raw == ()

    def test_accepted_values_encode_to_raw(self) -> None:
        h = Headers([("x-name", "caf\u00e9 \u00ff")])
        assert h.raw == ((b"x-name", "caf\u00e9 \u00ff".encode("latin-1")),)

    def test_value_whitespace_stripped(self) -> None:
        assert validate_header_value("  text/html \t") == "text/html"

    def test_lookup_value_is_validated(self) -> None:
        h = Headers([("Accept", "*/*")])
        assert h.has("accept", " */* ")
        assert h.delete("accept", "*/* ") == 1
