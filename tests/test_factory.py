"""Tests for mappedlist.factory — class manufacturing and validator binding."""

import pytest

from mappedlist.config import MappedListOptions
from mappedlist.errors import ConfigurationError
from mappedlist.factory import mapped_list_factory
from mappedlist.mapped_list import MappedList


class TestDefaults:
    def test_no_options(self) -> None:
        instance = mapped_list_factory()()
        assert instance.set("a", "b").get("a") == "b"

    def test_identity_validators(self) -> None:
        instance = mapped_list_factory()([("A", " x ")])
        assert list(instance) == [("A", " x ")]

    def test_default_name(self) -> None:
        assert mapped_list_factory().__name__ == "MappedList"


class TestManufacturedTypes:
    def test_subclass_of_mapped_list(self) -> None:
        cls = mapped_list_factory()
        assert issubclass(cls, MappedList)
        assert cls is not MappedList

    def test_each_call_returns_new_type(self) -> None:
        first = mapped_list_factory(validate_key=str.lower)
        second = mapped_list_factory(validate_key=str.lower)
        assert first is not second
        assert not issubclass(first, second)
        assert not issubclass(second, first)

    def test_types_are_not_interchangeable(self) -> None:
        first = mapped_list_factory()
        second = mapped_list_factory()
        assert first([("a", "1")]) != second([("a", "1")])
        assert not isinstance(first(), second)

    def test_validators_bound_on_class(self) -> None:
        cls = mapped_list_factory(validate_key=str.upper)
        assert cls.validate_key("a") == "A"
        assert cls().append("a", "1").get("A") == "1"

    def test_name(self) -> None:
        cls = mapped_list_factory(name="Cookies")
        assert cls.__name__ == "Cookies"
        assert repr(cls([("a", "1")])) == "Cookies([('a', '1')])"

    def test_instances_have_no_dict(self) -> None:
        instance = mapped_list_factory()()
        with pytest.raises(AttributeError):
            instance.extra = 1  # type: ignore[attr-defined]

    def test_subclassable(self) -> None:
        class Lower(mapped_list_factory(validate_key=str.lower)):
            def first_key(self) -> str:
                return next(self.keys())

        assert Lower([("X", "1")]).first_key() == "x"


class TestOptions:
    def test_options_object(self) -> None:
        options = MappedListOptions(validate_value=str.strip, name="Stripped")
        cls = mapped_list_factory(options)
        assert cls.__name__ == "Stripped"
        assert cls([("a", " v ")]).get("a") == "v"

    def test_options_and_keywords_conflict(self) -> None:
        with pytest.raises(ConfigurationError, match="validate_key"):
            mapped_list_factory(MappedListOptions(), validate_key=str.lower)

    def test_non_callable_validator(self) -> None:
        with pytest.raises(ConfigurationError, match="validate_value must be callable"):
            mapped_list_factory(validate_value="nope")

    def test_invalid_name(self) -> None:
        with pytest.raises(ConfigurationError):
            mapped_list_factory(name="not a name")


class TestLogging:
    def test_logs_created_type(self, caplog) -> None:
        with caplog.at_level("DEBUG", logger="mappedlist.factory"):
            mapped_list_factory(name="Logged")

        assert any("Logged" in r.message for r in caplog.records)
