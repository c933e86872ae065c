"""mapped_list_factory — manufacture MappedList classes bound to validators.

Each call returns a brand-new class, even for identical options, so two
lists built from separate calls are never interchangeable::

    Lowered = mapped_list_factory(validate_key=str.lower)
    params = Lowered([("Charset", "utf-8")])
    params.get("CHARSET")  # "utf-8"

The returned class is meant to be subclassed when extra behavior is
needed::

    class Headers(mapped_list_factory(validate_key=_header_name)):
        ...
"""

import logging
from typing import Any

from mappedlist.config import MappedListOptions
from mappedlist.errors import ConfigurationError
from mappedlist.mapped_list import MappedList

logger = logging.getLogger("mappedlist.factory")


def mapped_list_factory(
    options: MappedListOptions | None = None,
    *,
    validate_key: Any = None,
    validate_value: Any = None,
    name: str | None = None,
) -> type[MappedList[Any]]:
    """Return a new ``MappedList`` subclass bound to the given validators.

    Args:
        options: Full configuration. Mutually exclusive with the keywords.
        validate_key: Shorthand for ``MappedListOptions.validate_key``.
        validate_value: Shorthand for ``MappedListOptions.validate_value``.
        name: Shorthand for ``MappedListOptions.name``.

    Raises:
        ConfigurationError: Invalid options, or both forms were given.
    """
    overrides = {
        field: value
        for field, value in (
            ("validate_key", validate_key),
            ("validate_value", validate_value),
            ("name", name),
        )
        if value is not None
    }
    if options is None:
        options = MappedListOptions(**overrides)
    elif overrides:
        msg = f"Pass either options or keyword overrides, not both (got {', '.join(overrides)})"
        raise ConfigurationError(msg)

    namespace = {
        "__slots__": (),
        "__qualname__": options.name,
        "validate_key": staticmethod(options.validate_key),
        "validate_value": staticmethod(options.validate_value),
    }
    cls = type(options.name, (MappedList,), namespace)
    logger.debug("Created mapped list type %s (id=%#x)", options.name, id(cls))
    return cls
