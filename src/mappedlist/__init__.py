"""mappedlist — ordered multi-maps with pluggable validation.

A mapped list is a list of ``(key, value)`` pairs: keys repeat, order is
kept, and the whole thing can be locked read-only.

Basic usage::

    from mappedlist import mapped_list_factory

    Params = mapped_list_factory(validate_key=str.lower)

    params = Params([("A", "1")])
    params.append("a", "2")
    params.get_all("a")  # ["1", "2"]
    params.make_immutable()

Ready-made lists for HTTP::

    from mappedlist.http.headers import Headers
    from mappedlist.http.query import QueryParams
"""

__version__ = "0.1.0"
__all__ = [
    "MISSING",
    "ConfigurationError",
    "ImmutableError",
    "MappedList",
    "MappedListError",
    "MappedListOptions",
    "MissingKeyError",
    "MultiValueMapping",
    "WithImmutability",
    "mapped_list_factory",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mappedlist`` fast while providing a clean top-level API.
    """
    if name == "mapped_list_factory":
        from mappedlist.factory import mapped_list_factory

        return mapped_list_factory

    if name == "MappedList":
        from mappedlist.mapped_list import MappedList

        return MappedList

    if name == "MappedListOptions":
        from mappedlist.config import MappedListOptions

        return MappedListOptions

    if name in ("MappedListError", "ConfigurationError", "ImmutableError", "MissingKeyError"):
        from mappedlist import errors as _errors

        return getattr(_errors, name)

    if name == "WithImmutability":
        from mappedlist._internal.immutability import WithImmutability

        return WithImmutability

    if name == "MultiValueMapping":
        from mappedlist._internal.multimap import MultiValueMapping

        return MultiValueMapping

    if name == "MISSING":
        from mappedlist._internal.types import MISSING

        return MISSING

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
