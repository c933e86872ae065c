"""mappedlist exception hierarchy.

Shared by the factory, the container and the ready-made lists so every
module raises and catches the same types. Validator failures are not
wrapped: whatever a validator raises reaches the caller unchanged.
"""


class MappedListError(Exception):
    """Base for all mappedlist-specific errors."""


class ConfigurationError(MappedListError):
    """Raised when factory options are invalid.

    Typically raised by ``mapped_list_factory()`` before any class is built.
    """


class ImmutableError(MappedListError):
    """Raised by a mutating operation on a container that was made immutable.

    Raised before validation and before any state change.
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name} is immutable")


class MissingKeyError(MappedListError, KeyError):
    """Raised by ``get()`` when no entry matches the key.

    Subclasses ``KeyError`` so ``except KeyError`` works as for a dict.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Missing: {self.key}"
