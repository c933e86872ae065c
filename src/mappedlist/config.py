"""Factory configuration.

MappedListOptions is a frozen dataclass: immutable after creation,
IDE-autocompletable, checked once at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from mappedlist._internal.types import ValidateKey, ValidateValue, passthrough
from mappedlist.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MappedListOptions:
    """Options for ``mapped_list_factory()``. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = MappedListOptions(validate_key=str.lower, name="Headers")
    """

    # Validation (bound to the generated class, never per-instance)
    validate_key: ValidateKey = passthrough
    validate_value: ValidateValue = passthrough

    # Generated class
    name: str = "MappedList"

    def __post_init__(self) -> None:
        if not callable(self.validate_key):
            msg = f"validate_key must be callable, got {type(self.validate_key).__name__}"
            raise ConfigurationError(msg)
        if not callable(self.validate_value):
            msg = f"validate_value must be callable, got {type(self.validate_value).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.name, str) or not self.name.isidentifier():
            msg = f"name must be a valid identifier, got {self.name!r}"
            raise ConfigurationError(msg)

    def replace(self, **changes: Any) -> MappedListOptions:
        """Return a copy with *changes* applied (re-checked)."""
        return replace(self, **changes)
