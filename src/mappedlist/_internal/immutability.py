"""WithImmutability — one-way read-only lock for mutable containers.

A small mixin: ``make_immutable()`` sets the flag, ``immutable`` reads it,
and ``raise_if_immutable()`` is the guard every mutating method calls first.
There is no way to unlock.
"""

import logging
from typing import Self

from mappedlist.errors import ImmutableError

logger = logging.getLogger("mappedlist.immutability")


class WithImmutability:
    """Mixin providing a cooperative, one-way immutability flag."""

    __slots__ = ("_immutable",)

    def __init__(self) -> None:
        self._immutable = False

    @property
    def immutable(self) -> bool:
        """True once ``make_immutable()`` has been called."""
        return self._immutable

    def make_immutable(self) -> Self:
        """Lock this instance against further mutation. Idempotent."""
        if not self._immutable:
            self._immutable = True
            logger.debug("%s locked", type(self).__name__)
        return self

    def raise_if_immutable(self) -> None:
        """Raise ``ImmutableError`` if this instance is locked."""
        if self._immutable:
            raise ImmutableError(type(self).__name__)
