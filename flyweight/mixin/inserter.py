r"""Insertion-only cache mixin.

Adds the single write path on top of the read-only accessor mixin. The cache
grows monotonically: there is no update, delete or clear operation.

Simple inheritance diagram (Doxygen dot):
\dot
digraph CachePattern {
    rankdir=LR;
    node [shape=rectangle];
    "CacheAccessorMixin" -> "CacheInserterMixin";
}
\enddot
"""

from __future__ import annotations

from typing import Callable, Hashable, Tuple, TypeVar

from ..storage import ThreadSafeLocalStorage
from ..utils import CacheError, get_type_name
from .accessor import CacheAccessorMixin

__all__ = [
    "CacheInserterMixin",
]

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


class CacheInserterMixin(CacheAccessorMixin[KeyType, ValType]):
    """Write-side extension for a cache: insert if absent, never replace."""

    def _insert_flyweight(
        self, key: KeyType, factory: Callable[[], ValType]
    ) -> Tuple[ValType, bool]:
        """Return ``(flyweight, created)``, building it with `factory` when absent.

        Raises:
            CacheError: if the backing mapping cannot insert atomically.
        """
        mapping = self._get_mapping()
        if not isinstance(mapping, ThreadSafeLocalStorage):
            raise CacheError(
                f"{get_type_name(type(mapping))} has no atomic insert",
                ["Back the cache with ThreadSafeLocalStorage"],
                {
                    "expected_type": "ThreadSafeLocalStorage",
                    "actual_type": get_type_name(type(mapping)),
                },
            )
        return mapping.insert_if_absent(key, factory)
