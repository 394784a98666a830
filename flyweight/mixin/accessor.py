r"""Read-only cache mixin with rich error context.

This module implements `CacheAccessorMixin`, an abstract, read-focused
interface over a mapping of keys to shared flyweights. It provides consistent
error reporting and context when lookups fail.

Key points:
  - Subclasses must implement `_get_mapping()` to return the backing mapping.
  - Retrieval of a missing key raises `CacheLookupError` with suggestions.
  - No mutation APIs are exposed here; see `CacheInserterMixin` for writes.

Simple inheritance diagram (Doxygen dot):
\dot
digraph CachePattern {
    rankdir=LR;
    node [shape=rectangle];
    "CacheAccessorMixin" -> "CacheInserterMixin";
    "CacheInserterMixin" -> "FlyweightCache";
}
\enddot
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, Mapping, TypeVar

from ..utils import CacheLookupError, get_type_name

__all__ = [
    "CacheAccessorMixin",
]


# -----------------------------------------------------------------------------
# Type Variables
# -----------------------------------------------------------------------------

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


# -----------------------------------------------------------------------------
# Base Mixin for Accessing Cache Entries
# -----------------------------------------------------------------------------


class CacheAccessorMixin(Generic[KeyType, ValType]):
    """Abstract accessor over a cache mapping.

    Subclasses must provide a concrete storage via `_get_mapping()`.

    Error semantics:
        Missing keys are reported via `CacheLookupError` with
        a suggestions list and context payload suitable for logs.
    """

    def _get_mapping(self) -> Mapping[KeyType, ValType]:
        """Return the underlying mapping for this cache."""
        raise NotImplementedError(
            f"Subclasses must implement `{get_type_name(type(self))}._get_mapping` method."
        )

    def _len_mapping(self) -> int:
        """Return the number of flyweights in the cache."""
        return len(self._get_mapping())

    def _iter_mapping(self) -> Iterator[KeyType]:
        """Iterate over all keys in the cache."""
        return iter(self._get_mapping())

    # -----------------------------------------------------------------------------
    # Getter Functions for Cache Contents
    # -----------------------------------------------------------------------------

    def _get_flyweight(self, key: KeyType) -> ValType:
        """Return the flyweight stored under `key`, or raise.

        Raises:
            CacheLookupError: if `key` is not present.
        """
        return self._assert_presence(key)[key]

    def _has_key(self, key: KeyType) -> bool:
        """Return True if `key` exists in the cache."""
        return key in self._get_mapping()

    # -----------------------------------------------------------------------------
    # Helper Functions
    # -----------------------------------------------------------------------------

    def _assert_presence(self, key: KeyType) -> Mapping[KeyType, ValType]:
        """Return mapping if `key` is present; otherwise raise `CacheLookupError`."""
        mapping = self._get_mapping()
        if key not in mapping:
            name = get_type_name(type(self))
            suggestions = [
                f"Key '{key}' not found in {name}",
                "Use acquire() to create the flyweight on first request",
                f"Cache contains {len(mapping)} flyweights",
            ]
            context = {
                "operation": "assert_presence",
                "cache_type": name,
                "key": str(key),
                "cache_size": len(mapping),
            }
            raise CacheLookupError(
                f"Key '{key}' is not found in the cache", suggestions, context
            )
        return mapping
