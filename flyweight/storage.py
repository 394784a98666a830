r"""Thread-safe local storage backing the flyweight cache."""

from __future__ import annotations

import logging
from collections.abc import ItemsView, KeysView, ValuesView
from threading import RLock
from typing import Callable, Dict, Generic, Hashable, Iterator, Mapping, Tuple, TypeVar

logger = logging.getLogger(__name__)

__all__ = ["ThreadSafeLocalStorage"]

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


class ThreadSafeLocalStorage(Mapping[KeyType, ValType], Generic[KeyType, ValType]):
    """Thread-safe, insertion-only storage with single-write multi-read semantics.

    `insert_if_absent` is the only write: lookup, construction and insertion
    happen under one lock, so concurrent first requests for the same key
    observe a single stored value. Entries are never replaced or removed.
    """

    def __init__(self):
        self._storage: Dict[KeyType, ValType] = {}
        self._lock = RLock()

    @property
    def lock(self) -> RLock:
        return self._lock

    def __getitem__(self, key: KeyType) -> ValType:
        with self._lock:
            return self._storage[key]

    def __iter__(self) -> Iterator[KeyType]:
        with self._lock:
            return iter(list(self._storage.keys()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._storage

    def insert_if_absent(
        self, key: KeyType, factory: Callable[[], ValType]
    ) -> Tuple[ValType, bool]:
        """Return ``(value, created)`` for `key`, building it with `factory` on a miss.

        `factory` is only called when `key` is absent. If it raises, nothing
        is stored.
        """
        with self._lock:
            try:
                return self._storage[key], False
            except KeyError:
                pass
            value = factory()
            self._storage[key] = value
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Stored %r (size=%d)", key, len(self._storage))
            return value, True

    def keys(self) -> KeysView[KeyType]:
        with self._lock:
            return KeysView(dict(self._storage))

    def values(self) -> ValuesView[ValType]:
        with self._lock:
            return ValuesView(dict(self._storage))

    def items(self) -> ItemsView[KeyType, ValType]:
        with self._lock:
            return ItemsView(dict(self._storage))
