r"""Flyweight cache: one shared record per distinct intrinsic attribute tuple.

Usage::

    cache = FlyweightCache(CarModel)
    car = cache.acquire("Model S", "Tesla", "Electric")      # created
    same = cache.acquire(("Model S", "Tesla", "Electric"))   # reused
    assert car is same
    print(cache.render(car, CarUsage(registration_number="TS1234", owner="Alice")))

Every acquire is reported as created or reused through the ``flyweight.cache``
logger, the `stats` counters and any subscribed observers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from .keys import FlyweightKey, describe_key, make_key
from .mixin import CacheInserterMixin
from .records import ExtrinsicContext, IntrinsicRecord, render
from .storage import ThreadSafeLocalStorage
from .utils import InvalidAttributes, ValidationError, get_type_name

logger = logging.getLogger(__name__)

__all__ = ["FlyweightCache", "AcquireResult", "CacheStats"]

R = TypeVar("R", bound=IntrinsicRecord)


@dataclass(frozen=True)
class AcquireResult(Generic[R]):
    """Outcome of one acquire: the shared record and whether it was just built."""

    record: R
    created: bool
    key: FlyweightKey

    @property
    def reused(self) -> bool:
        return not self.created


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    size: int


Observer = Callable[[AcquireResult], Any]


class FlyweightCache(CacheInserterMixin[FlyweightKey, R], Generic[R]):
    """Factory and owner of shared `IntrinsicRecord` instances.

    Args:
        record_type: The `IntrinsicRecord` subclass this cache builds.
        strict: Validate attributes through the record model before building.
            Rejections raise `InvalidAttributes` and leave the cache untouched.
    """

    def __init__(self, record_type: Type[R], *, strict: bool = False) -> None:
        if not (isinstance(record_type, type) and issubclass(record_type, IntrinsicRecord)):
            raise ValidationError(
                f"{record_type!r} is not an IntrinsicRecord subclass",
                ["Subclass flyweight.IntrinsicRecord and declare the intrinsic fields"],
                {
                    "expected_type": "IntrinsicRecord",
                    "actual_type": getattr(record_type, "__name__", str(record_type)),
                },
            )
        self._record_type = record_type
        self._strict = strict
        self._repository: ThreadSafeLocalStorage[FlyweightKey, R] = ThreadSafeLocalStorage()
        self._hits = 0
        self._misses = 0
        self._observers: List[Observer] = []
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Initialized FlyweightCache for %s (strict=%s)",
                get_type_name(record_type),
                strict,
            )

    def _get_mapping(self) -> Mapping[FlyweightKey, R]:
        return self._repository

    @property
    def record_type(self) -> Type[R]:
        return self._record_type

    @property
    def strict(self) -> bool:
        return self._strict

    # -----------------------------------------------------------------------------
    # Acquire
    # -----------------------------------------------------------------------------

    def _normalize(self, attributes: Tuple[Any, ...]) -> Tuple[Any, ...]:
        # acquire(("a", "b")) and acquire("a", "b") are the same request
        if (
            len(attributes) == 1
            and isinstance(attributes[0], (tuple, list))
            and len(self._record_type.field_names()) != 1
        ):
            return tuple(attributes[0])
        return attributes

    def _check_arity(self, values: Tuple[Any, ...]) -> None:
        names = self._record_type.field_names()
        if len(values) != len(names):
            raise InvalidAttributes(
                f"{self._record_type.label()} takes {len(names)} attributes, got {len(values)}",
                [f"Pass attributes in order: {', '.join(names)}"],
                {
                    "record_type": get_type_name(self._record_type),
                    "expected": len(names),
                    "received": len(values),
                },
            )

    def _resolve(self, attributes: Tuple[Any, ...]) -> Tuple[FlyweightKey, Optional[R]]:
        """Return the key for `attributes` and, in strict mode, the validated record.

        Strict keys are built from the validated values, so inputs the model
        coerces to the same attributes share one key.
        """
        values = self._normalize(attributes)
        self._check_arity(values)
        if not self._strict:
            return make_key(self._record_type, values), None
        record = self._record_type.from_attributes(values, validate=True)
        return make_key(self._record_type, record.attributes()), record

    def acquire_with_status(self, *attributes: Any) -> AcquireResult[R]:
        """Return the shared record for `attributes` and whether it was created.

        Raises:
            InvalidAttributes: on arity mismatch, unhashable values or, in
                strict mode, values the record model rejects.
        """
        key, validated = self._resolve(attributes)

        def build() -> R:
            if validated is not None:
                return validated
            return self._record_type.from_attributes(key[1])

        with self._repository.lock:
            record, created = self._insert_flyweight(key, build)
            if created:
                self._misses += 1
            else:
                self._hits += 1

        result = AcquireResult(record=record, created=created, key=key)
        logger.info(
            "%s %s: %s",
            "Creating new" if created else "Reusing existing",
            get_type_name(self._record_type),
            describe_key(key),
        )
        for observer in list(self._observers):
            observer(result)
        return result

    def acquire(self, *attributes: Any) -> R:
        """Return the shared record for `attributes`, creating it on first request."""
        return self.acquire_with_status(*attributes).record

    # -----------------------------------------------------------------------------
    # Diagnostics
    # -----------------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call `observer` with each `AcquireResult`; return an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    @property
    def stats(self) -> CacheStats:
        with self._repository.lock:
            return CacheStats(
                hits=self._hits, misses=self._misses, size=self._len_mapping()
            )

    # -----------------------------------------------------------------------------
    # Read-only access
    # -----------------------------------------------------------------------------

    def get(self, *attributes: Any) -> R:
        """Return the cached record for `attributes` without creating one.

        Raises:
            CacheLookupError: if no record was acquired for `attributes`.
            InvalidAttributes: if `attributes` cannot form a key.
        """
        key, _ = self._resolve(attributes)
        return self._get_flyweight(key)

    def __contains__(self, attributes: Any) -> bool:
        # same request forms as acquire(attributes)
        try:
            key, _ = self._resolve((attributes,))
        except InvalidAttributes:
            return False
        return self._has_key(key)

    def __len__(self) -> int:
        return self._len_mapping()

    def __iter__(self) -> Iterator[FlyweightKey]:
        return self._iter_mapping()

    def keys(self) -> List[FlyweightKey]:
        return list(self._get_mapping().keys())

    def values(self) -> List[R]:
        return list(self._get_mapping().values())

    def render(self, handle: R, context: ExtrinsicContext) -> str:
        """Render `handle` with per-use `context`. Does not touch the cache."""
        return render(handle, context)

    def __repr__(self) -> str:
        return (
            f"{get_type_name(type(self))}({get_type_name(self._record_type)}, "
            f"size={len(self)}, strict={self._strict})"
        )
