"""Public API for the cache mixins package.

Exports:
    CacheAccessorMixin: read-only cache interface.
    CacheInserterMixin: insertion-only write side over accessor.
"""

from .accessor import CacheAccessorMixin
from .inserter import CacheInserterMixin

__all__ = [
    "CacheAccessorMixin",
    "CacheInserterMixin",
]
