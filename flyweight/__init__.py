from ._version import __version__, get_version_info, print_version_info
from .cache import AcquireResult, CacheStats, FlyweightCache
from .keys import FlyweightKey, describe_key, make_key
from .records import CarModel, CarUsage, ExtrinsicContext, IntrinsicRecord, render
from .storage import ThreadSafeLocalStorage
from .utils import (
    CacheError,
    CacheLookupError,
    InvalidAttributes,
    ValidationError,
)

__all__ = [
    "FlyweightCache",
    "AcquireResult",
    "CacheStats",
    "IntrinsicRecord",
    "ExtrinsicContext",
    "CarModel",
    "CarUsage",
    "render",
    "FlyweightKey",
    "make_key",
    "describe_key",
    "ThreadSafeLocalStorage",
    "ValidationError",
    "InvalidAttributes",
    "CacheError",
    "CacheLookupError",
    "get_version_info",
    "print_version_info",
    "__version__",
]
