"""Utility exceptions and helpers for the flyweight cache.

This module defines a small hierarchy of rich exceptions used throughout the
cache accessor/inserter mixins, plus simple helpers.

Exceptions:
    ValidationError: Base class carrying `suggestions` and `context` metadata.
    InvalidAttributes: Raised when an intrinsic attribute tuple is rejected.
    CacheError: Raised when mapping errors occur.
    CacheLookupError: Raised when a key is not present in the cache.

Helpers:
    get_type_name(cls, qualname=False): Return a human-readable type name.
"""

import logging
from inspect import isclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Base exception for validation with structured context.

    Attributes:
        message: Human-readable error text.
        suggestions: List of short, imperative hints for remediation.
        context: Free-form key/value details safe to log and render.
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}
        super().__init__(self._build_enhanced_message())

    def _build_enhanced_message(self) -> str:
        """Embed key context and suggestions into the exception string."""
        lines = [self.message]

        if self.context:
            if "expected_type" in self.context and "actual_type" in self.context:
                lines.append(f"  Expected: {self.context['expected_type']}")
                lines.append(f"  Actual: {self.context['actual_type']}")
            if "record_type" in self.context:
                lines.append(f"  Record: {self.context['record_type']}")

        if self.suggestions:
            lines.append("  Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"    • {suggestion}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self._build_enhanced_message()


class InvalidAttributes(ValidationError, ValueError):
    """Raised when an intrinsic attribute tuple cannot key or build a flyweight."""


class CacheError(ValidationError):
    """Raised for key-related mapping errors with rich context attached."""


class CacheLookupError(CacheError, KeyError):
    """Raised when a key is not present in the cache."""


def get_type_name(cls: type, qualname: bool = False) -> str:
    """Return a readable name for a type.

    Args:
        cls: The class or type object.
        qualname: If True, return the qualified name when available.

    Returns:
        The type's `__qualname__`, `__name__`, or a string fallback.
    """
    if not isclass(cls):
        raise ValidationError(f"{cls} is not a class")
    if qualname and hasattr(cls, "__qualname__"):
        return getattr(cls, "__qualname__")
    elif hasattr(cls, "__name__"):
        return getattr(cls, "__name__")
    else:
        return str(cls)
