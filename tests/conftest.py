"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import List

import pytest
from pydantic import Field

from flyweight import AcquireResult, CarModel, CarUsage, FlyweightCache, IntrinsicRecord

# =============================================================================
# Fixtures: Fresh Caches
# =============================================================================


@pytest.fixture
def car_cache():
    """A fresh, non-validating cache of car models."""
    return FlyweightCache(CarModel)


@pytest.fixture
def strict_car_cache():
    """A fresh cache that validates attributes before building a model."""
    return FlyweightCache(CarModel, strict=True)


@pytest.fixture
def recorded(car_cache):
    """Every AcquireResult reported by `car_cache`, in order."""
    events: List[AcquireResult] = []
    car_cache.subscribe(events.append)
    return events


# =============================================================================
# Fixtures: Sample Records and Contexts
# =============================================================================


class Part(IntrinsicRecord):
    """Two free-form attributes, used to check separator handling."""

    name: str = Field(title="Name")
    variant: str = Field(title="Variant")


class Glyph(IntrinsicRecord):
    """A single-attribute record."""

    char: str


@pytest.fixture
def part_cache():
    return FlyweightCache(Part)


@pytest.fixture
def glyph_cache():
    return FlyweightCache(Glyph)


@pytest.fixture
def alice():
    return CarUsage(registration_number="TS1234", owner="Alice")


@pytest.fixture
def bob():
    return CarUsage(registration_number="TS5678", owner="Bob")
