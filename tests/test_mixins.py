from typing import Dict

import pytest

from flyweight import CacheError, CacheLookupError, ThreadSafeLocalStorage
from flyweight.mixin import CacheAccessorMixin, CacheInserterMixin


# -------------------------------------------------------------------
# Test classes for CacheAccessorMixin
# -------------------------------------------------------------------


class TestCacheAccessorMixin:
    """Tests for CacheAccessorMixin."""

    class DummyAccessor(CacheAccessorMixin[str, int]):
        """Concrete implementation of CacheAccessorMixin for testing."""

        def __init__(self) -> None:
            self._repository: Dict[str, int] = {"a": 1, "b": 2, "c": 3}

        def _get_mapping(self) -> Dict[str, int]:
            return self._repository

    @pytest.fixture
    def accessor(self):
        return self.DummyAccessor()

    def test_len_mapping(self, accessor):
        assert accessor._len_mapping() == 3

    def test_iter_mapping(self, accessor):
        assert set(accessor._iter_mapping()) == {"a", "b", "c"}

    def test_get_flyweight(self, accessor):
        assert accessor._get_flyweight("b") == 2

    def test_get_flyweight_missing(self, accessor):
        with pytest.raises(CacheLookupError) as exc_info:
            accessor._get_flyweight("z")
        assert exc_info.value.context["cache_type"] == "DummyAccessor"
        assert exc_info.value.context["cache_size"] == 3

    def test_assert_presence_returns_mapping(self, accessor):
        assert accessor._assert_presence("a") is accessor._repository

    def test_assert_presence_missing(self, accessor):
        with pytest.raises(CacheLookupError) as exc_info:
            accessor._assert_presence("z")
        assert exc_info.value.context["operation"] == "assert_presence"
        assert exc_info.value.context["key"] == "z"

    def test_has_key(self, accessor):
        assert accessor._has_key("a")
        assert not accessor._has_key("z")

    def test_get_mapping_is_abstract(self):
        class Bare(CacheAccessorMixin[str, int]):
            pass

        with pytest.raises(NotImplementedError):
            Bare()._len_mapping()


# -------------------------------------------------------------------
# Test classes for CacheInserterMixin
# -------------------------------------------------------------------


class TestCacheInserterMixin:
    """Tests for CacheInserterMixin."""

    class DummyInserter(CacheInserterMixin[str, object]):
        def __init__(self, mapping) -> None:
            self._repository = mapping

        def _get_mapping(self):
            return self._repository

    def test_insert_then_reuse(self):
        inserter = self.DummyInserter(ThreadSafeLocalStorage())
        first, created = inserter._insert_flyweight("k", object)
        assert created
        again, created = inserter._insert_flyweight("k", object)
        assert not created
        assert again is first
        assert inserter._get_flyweight("k") is first

    def test_plain_dict_has_no_atomic_insert(self):
        inserter = self.DummyInserter({})
        with pytest.raises(CacheError) as exc_info:
            inserter._insert_flyweight("k", object)
        assert exc_info.value.context["actual_type"] == "dict"
