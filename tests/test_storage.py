import threading

import pytest

from flyweight import CarModel, FlyweightCache, ThreadSafeLocalStorage


class TestThreadSafeLocalStorage:
    def test_mapping_protocol(self):
        storage = ThreadSafeLocalStorage[str, int]()
        storage.insert_if_absent("a", lambda: 1)
        assert "a" in storage
        assert storage["a"] == 1
        assert len(storage) == 1
        assert list(storage) == ["a"]
        assert dict(storage.items()) == {"a": 1}

    def test_is_insertion_only(self):
        storage = ThreadSafeLocalStorage[str, int]()
        storage.insert_if_absent("a", lambda: 1)
        assert not hasattr(storage, "clear")
        with pytest.raises(TypeError):
            storage["a"] = 2
        with pytest.raises(TypeError):
            del storage["a"]
        assert storage["a"] == 1

    def test_insert_if_absent(self):
        storage = ThreadSafeLocalStorage[str, object]()
        first, created = storage.insert_if_absent("k", object)
        assert created
        second, created = storage.insert_if_absent("k", object)
        assert not created
        assert second is first

    def test_factory_not_called_on_hit(self):
        storage = ThreadSafeLocalStorage[str, int]()
        storage.insert_if_absent("k", lambda: 1)
        calls = []
        value, _ = storage.insert_if_absent("k", lambda: calls.append(1) or 2)
        assert value == 1
        assert calls == []

    def test_failing_factory_stores_nothing(self):
        storage = ThreadSafeLocalStorage[str, int]()

        def boom() -> int:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            storage.insert_if_absent("k", boom)
        assert "k" not in storage

    def test_views_are_snapshots(self):
        storage = ThreadSafeLocalStorage[str, int]()
        storage.insert_if_absent("a", lambda: 1)
        keys = storage.keys()
        storage.insert_if_absent("b", lambda: 2)
        assert list(keys) == ["a"]


class TestConcurrentAcquire:
    def test_concurrent_first_requests_build_one_instance(self):
        cache = FlyweightCache(CarModel)
        workers = 16
        barrier = threading.Barrier(workers)
        results = [None] * workers

        def work(i: int) -> None:
            barrier.wait()
            results[i] = cache.acquire_with_status("Model S", "Tesla", "Electric")

        threads = [threading.Thread(target=work, args=(i,)) for i in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sum(r.created for r in results) == 1
        assert all(r.record is results[0].record for r in results)
        assert cache.stats.hits == workers - 1
        assert len(cache) == 1
