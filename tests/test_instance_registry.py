"""Tests for the instance registry (singleton mechanism)."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from patternkit.exceptions import ConstructionError
from patternkit.registry import InstanceRegistry, singleton


class CountingResource:
    """Guarded resource that counts constructions and builds itself slowly."""

    constructions = 0
    _count_lock = threading.Lock()

    def __init__(self, label="default"):
        with CountingResource._count_lock:
            CountingResource.constructions += 1
        self.ready = False
        self.label = label
        # Widen the window in which a second constructor could sneak in
        time.sleep(0.01)
        self.parts = [1, 2, 3]
        self.ready = True


@pytest.fixture(autouse=True)
def reset_counter():
    CountingResource.constructions = 0
    yield


class TestInstanceRegistry:
    """Test cases for InstanceRegistry."""

    def test_lazy_construction(self):
        """Nothing is built until the first access."""
        registry = InstanceRegistry(CountingResource)

        assert not registry.is_initialized
        assert CountingResource.constructions == 0

        instance = registry.get_instance()

        assert registry.is_initialized
        assert isinstance(instance, CountingResource)
        assert CountingResource.constructions == 1

    def test_repeated_access_returns_same_instance(self):
        """Re-access never constructs again."""
        registry = InstanceRegistry(CountingResource)

        first = registry.get_instance()
        for _ in range(100):
            assert registry.get_instance() is first

        assert CountingResource.constructions == 1

    def test_eager_construction(self):
        """eager=True builds inside __init__."""
        registry = InstanceRegistry(CountingResource, eager=True)

        assert registry.is_initialized
        assert CountingResource.constructions == 1
        registry.get_instance()
        assert CountingResource.constructions == 1

    def test_default_construction_arguments(self):
        """Arguments given to the registry reach the constructor."""
        registry = InstanceRegistry(CountingResource, label="configured")

        assert registry.get_instance().label == "configured"

    def test_first_call_arguments_win(self):
        """Construction arguments are only consumed by the first call."""
        registry = InstanceRegistry(CountingResource)

        first = registry.get_instance(label="first")
        second = registry.get_instance(label="second")

        assert first is second
        assert second.label == "first"
        assert CountingResource.constructions == 1

    def test_concurrent_first_access_builds_once(self):
        """Many threads racing on first access all get the same instance."""
        registry = InstanceRegistry(CountingResource)
        workers = 32
        barrier = threading.Barrier(workers)

        def access():
            barrier.wait()
            return registry.get_instance()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: access(), range(workers)))

        assert CountingResource.constructions == 1
        assert all(result is results[0] for result in results)

    def test_no_partially_constructed_instance_is_observed(self):
        """Every observer sees a fully initialized instance."""
        registry = InstanceRegistry(CountingResource)
        workers = 16
        barrier = threading.Barrier(workers)
        observed = []

        def access():
            barrier.wait()
            for _ in range(50):
                instance = registry.get_instance()
                observed.append((instance.ready, list(instance.parts)))

        threads = [threading.Thread(target=access) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(observed) == workers * 50
        assert all(ready and parts == [1, 2, 3] for ready, parts in observed)

    def test_none_is_a_valid_instance(self):
        """A constructor returning None still counts as constructed."""
        calls = []

        def build():
            calls.append(1)
            return None

        registry = InstanceRegistry(build)

        assert registry.get_instance() is None
        assert registry.get_instance() is None
        assert registry.is_initialized
        assert len(calls) == 1

    def test_reset_allows_new_construction(self):
        """reset() drops the instance; the next access builds a new one."""
        registry = InstanceRegistry(CountingResource)
        first = registry.get_instance()

        registry.reset()

        assert not registry.is_initialized
        second = registry.get_instance()
        assert second is not first
        assert CountingResource.constructions == 2

    def test_repr_shows_state(self):
        registry = InstanceRegistry(CountingResource, name="resource")

        assert "empty" in repr(registry)
        registry.get_instance()
        assert "initialized" in repr(registry)


class TestConstructionFailure:
    """Test cases for failed construction."""

    def test_failure_raises_construction_error(self):
        """The original error is chained onto ConstructionError."""
        def broken():
            raise RuntimeError("disk on fire")

        registry = InstanceRegistry(broken, name="broken resource")

        with pytest.raises(ConstructionError) as exc_info:
            registry.get_instance()

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "broken resource" in str(exc_info.value)
        assert exc_info.value.details["error"] == "RuntimeError"

    def test_failure_publishes_nothing_and_retry_succeeds(self):
        """A failed construction leaves the registry empty; the next call retries."""
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise ValueError("first attempt fails")
            return CountingResource()

        registry = InstanceRegistry(flaky)

        with pytest.raises(ConstructionError):
            registry.get_instance()
        assert not registry.is_initialized

        instance = registry.get_instance()
        assert instance.ready
        assert len(attempts) == 2
        assert registry.get_instance() is instance

    def test_construction_error_passes_through_unwrapped(self):
        def broken():
            raise ConstructionError("already wrapped")

        registry = InstanceRegistry(broken)

        with pytest.raises(ConstructionError, match="already wrapped") as exc_info:
            registry.get_instance()
        assert exc_info.value.__cause__ is None

    def test_eager_failure_raises_from_init(self):
        def broken():
            raise OSError("no resource")

        with pytest.raises(ConstructionError):
            InstanceRegistry(broken, eager=True)


class TestSingletonDecorator:
    """Test cases for the singleton class decorator."""

    def test_get_instance_returns_same_object(self):
        @singleton
        class Settings:
            def __init__(self, value=1):
                self.value = value

        first = Settings.get_instance(5)
        second = Settings.get_instance(9)

        assert first is second
        assert second.value == 5
        assert Settings.has_instance()

    def test_decorated_classes_are_isolated(self):
        @singleton
        class First:
            pass

        @singleton
        class Second:
            pass

        assert First.get_instance() is not Second.get_instance()
        assert isinstance(First.get_instance(), First)

    def test_reset_instance(self):
        @singleton
        class Cache:
            pass

        first = Cache.get_instance()
        Cache.reset_instance()

        assert not Cache.has_instance()
        assert Cache.get_instance() is not first

    def test_undecorated_subclass_does_not_share_parent_instance(self):
        """Accessors refuse to hand a subclass its parent's instance."""
        @singleton
        class Base:
            pass

        class Child(Base):
            pass

        with pytest.raises(TypeError, match="Child"):
            Child.get_instance()
        with pytest.raises(TypeError):
            Child.has_instance()
        with pytest.raises(TypeError):
            Child.reset_instance()
        assert not Base.has_instance()

    def test_decorated_subclass_gets_its_own_instance(self):
        @singleton
        class Base:
            pass

        @singleton
        class Child(Base):
            pass

        child = Child.get_instance()

        assert type(child) is Child
        assert child is not Base.get_instance()
        assert Child.get_instance() is child
