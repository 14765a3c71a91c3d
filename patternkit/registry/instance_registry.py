"""
Instance Registry - Singleton Pattern implementation.

Owns the single live instance of a guarded resource and hands the same
object to every caller, including concurrent first callers.
"""

import logging
import threading
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from ..exceptions import ConstructionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks "not constructed yet"; None is a legal instance value
_UNSET: Any = object()


class InstanceRegistry(Generic[T]):
    """
    Registry guarding a single instance of a resource.

    Design Pattern: Singleton Pattern (double-checked locking)
    The lock is taken only while the instance is missing. Once the reference
    is published, get_instance() is a plain attribute read.

    Lifecycle:
    - lazy (default): constructed on the first get_instance() call
    - eager: constructed inside __init__, so no caller ever waits on the lock
    - reset(): explicit teardown, meant for tests and controlled re-initialization

    A failed construction raises ConstructionError to the caller that
    triggered it, publishes nothing, and the next call tries again.
    """

    def __init__(self,
                 constructor: Callable[..., T],
                 *args: Any,
                 eager: bool = False,
                 name: Optional[str] = None,
                 **kwargs: Any):
        """
        Initialize registry.

        Args:
            constructor: Callable building the guarded resource
            *args: Default positional construction arguments
            eager: Construct immediately instead of on first access
            name: Name used in log and error messages
            **kwargs: Default keyword construction arguments
        """
        self._constructor = constructor
        self._args = args
        self._kwargs = kwargs
        self._name = name or getattr(constructor, "__qualname__", repr(constructor))
        self._lock = threading.Lock()
        self._instance: T = _UNSET

        if eager:
            self.get_instance()

    @property
    def name(self) -> str:
        """Return registry name"""
        return self._name

    @property
    def is_initialized(self) -> bool:
        """True once an instance has been published"""
        return self._instance is not _UNSET

    def get_instance(self, *args: Any, **kwargs: Any) -> T:
        """
        Return the guarded instance, constructing it on first access.

        Arguments are only used by the call that actually constructs the
        instance; they replace the defaults given to __init__. Later calls
        ignore them.

        Returns:
            The shared instance

        Raises:
            ConstructionError: If construction fails
        """
        instance = self._instance
        if instance is not _UNSET:
            if args or kwargs:
                logger.debug(f"{self._name} already constructed, ignoring construction arguments")
            return instance

        with self._lock:
            # Another thread may have published while we waited
            if self._instance is _UNSET:
                self._instance = self._construct(args, kwargs)
            return self._instance

    def _construct(self, args: tuple, kwargs: dict) -> T:
        """Build the instance; caller holds the lock"""
        if not args and not kwargs:
            args, kwargs = self._args, self._kwargs

        logger.debug(f"Constructing {self._name}")
        try:
            instance = self._constructor(*args, **kwargs)
        except ConstructionError:
            logger.error(f"Construction of {self._name} failed")
            raise
        except Exception as e:
            logger.error(f"Construction of {self._name} failed: {e}")
            raise ConstructionError(
                f"Failed to construct {self._name}: {e}",
                details={"name": self._name, "error": type(e).__name__}
            ) from e

        logger.info(f"Constructed {self._name}")
        return instance

    def reset(self) -> None:
        """
        Discard the published instance.

        The next get_instance() call constructs a new one. Callers still
        holding the old object keep it; nothing is torn down on it.
        """
        with self._lock:
            if self._instance is not _UNSET:
                logger.debug(f"Resetting {self._name}")
            self._instance = _UNSET

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized else "empty"
        return f"InstanceRegistry({self._name!r}, {state})"


def singleton(cls: Type[T]) -> Type[T]:
    """
    Class decorator attaching an InstanceRegistry to a class.

    Adds:
        Cls.get_instance(*args, **kwargs) - get or create the shared instance
        Cls.reset_instance() - drop it (tests, teardown)
        Cls.has_instance() - check whether it exists

    Calling Cls(...) directly still builds a fresh object; only
    get_instance() goes through the registry.

    The accessors belong to the decorated class only. A subclass must be
    decorated itself; calling them through an undecorated subclass raises
    TypeError instead of handing out the parent's instance.
    """
    registry: InstanceRegistry[T] = InstanceRegistry(cls, name=cls.__qualname__)

    def _registry_for(klass) -> InstanceRegistry[T]:
        if klass is not cls:
            raise TypeError(
                f"{klass.__qualname__} inherits from @singleton class {cls.__qualname__} "
                f"but is not decorated itself"
            )
        return registry

    def get_instance(klass, *args: Any, **kwargs: Any) -> T:
        return _registry_for(klass).get_instance(*args, **kwargs)

    def reset_instance(klass) -> None:
        _registry_for(klass).reset()

    def has_instance(klass) -> bool:
        return _registry_for(klass).is_initialized

    cls._instance_registry = registry
    cls.get_instance = classmethod(get_instance)
    cls.reset_instance = classmethod(reset_instance)
    cls.has_instance = classmethod(has_instance)
    return cls
