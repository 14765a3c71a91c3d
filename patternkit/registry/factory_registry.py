"""
Factory Registry - Abstract Factory + Registry Pattern implementation.
Maps theme identifiers to meal factories.
"""

import logging
import threading
from typing import Dict, List, Optional, Union

from ..exceptions import RegistrationError, ThemeLookupError
from ..families import (
    Theme,
    MealFactory,
    AmericanMealFactory,
    ItalianMealFactory,
    normalize_theme,
)
from .instance_registry import InstanceRegistry

logger = logging.getLogger(__name__)


class FactoryRegistry:
    """
    Registry of meal factories keyed by theme.

    Design Pattern: Registry Pattern
    New themes are added by registering another MealFactory; existing
    factories and client code stay untouched. Unknown themes are an error,
    there is no fallback theme.
    """

    def __init__(self, factories: Optional[List[MealFactory]] = None):
        """
        Initialize registry.

        Args:
            factories: Optional factories to register up front
        """
        self._factories: Dict[str, MealFactory] = {}
        self._lock = threading.Lock()

        for factory in factories or []:
            self.register(factory.theme, factory)

    def register(self, theme: Union[Theme, str], factory: MealFactory, replace: bool = False):
        """
        Register a factory for a theme.

        Args:
            theme: Theme identifier
            factory: Factory producing that theme's products
            replace: Allow overwriting an existing registration

        Raises:
            RegistrationError: If the identifier is invalid, the theme is taken
                or the factory produces another theme
        """
        try:
            key = normalize_theme(theme)
        except ValueError as e:
            raise RegistrationError(str(e), details={"theme": theme}) from e

        if not isinstance(factory, MealFactory):
            raise RegistrationError(f"Expected a MealFactory for theme '{key}', got {type(factory).__name__}")

        try:
            factory_theme = normalize_theme(factory.theme)
        except ValueError as e:
            raise RegistrationError(
                f"Factory {type(factory).__name__} has an invalid theme: {e}",
                details={"theme": key, "factory_theme": factory.theme}
            ) from e

        if factory_theme != key:
            raise RegistrationError(
                f"Factory {type(factory).__name__} produces theme '{factory.theme}', cannot register it as '{key}'",
                details={"theme": key, "factory_theme": factory.theme}
            )

        with self._lock:
            if key in self._factories and not replace:
                raise RegistrationError(f"Theme already registered: {key}", details={"theme": key})
            self._factories[key] = factory

        logger.info(f"Registered factory for theme: {key}")

    def unregister(self, theme: Union[Theme, str]) -> MealFactory:
        """
        Remove a theme registration.

        Returns:
            The factory that was registered

        Raises:
            ThemeLookupError: If the theme is not registered or the identifier is invalid
        """
        try:
            key = normalize_theme(theme)
        except ValueError as e:
            raise ThemeLookupError(str(e), details={"theme": theme}) from e

        with self._lock:
            factory = self._factories.pop(key, None)

        if factory is None:
            raise self._lookup_error(key)

        logger.info(f"Unregistered factory for theme: {key}")
        return factory

    def get_factory(self, theme: Union[Theme, str]) -> MealFactory:
        """
        Get the factory for a theme.

        Args:
            theme: Theme identifier

        Returns:
            Registered factory

        Raises:
            ThemeLookupError: If no factory is registered for the theme
        """
        try:
            key = normalize_theme(theme)
        except ValueError as e:
            raise ThemeLookupError(str(e), details={"theme": theme}) from e

        factory = self._factories.get(key)
        if factory is None:
            logger.warning(f"Unknown theme requested: {key}")
            raise self._lookup_error(key)

        logger.debug(f"Resolved factory for theme: {key}")
        return factory

    def get_available(self) -> List[str]:
        """
        Get registered themes.

        Returns:
            Sorted list of theme identifiers
        """
        return sorted(self._factories.keys())

    def _lookup_error(self, key: str) -> ThemeLookupError:
        available = self.get_available()
        return ThemeLookupError(
            f"Unknown theme: {key}. Available: {available}",
            details={"theme": key, "available": available}
        )

    def __contains__(self, theme) -> bool:
        try:
            return normalize_theme(theme) in self._factories
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._factories)


def build_default_registry() -> FactoryRegistry:
    """Create a registry holding the built-in themes"""
    return FactoryRegistry([AmericanMealFactory(), ItalianMealFactory()])


# Process-wide registry. Built lazily on first access; reset_registry() is the
# teardown hook, used by tests.
_default_registry: InstanceRegistry[FactoryRegistry] = InstanceRegistry(
    build_default_registry,
    name="default FactoryRegistry"
)


def get_registry() -> FactoryRegistry:
    """Get the process-wide factory registry"""
    return _default_registry.get_instance()


def get_factory(theme: Union[Theme, str]) -> MealFactory:
    """Shortcut for get_registry().get_factory(theme)"""
    return get_registry().get_factory(theme)


def reset_registry() -> None:
    """Drop the process-wide registry; the next access rebuilds the defaults"""
    _default_registry.reset()
