"""
Kitchen Service - client code for the meal families.

Only talks to MealFactory and the product roles, so swapping the active
theme means passing a different factory.
"""

import logging
from typing import Dict, Optional, Union

from ..families import MealFactory, Theme
from ..models import Meal
from ..registry import FactoryRegistry, get_registry

logger = logging.getLogger(__name__)


class KitchenService:
    """
    Orders and serves meals from one factory.

    Design Pattern: Facade Pattern
    The factory is injected; the service never names a concrete theme.
    """

    def __init__(self, factory: MealFactory):
        """
        Initialize kitchen service.

        Args:
            factory: Factory for the active theme
        """
        self._factory = factory

    @classmethod
    def from_theme(cls,
                   theme: Union[Theme, str],
                   registry: Optional[FactoryRegistry] = None) -> 'KitchenService':
        """
        Build a service for a theme looked up in a registry.

        Args:
            theme: Theme identifier
            registry: Registry to look the theme up in (process-wide one if None)

        Raises:
            ThemeLookupError: If the theme is not registered
        """
        if registry is None:
            registry = get_registry()
        return cls(registry.get_factory(theme))

    @property
    def theme(self) -> str:
        """Return the active theme"""
        return self._factory.theme

    def order_meal(self) -> Meal:
        """
        Create a fresh meal from the active factory.

        Returns:
            Meal with one product per role
        """
        meal = self._factory.create_meal()
        logger.info(f"Ordered {meal.theme} meal: "
                    f"{meal.primary.name}, {meal.side.name}, {meal.beverage.name}")
        return meal

    def serve(self, meal: Optional[Meal] = None) -> Dict[str, str]:
        """
        Prepare a meal.

        Args:
            meal: Meal to serve (a new one is ordered if None)

        Returns:
            Preparation descriptions keyed by role
        """
        meal = meal or self.order_meal()
        return meal.serve()
