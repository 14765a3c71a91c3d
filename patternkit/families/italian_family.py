"""
Italian meal family - Abstract Factory implementation.
"""

import logging

from .base_family import Burger, Fries, Drink, MealFactory, Theme

logger = logging.getLogger(__name__)

THEME = Theme.ITALIAN.value


class ItalianBurger(Burger):
    theme = THEME

    @property
    def name(self) -> str:
        return "Caprese Burger"

    def prepare(self) -> str:
        return "Searing a patty with mozzarella, tomato and basil pesto on ciabatta"


class ItalianFries(Fries):
    theme = THEME

    @property
    def name(self) -> str:
        return "Rosemary Fries"

    def prepare(self) -> str:
        return "Frying potato wedges in olive oil with rosemary and parmesan"


class ItalianDrink(Drink):
    theme = THEME

    @property
    def name(self) -> str:
        return "Chinotto"

    def pour(self) -> str:
        return "Pouring a chilled chinotto with a slice of orange"


class ItalianMealFactory(MealFactory):
    """
    Factory producing the Italian family.

    Design Pattern: Abstract Factory Pattern implementation
    """

    @property
    def theme(self) -> str:
        return THEME

    def create_primary(self) -> Burger:
        logger.debug("Creating Italian burger")
        return ItalianBurger()

    def create_side(self) -> Fries:
        logger.debug("Creating Italian fries")
        return ItalianFries()

    def create_beverage(self) -> Drink:
        logger.debug("Creating Italian drink")
        return ItalianDrink()
