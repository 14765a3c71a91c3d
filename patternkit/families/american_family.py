"""
American meal family - Abstract Factory implementation.
"""

import logging

from .base_family import Burger, Fries, Drink, MealFactory, Theme

logger = logging.getLogger(__name__)

THEME = Theme.AMERICAN.value


class AmericanBurger(Burger):
    theme = THEME

    @property
    def name(self) -> str:
        return "Cheeseburger"

    def prepare(self) -> str:
        return "Grilling a beef patty with cheddar, pickles and ketchup on a sesame bun"


class AmericanFries(Fries):
    theme = THEME

    @property
    def name(self) -> str:
        return "Shoestring Fries"

    def prepare(self) -> str:
        return "Deep-frying thin-cut potatoes and salting them"


class AmericanDrink(Drink):
    theme = THEME

    @property
    def name(self) -> str:
        return "Cola"

    def pour(self) -> str:
        return "Pouring a large cola over ice"


class AmericanMealFactory(MealFactory):
    """
    Factory producing the American family.

    Design Pattern: Abstract Factory Pattern implementation
    """

    @property
    def theme(self) -> str:
        return THEME

    def create_primary(self) -> Burger:
        logger.debug("Creating American burger")
        return AmericanBurger()

    def create_side(self) -> Fries:
        logger.debug("Creating American fries")
        return AmericanFries()

    def create_beverage(self) -> Drink:
        logger.debug("Creating American drink")
        return AmericanDrink()
