"""Shared fixtures for patternkit tests."""

import pytest

from patternkit.families import MealFactory, Burger, Fries, Drink
from patternkit.registry import build_default_registry, reset_registry


@pytest.fixture(autouse=True)
def fresh_process_registry():
    """Each test starts and ends without a process-wide registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def registry():
    """A private registry holding the built-in themes."""
    return build_default_registry()


class MexicanBurger(Burger):
    theme = "mexican"

    @property
    def name(self):
        return "Chipotle Burger"

    def prepare(self):
        return "Grilling a patty with chipotle mayo and jalapenos"


class MexicanFries(Fries):
    theme = "mexican"

    @property
    def name(self):
        return "Chili Fries"

    def prepare(self):
        return "Frying potatoes and dusting them with chili-lime salt"


class MexicanDrink(Drink):
    theme = "mexican"

    @property
    def name(self):
        return "Horchata"

    def pour(self):
        return "Pouring a cold horchata with cinnamon"


class MexicanMealFactory(MealFactory):
    """Theme defined outside the package, used to check open extension."""

    @property
    def theme(self):
        return "mexican"

    def create_primary(self):
        return MexicanBurger()

    def create_side(self):
        return MexicanFries()

    def create_beverage(self):
        return MexicanDrink()


@pytest.fixture
def mexican_factory():
    return MexicanMealFactory()
