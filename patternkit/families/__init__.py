"""
Themed product families - Abstract Factory Pattern.
Each theme (American, Italian) has its own factory and products.
"""

from .base_family import (
    Theme,
    normalize_theme,
    Product,
    Burger,
    Fries,
    Drink,
    MealFactory,
)
from .american_family import AmericanMealFactory, AmericanBurger, AmericanFries, AmericanDrink
from .italian_family import ItalianMealFactory, ItalianBurger, ItalianFries, ItalianDrink

__all__ = [
    'Theme',
    'normalize_theme',
    'Product',
    'Burger',
    'Fries',
    'Drink',
    'MealFactory',
    'AmericanMealFactory',
    'AmericanBurger',
    'AmericanFries',
    'AmericanDrink',
    'ItalianMealFactory',
    'ItalianBurger',
    'ItalianFries',
    'ItalianDrink',
]
