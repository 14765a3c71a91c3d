"""
patternkit

Reusable building blocks for two object-oriented design patterns:

- Singleton: InstanceRegistry guards one live instance of a resource,
  with safe concurrent first access (double-checked locking) or eager
  construction.
- Abstract Factory: FactoryRegistry maps a theme to a MealFactory that
  produces a consistent family (burger, fries, drink) of that theme.

Architecture:
- Singleton Pattern for the instance registry
- Abstract Factory Pattern for themed product families
- Registry Pattern for theme lookup
- Facade Pattern for the kitchen service
- Value Object Pattern for meals
"""

__version__ = "1.0.0"

from .exceptions import (
    PatternKitError,
    ConstructionError,
    ThemeLookupError,
    RegistrationError,
    FamilyMismatchError,
    ConfigurationError,
)
from .models import Meal
from .families import (
    Theme,
    Product,
    Burger,
    Fries,
    Drink,
    MealFactory,
    AmericanMealFactory,
    ItalianMealFactory,
)
from .registry import (
    InstanceRegistry,
    singleton,
    FactoryRegistry,
    get_registry,
    get_factory,
    reset_registry,
)
from .services import KitchenService
from .formatters import MealFormatter

__all__ = [
    # Errors
    "PatternKitError",
    "ConstructionError",
    "ThemeLookupError",
    "RegistrationError",
    "FamilyMismatchError",
    "ConfigurationError",
    # Models
    "Meal",
    # Families
    "Theme",
    "Product",
    "Burger",
    "Fries",
    "Drink",
    "MealFactory",
    "AmericanMealFactory",
    "ItalianMealFactory",
    # Registries
    "InstanceRegistry",
    "singleton",
    "FactoryRegistry",
    "get_registry",
    "get_factory",
    "reset_registry",
    # Services
    "KitchenService",
    # Formatters
    "MealFormatter",
]
