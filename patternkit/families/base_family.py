"""
Base product family - Abstract Factory Pattern.
Defines the product roles every theme must fill and the factory interface
that produces them.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from ..models import Meal


class Theme(Enum):
    """Built-in themes"""
    AMERICAN = "american"
    ITALIAN = "italian"


def normalize_theme(theme: Union[Theme, str]) -> str:
    """
    Normalize a theme identifier.

    Args:
        theme: Theme enum member or theme name (case-insensitive)

    Returns:
        Lower-case theme identifier

    Raises:
        ValueError: If the identifier is empty
    """
    if isinstance(theme, Theme):
        return theme.value
    if not isinstance(theme, str) or not theme.strip():
        raise ValueError(f"Theme identifier must be a non-empty string, got {theme!r}")
    return theme.strip().lower()


class Product(ABC):
    """
    Common base for every product role.

    Concrete products set `theme` as a class attribute so the tag is known
    without building anything.
    """

    role: str = ""
    theme: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return product display name"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(theme={self.theme!r}, name={self.name!r})"


class Burger(Product):
    """Primary-item role"""

    role = "primary"

    @abstractmethod
    def prepare(self) -> str:
        """
        Prepare the burger.

        Returns:
            Human-readable description of the preparation
        """
        pass


class Fries(Product):
    """Side-item role"""

    role = "side"

    @abstractmethod
    def prepare(self) -> str:
        """
        Prepare the side.

        Returns:
            Human-readable description of the preparation
        """
        pass


class Drink(Product):
    """Beverage role"""

    role = "beverage"

    @abstractmethod
    def pour(self) -> str:
        """
        Pour the drink.

        Returns:
            Human-readable description of the pour
        """
        pass


class MealFactory(ABC):
    """
    Abstract base class for themed meal factories.

    Design Pattern: Abstract Factory Pattern
    Each theme implements this interface and only ever returns products of
    its own theme. Client code depends on MealFactory and the role classes,
    never on a concrete theme.
    """

    @property
    @abstractmethod
    def theme(self) -> str:
        """Return theme identifier"""
        pass

    @abstractmethod
    def create_primary(self) -> Burger:
        """Create the primary item"""
        pass

    @abstractmethod
    def create_side(self) -> Fries:
        """Create the side item"""
        pass

    @abstractmethod
    def create_beverage(self) -> Drink:
        """Create the beverage"""
        pass

    def create_meal(self) -> Meal:
        """
        Create one product per role.

        Returns:
            Meal holding a primary, a side and a beverage of this theme
        """
        return Meal(
            theme=self.theme,
            primary=self.create_primary(),
            side=self.create_side(),
            beverage=self.create_beverage()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(theme={self.theme!r})"
