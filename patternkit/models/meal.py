"""
Meal data model - Value Object pattern.
Immutable group of one product per role, all from the same theme.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

from ..exceptions import FamilyMismatchError

if TYPE_CHECKING:
    from ..families.base_family import Burger, Fries, Drink


@dataclass(frozen=True)
class Meal:
    """
    Immutable product family.

    Attributes:
        theme: Theme every product belongs to
        primary: Primary item (burger)
        side: Side item (fries)
        beverage: Beverage (drink)
    """
    theme: str
    primary: 'Burger'
    side: 'Fries'
    beverage: 'Drink'

    def __post_init__(self):
        """Validate invariants"""
        if not self.theme:
            raise ValueError("Meal theme cannot be empty")

        mismatched = {
            role: product.theme
            for role, product in self.items().items()
            if product.theme != self.theme
        }
        if mismatched:
            raise FamilyMismatchError(
                f"Meal of theme '{self.theme}' contains products from other themes: {mismatched}",
                details=mismatched
            )

    def items(self) -> Dict[str, object]:
        """Get products keyed by role"""
        return {
            "primary": self.primary,
            "side": self.side,
            "beverage": self.beverage,
        }

    def serve(self) -> Dict[str, str]:
        """Prepare every item and return the descriptions keyed by role"""
        return {
            "primary": self.primary.prepare(),
            "side": self.side.prepare(),
            "beverage": self.beverage.pour(),
        }
