"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..models import Meal


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, table, JSON).
    """

    @abstractmethod
    def format(self, meal: Meal) -> str:
        """
        Format a meal for output.

        Args:
            meal: Meal to format

        Returns:
            Formatted string for output
        """
        pass
