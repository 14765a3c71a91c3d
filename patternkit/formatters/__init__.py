"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .meal_formatter import MealFormatter

__all__ = ['OutputFormatter', 'MealFormatter']
