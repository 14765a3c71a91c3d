"""
Data models and value objects.
"""

from .meal import Meal

__all__ = ['Meal']
